from __future__ import annotations

import logging
import sys

from fast_permit import Record
from fast_permit.utils.logging import LOGGER_NAME, get_log_file_path, setup_logging


def _flush():
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()


def test_logging_uses_custom_file_name(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    custom_name = "module_x.log"
    setup_logging(log_file_name=custom_name, log_dir=tmp_path / "log")

    path = get_log_file_path()
    assert path is not None
    assert path.name == custom_name
    assert path.parent.name == "log"
    assert path.exists()

    logging.getLogger(f"{LOGGER_NAME}.tests").debug("[TEST] hello")
    _flush()
    assert "[TEST] hello" in path.read_text()


def test_library_records_reach_the_log_file(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    setup_logging(log_file_name="registry.log", log_dir=tmp_path)

    class Invoice(Record):
        number: str = None

        class Meta:
            validates = [Record.Validates("number", "validate_length")]

    _flush()
    assert "[REGISTRY] Invoice.number <- validate_length" in (tmp_path / "registry.log").read_text()


def test_host_logging_is_left_alone(tmp_path, monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    root_handlers = list(logging.getLogger().handlers)
    root_level = logging.getLogger().level
    excepthook = sys.excepthook

    setup_logging(log_file_name="host.log", log_dir=tmp_path)
    setup_logging(log_file_name="host_again.log", log_dir=tmp_path)

    assert logging.getLogger().handlers == root_handlers
    assert logging.getLogger().level == root_level
    assert sys.excepthook is excepthook
    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
