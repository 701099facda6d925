import logging
import os
from pathlib import Path

LOGGER_NAME = "fast_permit"

_handlers: list[logging.Handler] = []
_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None, log_dir: Path | str | None = None) -> logging.Logger:
    """
    Attach a file handler (and a console handler when ENV=debug) to the
    `fast_permit` logger.

    Root handlers and `sys.excepthook` belong to the host application and are
    left alone; records still propagate to the root logger.

    Log levels (via LOG_LEVEL):
    - CRITICAL
    - ERROR
    - WARNING
    - INFO
    - DEBUG
    - NOTSET
    """
    global _log_file_path

    log_dir = Path(log_dir) if log_dir else Path(os.getenv('LOG_DIR', Path.cwd() / "log"))
    file_name = log_file_name if log_file_name else os.getenv('LOG_FILE_NAME', 'fast_permit.log')
    log_file = log_dir / file_name

    logger = logging.getLogger(LOGGER_NAME)

    if _handlers and _log_file_path == log_file:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.setLevel(os.getenv('LOG_LEVEL', 'DEBUG').upper())

    # Replace only the handlers installed by a previous call
    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    file_handler = logging.FileHandler(str(log_file), mode='a')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    _handlers.append(file_handler)

    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        _handlers.append(console_handler)

    for handler in _handlers:
        logger.addHandler(handler)

    _log_file_path = log_file
    logger.info("Logging configured successfully")
    return logger


def get_log_file_path() -> Path | None:
    return _log_file_path
