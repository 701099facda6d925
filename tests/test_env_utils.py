import os

import pytest

from fast_permit.exceptions import EnvInvalidException
from fast_permit.utils.env_utils import configure_env, env_bool


def test_env_bool_parses_common_spellings(monkeypatch):
    monkeypatch.setenv("PERMIT_FLAG", "yes")
    assert env_bool("PERMIT_FLAG", False) is True
    monkeypatch.setenv("PERMIT_FLAG", "Off")
    assert env_bool("PERMIT_FLAG", True) is False
    monkeypatch.delenv("PERMIT_FLAG")
    assert env_bool("PERMIT_FLAG", True) is True


def test_env_bool_rejects_garbage(monkeypatch):
    monkeypatch.setenv("PERMIT_FLAG", "maybe")
    with pytest.raises(EnvInvalidException):
        env_bool("PERMIT_FLAG", True)


def test_configure_env_loads_given_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env.test"
    env_file.write_text("PERMIT_TEST_VALUE=42\n")
    monkeypatch.setenv("PERMIT_TEST_VALUE", "0")

    configure_env(str(env_file))

    assert os.getenv("PERMIT_TEST_VALUE") == "42"
