import logging
import os
from typing import Optional

from dotenv import load_dotenv

from fast_permit.exceptions.common_exceptions import EnvInvalidException

logger = logging.getLogger(__name__)

_TRUE_VALUES = ["1", "true", "yes", "on"]
_FALSE_VALUES = ["0", "false", "no", "off"]


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Configure the application's environment.

    Args:
        env_file_name: Optional environment file name. If None, tries to load from .env.<ENV> then .env.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logger.debug(f"[ENV] Loaded {env_file} file successfully")
            break


def env_bool(env_name: str, default: bool) -> bool:
    value = os.getenv(env_name)
    if value is None or value == "":
        return default
    normalised = value.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    raise EnvInvalidException(env_name, value, _TRUE_VALUES + _FALSE_VALUES)
