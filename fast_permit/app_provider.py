import logging
from typing import Optional

from fast_permit.core.localization import set_locale_path
from fast_permit.utils.env_utils import configure_env
from fast_permit.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_booted = False


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    locale_path: Optional[str] = None,
):
    """
    Sets up the host application for fast-permit.
    - Loads environment variables (.env.<ENV> / .env, or `env_file_name`)
    - Sets up logging
    - Points message translations at `locale_path` when given

    Record types should be defined (imported) after booting; their
    validator registries freeze on first use.
    """
    global _booted
    if _booted:
        return

    configure_env(env_file_name)
    setup_logging(log_file_name)
    if locale_path:
        set_locale_path(locale_path)

    _booted = True
    logger.debug("[BOOT] fast-permit booted")


def is_booted() -> bool:
    return _booted
