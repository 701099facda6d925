"""
Translation of validation messages.

Messages are looked up with dot notation in `<LOCALE_PATH>/<locale>.json`,
falling back to the fallback locale and finally to the supplied default:

    __('validation.required', default="can't be blank")
    __('validation.length.min', {'count': 3}, default='should be at least {count} character(s)')
    set_locale('sk')
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Dict, Any, Optional

from fast_permit import config

logger = logging.getLogger(__name__)

_translations: Dict[str, Dict[str, Any]] = {}
_locale_path: str = config.LOCALE_PATH
_current_locale: ContextVar[str] = ContextVar('locale', default=config.LOCALE_DEFAULT)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[str]:
    current = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache translations for a locale. Idempotent."""
    if locale in _translations:
        return _translations[locale]

    locale_file = Path(_locale_path) / f"{locale}.json"
    translations = {}

    if locale_file.exists():
        try:
            with locale_file.open(encoding='utf-8') as f:
                translations = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning(f"[LOCALE] Cannot load {locale_file}: {exc}")
            translations = {}

    _translations[locale] = translations
    return translations


def __(key: str, parameters: Optional[Dict[str, Any]] = None,
      default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Translate `key` for the current (or given) locale.

    Parameters are applied with `str.format`; a template referencing an unknown
    parameter is returned unformatted.
    """
    current_locale = locale or _current_locale.get()

    translation = _get_nested(_load_locale(current_locale), key)

    if translation is None and current_locale != config.LOCALE_FALLBACK:
        translation = _get_nested(_load_locale(config.LOCALE_FALLBACK), key)

    if translation is None:
        translation = default or key

    if parameters and isinstance(translation, str):
        try:
            translation = translation.format(**parameters)
        except (KeyError, IndexError, ValueError):
            pass

    return str(translation)


def set_locale(locale: str) -> None:
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get()


def clear_cache() -> None:
    _translations.clear()


def set_locale_path(path: str) -> None:
    global _locale_path
    _locale_path = path
    clear_cache()


trans = __

__all__ = ["__", "trans", "set_locale", "get_locale", "clear_cache", "set_locale_path"]
