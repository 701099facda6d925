"""Core registry and pipeline re-exported for convenient access."""

from .extractor import extract_allowed
from .localization import __, trans, set_locale, get_locale, set_locale_path
from .pipeline import cast_only, fetch, permit
from .presence import require_present
from .registry import (
    ValidatorRegistry,
    ValidatorRegistryEntry,
    entries_for,
    freeze,
    register,
    registry_for,
)
from .rules import RuleList, Single, ValidationRule, ValidatorRef, WithArgs, build_rule
from .runner import validate
from .validator_table import ValidatorTable, register_validator
from .validators import *  # noqa: F401,F403

__all__ = [
    "__",
    "trans",
    "set_locale",
    "get_locale",
    "set_locale_path",
    "extract_allowed",
    "require_present",
    "validate",
    "fetch",
    "cast_only",
    "permit",
    "ValidatorRegistry",
    "ValidatorRegistryEntry",
    "entries_for",
    "freeze",
    "register",
    "registry_for",
    "RuleList",
    "Single",
    "ValidationRule",
    "ValidatorRef",
    "WithArgs",
    "build_rule",
    "ValidatorTable",
    "register_validator",
    "BUILTIN_VALIDATORS",
    "ForeignKeyValidator",
    "FormatValidator",
    "ExclusionValidator",
    "InclusionValidator",
    "LengthValidator",
    "NumberValidator",
]
