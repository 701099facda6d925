"""Custom exceptions for fast-permit."""

from .common_exceptions import (
    AppException,
    ValidationRuleException,
    EnvInvalidException,
)
from .registry_exceptions import (
    RegistryException,
    RegistryFrozenException,
    ValidatorNotFoundException,
    InvalidRuleException,
    UnknownFieldException,
    InvalidValidatorResultException,
    RecordTypeMissingException,
)


__all__ = [
    # common
    "AppException",
    "ValidationRuleException",
    "EnvInvalidException",
    # registry
    "RegistryException",
    "RegistryFrozenException",
    "ValidatorNotFoundException",
    "InvalidRuleException",
    "UnknownFieldException",
    "InvalidValidatorResultException",
    "RecordTypeMissingException",
]
