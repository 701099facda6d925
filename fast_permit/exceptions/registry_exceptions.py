from typing import Any, Optional

from fast_permit.exceptions.common_exceptions import AppException


class RegistryException(AppException):
    def __init__(self, message: str, *, data: Optional[dict] = None):
        super().__init__(message, data=data)


class RegistryFrozenException(RegistryException):
    def __init__(self, record_type: type, field: str):
        super().__init__(
            f"Validators of '{record_type.__name__}' are frozen; cannot register `{field}` after first use",
            data={"record_type": record_type.__name__, "field": field},
        )


class ValidatorNotFoundException(RegistryException):
    def __init__(self, identity: Any):
        super().__init__(f"Validator '{identity}' is not registered", data={"validator": str(identity)})


class InvalidRuleException(RegistryException):
    def __init__(self, rule: Any, reason: Optional[str] = None):
        message = f"Cannot build a validation rule from {rule!r}"
        super().__init__(f"{message}: {reason}" if reason else message)


class UnknownFieldException(RegistryException):
    def __init__(self, record_type: type, field: str):
        super().__init__(
            f"Unknown field `{field}` for '{record_type.__name__}'",
            data={"record_type": record_type.__name__, "field": field},
        )


class InvalidValidatorResultException(RegistryException):
    def __init__(self, validator: Any, result: Any):
        super().__init__(
            f"Validator '{getattr(validator, '__name__', validator)}' returned {type(result).__name__}, expected DraftRecord"
        )


class RecordTypeMissingException(RegistryException):
    def __init__(self):
        super().__init__("Record type is required when the base record is a plain mapping")
