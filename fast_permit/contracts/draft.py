from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from fast_permit.exceptions.common_exceptions import ValidationRuleException
from fast_permit.utils.serialisation import serialise


@dataclass(frozen=True)
class FieldError:
    message: str
    error_type: str = "value_error"
    params: dict[str, Any] = field(default_factory=dict)

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class DraftRecord:
    """
    In-flight result of a validation request.

    Wraps the base record (a `Record` instance or a plain mapping), the
    proposed changes and the errors accumulated per field. Drafts are values:
    every helper returns a new draft and leaves the original untouched.

    The draft is valid iff `errors` is empty.
    """

    base: Any
    changes: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, tuple[FieldError, ...]] = field(default_factory=dict)
    record_type: Optional[type] = None

    def __post_init__(self):
        if self.record_type is None and not isinstance(self.base, Mapping):
            object.__setattr__(self, "record_type", type(self.base))

    @property
    def valid(self) -> bool:
        return not self.errors

    def _base_value(self, field: str, default: Any = None) -> Any:
        if isinstance(self.base, Mapping):
            return self.base.get(field, default)
        return getattr(self.base, field, default)

    def get_field(self, field: str, default: Any = None) -> Any:
        """Effective value: the proposed change if present, else the base value."""
        if field in self.changes:
            return self.changes[field]
        return self._base_value(field, default)

    def has_change(self, field: str) -> bool:
        return field in self.changes

    def get_change(self, field: str, default: Any = None) -> Any:
        return self.changes.get(field, default)

    def put_change(self, field: str, value: Any) -> DraftRecord:
        return replace(self, changes={**self.changes, field: value})

    def delete_change(self, field: str) -> DraftRecord:
        return replace(self, changes={k: v for k, v in self.changes.items() if k != field})

    def add_error(self, field: str, message: str, *, error_type: str = "value_error", **params) -> DraftRecord:
        error = FieldError(message=message, error_type=error_type, params=params)
        return replace(self, errors={**self.errors, field: self.errors.get(field, ()) + (error,)})

    def has_error(self, field: str, error_type: Optional[str] = None) -> bool:
        errors = self.errors.get(field, ())
        if error_type is None:
            return bool(errors)
        return any(error.error_type == error_type for error in errors)

    def messages(self, field: str) -> list[str]:
        return [error.message for error in self.errors.get(field, ())]

    def errors_list(self) -> list[dict[str, Any]]:
        """Errors in pydantic's shape: ``[{"loc": (field,), "msg": ..., "type": ...}]``."""
        return [
            {"loc": (name,), "msg": error.message, "type": error.error_type}
            for name, errors in self.errors.items()
            for error in errors
        ]

    def apply_changes(self) -> Any:
        """Return a copy of the base record with the proposed changes applied, ignoring errors."""
        if isinstance(self.base, Mapping):
            return {**self.base, **self.changes}
        record = copy.copy(self.base)
        for key, value in self.changes.items():
            setattr(record, key, value)
        return record

    def raise_if_invalid(self) -> DraftRecord:
        if not self.valid:
            raise ValidationRuleException(
                "draft validation failed",
                error_type="rule_error",
                errors=self.errors_list(),
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "changes": serialise(self.changes),
            "errors": {name: [error.message for error in errors] for name, errors in self.errors.items()},
            "valid": self.valid,
        }


def change(base: Any, changes: Optional[Mapping[str, Any]] = None, *, record_type: Optional[type] = None) -> DraftRecord:
    """
    Start a draft for `base`.

    `changes` are trusted and put as-is; untrusted input goes through
    `extract_allowed`/`permit`. A mapping base needs an explicit `record_type`
    before it can be validated.
    """
    if isinstance(base, DraftRecord):
        draft = base
    else:
        draft = DraftRecord(base=base, record_type=record_type)
    for key, value in (changes or {}).items():
        draft = draft.put_change(key, value)
    return draft
