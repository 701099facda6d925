from __future__ import annotations

import operator
from numbers import Number
from typing import Any, Optional

from fast_permit.contracts.draft import DraftRecord
from fast_permit.contracts.validator import Validator
from fast_permit.core.localization import __

_CHECKS = {
    "less_than": (operator.lt, "must be less than {number}"),
    "greater_than": (operator.gt, "must be greater than {number}"),
    "less_than_or_equal_to": (operator.le, "must be less than or equal to {number}"),
    "greater_than_or_equal_to": (operator.ge, "must be greater than or equal to {number}"),
    "equal_to": (operator.eq, "must be equal to {number}"),
    "not_equal_to": (operator.ne, "must be not equal to {number}"),
}


class NumberValidator(Validator):
    """
    Compare a changed number against bounds, e.g.
    ``("validate_number", {"greater_than": 0, "less_than_or_equal_to": 100})``.

    Checks run in the order of `_CHECKS` and stop at the first failure.
    """

    def validate(
        self,
        draft: DraftRecord,
        field: str,
        *,
        less_than: Optional[Any] = None,
        greater_than: Optional[Any] = None,
        less_than_or_equal_to: Optional[Any] = None,
        greater_than_or_equal_to: Optional[Any] = None,
        equal_to: Optional[Any] = None,
        not_equal_to: Optional[Any] = None,
    ) -> DraftRecord:
        value = draft.get_change(field)
        if value is None:
            return draft
        if not isinstance(value, Number) or isinstance(value, bool):
            return draft.add_error(
                field, __("validation.number.invalid", default="is invalid"), error_type="number", validation="number"
            )

        bounds = {
            "less_than": less_than,
            "greater_than": greater_than,
            "less_than_or_equal_to": less_than_or_equal_to,
            "greater_than_or_equal_to": greater_than_or_equal_to,
            "equal_to": equal_to,
            "not_equal_to": not_equal_to,
        }
        for name, target in bounds.items():
            if target is None:
                continue
            compare, default = _CHECKS[name]
            if not compare(value, target):
                message = __(f"validation.number.{name}", {"number": target}, default=default)
                return draft.add_error(field, message, error_type="number", validation="number", kind=name, number=target)

        return draft
