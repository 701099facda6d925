from __future__ import annotations

from collections.abc import Sized
from typing import Optional

from fast_permit.contracts.draft import DraftRecord
from fast_permit.contracts.validator import Validator
from fast_permit.core.localization import __

_MESSAGES = {
    "string": {
        "is": "should be {count} character(s)",
        "min": "should be at least {count} character(s)",
        "max": "should be at most {count} character(s)",
    },
    "list": {
        "is": "should have {count} item(s)",
        "min": "should have at least {count} item(s)",
        "max": "should have at most {count} item(s)",
    },
}


class LengthValidator(Validator):
    """Length of a changed string or collection: `min`, `max` and/or exact `is_`."""

    def validate(
        self,
        draft: DraftRecord,
        field: str,
        *,
        min: Optional[int] = None,
        max: Optional[int] = None,
        is_: Optional[int] = None,
    ) -> DraftRecord:
        value = draft.get_change(field)
        if value is None:
            return draft

        if not isinstance(value, Sized):
            return draft.add_error(
                field, __("validation.length.invalid", default="is invalid"), error_type="length", validation="length"
            )

        kind = "string" if isinstance(value, str) else "list"
        length = len(value)

        for key, count, failed in (
            ("is", is_, is_ is not None and length != is_),
            ("min", min, min is not None and length < min),
            ("max", max, max is not None and length > max),
        ):
            if failed:
                message = __(f"validation.length.{kind}.{key}", {"count": count}, default=_MESSAGES[kind][key])
                return draft.add_error(field, message, error_type="length", validation="length", kind=key, count=count)

        return draft
