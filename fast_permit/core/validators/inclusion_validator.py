from __future__ import annotations

from typing import Any, Collection

from fast_permit.contracts.draft import DraftRecord
from fast_permit.contracts.validator import Validator
from fast_permit.core.localization import __


def _is_member(value: Any, values: Collection[Any]) -> bool:
    try:
        return value in values
    except TypeError:
        # Unhashable value against a set or dict
        return any(value == candidate for candidate in values)


class InclusionValidator(Validator):
    def validate(self, draft: DraftRecord, field: str, *, values: Collection[Any]) -> DraftRecord:
        value = draft.get_change(field)
        if value is None or _is_member(value, values):
            return draft
        return draft.add_error(
            field, __("validation.inclusion", default="is invalid"), error_type="inclusion", validation="inclusion"
        )


class ExclusionValidator(Validator):
    def validate(self, draft: DraftRecord, field: str, *, values: Collection[Any]) -> DraftRecord:
        value = draft.get_change(field)
        if value is None or not _is_member(value, values):
            return draft
        return draft.add_error(
            field, __("validation.exclusion", default="is reserved"), error_type="exclusion", validation="exclusion"
        )
