from __future__ import annotations

from typing import Any

from fast_permit.contracts.draft import DraftRecord
from fast_permit.contracts.validator import Validator
from fast_permit.core.localization import __


class ForeignKeyValidator(Validator):
    """
    Check that a changed reference points to an existing record.

    `model` is the storage-side lookup: any object with a synchronous
    ``exists(query: dict) -> bool`` (class)method.

        Record.Validates("user_id", ("foreign_key_constraint", {"model": User}))
    """

    def validate(
        self,
        draft: DraftRecord,
        field: str,
        *,
        model: Any,
        db_key: str = "id",
        allow_null: bool = True,
        each: bool = False,
    ) -> DraftRecord:
        if not draft.has_change(field):
            return draft

        value = draft.get_change(field)
        if value is None or value == "":
            if allow_null:
                return draft
            return draft.add_error(
                field, __("validation.required", default="can't be blank"), error_type="required", validation="required"
            )

        items = value if (each and isinstance(value, list)) else [value]
        for item in items:
            if not model.exists({db_key: item}):
                return draft.add_error(
                    field,
                    __("validation.foreign_key", default="does not exist"),
                    error_type="foreign_key",
                    validation="foreign_key",
                    model=getattr(model, "__name__", str(model)),
                )
        return draft
