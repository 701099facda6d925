from __future__ import annotations

from typing import Iterable

from fast_permit.contracts.draft import DraftRecord
from fast_permit.core.localization import __
from fast_permit.utils.serialisation import is_blank

REQUIRED_ERROR_TYPE = "required"


def require_present(draft: DraftRecord, required: Iterable[str]) -> DraftRecord:
    """
    Add a `required` error for every field whose effective value is missing.

    The effective value is the proposed change if there is one, otherwise the
    base value. None and whitespace-only strings count as missing.
    """
    for field in required:
        if not is_blank(draft.get_field(field)):
            continue
        if draft.has_error(field, REQUIRED_ERROR_TYPE):
            continue
        draft = draft.add_error(
            field,
            __("validation.required", default="can't be blank"),
            error_type=REQUIRED_ERROR_TYPE,
            validation="required",
        )
    return draft
