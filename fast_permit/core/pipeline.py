from __future__ import annotations

from typing import Any, Iterable, Mapping

from fast_permit.contracts.draft import DraftRecord, change
from fast_permit.core.extractor import extract_allowed
from fast_permit.core.presence import require_present
from fast_permit.core.runner import validate


def _as_draft(draft: DraftRecord | Any) -> DraftRecord:
    return draft if isinstance(draft, DraftRecord) else change(draft)


def _union(required: Iterable[str], optional: Iterable[str]) -> list[str]:
    return list(dict.fromkeys([*required, *optional]))


def fetch(draft: DraftRecord | Any, required: Iterable[str], optional: Iterable[str] = ()) -> DraftRecord:
    """
    Require `required` fields and validate `required` + `optional` fields.

        draft = fetch(order.change(), ["body", "user_id"], ["price"])
    """
    required = list(required)
    draft = require_present(_as_draft(draft), required)
    return validate(draft, _union(required, optional))


def cast_only(draft: DraftRecord | Any, payload: Mapping[str, Any], fields: Iterable[str], *, cast: bool = False) -> DraftRecord:
    """Permit, require and validate exactly `fields`."""
    fields = list(fields)
    return fetch(extract_allowed(_as_draft(draft), payload, fields, cast=cast), fields, [])


def permit(
    draft: DraftRecord | Any,
    payload: Mapping[str, Any],
    required: Iterable[str],
    optional: Iterable[str] = (),
    *,
    cast: bool = False,
) -> DraftRecord:
    """
    Permit `required` + `optional` from `payload`, then require and validate them.

    Validation failures never raise; inspect `draft.valid` / `draft.errors`.

        def registration_draft(user, params):
            return permit(user, params, ["name", "email"], ["bio"])
    """
    required, optional = list(required), list(optional)
    draft = extract_allowed(_as_draft(draft), payload, _union(required, optional), cast=cast)
    return fetch(draft, required, optional)
