from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Mapping

from pydantic import TypeAdapter, ValidationError

from fast_permit import config
from fast_permit.contracts.draft import DraftRecord
from fast_permit.core.localization import __
from fast_permit.core.registry import declared_fields
from fast_permit.exceptions.registry_exceptions import UnknownFieldException

logger = logging.getLogger(__name__)

CAST_ERROR_TYPE = "cast"


@lru_cache(maxsize=None)
def _type_adapter(hint: Any) -> TypeAdapter:
    return TypeAdapter(hint)


def _cast(draft: DraftRecord, field: str, value: Any, hint: Any) -> DraftRecord:
    if value is None:
        return draft.put_change(field, value)
    try:
        cast_value = _type_adapter(hint).validate_python(value)
    except ValidationError as exc:
        logger.debug(f"[PERMIT] Cannot cast `{field}`: {exc.errors()[0]['msg']}")
        return draft.add_error(
            field,
            __("validation.invalid", default="is invalid"),
            error_type=CAST_ERROR_TYPE,
            validation="cast",
        )
    return draft.put_change(field, cast_value)


def extract_allowed(
    draft: DraftRecord,
    payload: Mapping[str, Any],
    allowed: Iterable[str],
    *,
    cast: bool = False,
) -> DraftRecord:
    """
    Copy the allow-listed keys of `payload` into the draft's changes.

    Keys not in `allowed` are dropped; allowed keys missing from the payload
    leave the draft untouched. With `cast=True` values are coerced to the
    record field's annotation and uncoercible values become `cast` errors
    instead of changes.

    Raises:
        UnknownFieldException: If `allowed` names a field the record type does not declare.
    """
    allowed = set(allowed)
    declared = declared_fields(draft.record_type)

    if declared is not None and config.PERMIT_STRICT_FIELDS:
        for field in allowed:
            if field not in declared:
                raise UnknownFieldException(draft.record_type, field)

    hints = draft.record_type.fields() if cast and declared is not None else {}

    dropped = []
    for key, value in payload.items():
        if key not in allowed:
            dropped.append(key)
            continue
        if key in hints:
            draft = _cast(draft, key, value, hints[key])
        else:
            draft = draft.put_change(key, value)

    if dropped:
        logger.debug(f"[PERMIT] Dropped unpermitted field(s): {', '.join(str(key) for key in dropped)}")
    return draft
