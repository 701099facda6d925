from __future__ import annotations

import logging
from typing import Iterable

from fast_permit.contracts.draft import DraftRecord
from fast_permit.core.registry import registry_for
from fast_permit.exceptions.registry_exceptions import (
    InvalidValidatorResultException,
    RecordTypeMissingException,
)

logger = logging.getLogger(__name__)


def validate(draft: DraftRecord, fields: Iterable[str]) -> DraftRecord:
    """
    Run the declared validators of `fields`, and only those.

    The draft is threaded through every matching registry entry in
    registration order. Fields without declared validators are skipped.
    """
    if draft.record_type is None:
        raise RecordTypeMissingException()

    entries = registry_for(draft.record_type).entries_for(fields)
    for entry in entries:
        for ref in entry.refs:
            result = ref(draft, entry.field)
            if not isinstance(result, DraftRecord):
                raise InvalidValidatorResultException(ref.validator, result)
            draft = result

    if entries:
        logger.debug(
            f"[VALIDATE] {draft.record_type.__name__}: ran {len(entries)} rule(s), "
            f"{sum(len(errors) for errors in draft.errors.values())} error(s)"
        )
    return draft
