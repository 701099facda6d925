from __future__ import annotations

import re
from typing import Optional

from fast_permit.contracts.draft import DraftRecord
from fast_permit.contracts.validator import Validator
from fast_permit.core.localization import __


class FormatValidator(Validator):
    def validate(self, draft: DraftRecord, field: str, *, pattern: str | re.Pattern, message: Optional[str] = None) -> DraftRecord:
        value = draft.get_change(field)
        if value is None:
            return draft

        if not isinstance(value, str) or re.search(pattern, value) is None:
            return draft.add_error(
                field,
                message or __("validation.format", default="has invalid format"),
                error_type="format",
                validation="format",
            )
        return draft
