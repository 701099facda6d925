"""Contract classes and abstract interfaces.

Exported so they can be imported directly from :mod:`fast_permit`.
"""

from .draft import DraftRecord, FieldError, change
from .record import Record
from .validator import Validator

__all__ = [
    "DraftRecord",
    "FieldError",
    "Record",
    "Validator",
    "change",
]
