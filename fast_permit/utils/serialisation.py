import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def serialise(val):
    if isinstance(val, (datetime, date)):
        return val.isoformat()
    if isinstance(val, Decimal):
        return str(val)
    elif isinstance(val, (list, tuple, set, frozenset)):
        return [serialise(item) for item in val]
    elif isinstance(val, dict):
        return {key: serialise(value) for key, value in val.items()}

    return val


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    # Insert underscores before capital letters, except at the start
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    snake = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
    return snake


def get_exception_error_type(exception: Exception) -> str:
    return pascal_case_to_snake_case(exception.__class__.__name__.replace('Exception', ''))


def is_blank(value: Any) -> bool:
    """A value counts as missing when it is None or a whitespace-only string."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""
