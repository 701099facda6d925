from typing import Any

from fast_permit.core import registry


def validates(field: str, rule: Any):
    """
    Declare `rule` for `field` on the decorated record type.

        @validates("body", {"validate_length": {"min": 1, "max": 80}})
        @validates("user_id", ("foreign_key_constraint", {"model": User}))
        class Message(Record):
            ...

    Stacked decorators apply bottom-up, so `user_id` above is registered
    before `body`.
    """
    def decorator(record_cls):
        registry.register(record_cls, field, rule)
        return record_cls
    return decorator
