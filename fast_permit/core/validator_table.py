from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from fast_permit.contracts.validator import Validator
from fast_permit.decorators.singleton_decorator import singleton
from fast_permit.exceptions.registry_exceptions import RegistryException, ValidatorNotFoundException

logger = logging.getLogger(__name__)


@singleton
class ValidatorTable:
    """
    Process-wide lookup table: validator identity -> invocable.

    Rules may name a validator by identity (`"validate_length"`) or pass the
    invocable itself; names are resolved here once, when the rule is
    registered.
    """

    def __init__(self):
        self._validators: dict[str, Callable[..., Any]] = {}
        self._lock = threading.Lock()

    def register(self, name: str, validator: Callable[..., Any] | type[Validator]) -> Callable[..., Any]:
        if isinstance(validator, type):
            validator = validator()
        if not callable(validator):
            raise RegistryException(f"Validator '{name}' is not callable")

        with self._lock:
            existing = self._validators.get(name)
            if existing is not None and existing is not validator:
                raise RegistryException(f"Validator '{name}' is already registered as {existing!r}")
            self._validators[name] = validator

        logger.debug(f"[VALIDATORS] Registered `{name}`")
        return validator

    def resolve(self, identity: str | Callable[..., Any]) -> tuple[str, Callable[..., Any]]:
        if isinstance(identity, str):
            validator = self._validators.get(identity)
            if validator is None:
                raise ValidatorNotFoundException(identity)
            return identity, validator
        if isinstance(identity, type) and issubclass(identity, Validator):
            return identity.__name__, identity()
        if callable(identity):
            return getattr(identity, "__name__", identity.__class__.__name__), identity
        raise ValidatorNotFoundException(identity)

    def names(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, name: str) -> bool:
        return name in self._validators


def register_validator(name: Optional[str] = None):
    """
    Register a validator function or `Validator` class under `name`.

        @register_validator("validate_slug")
        def validate_slug(draft, field):
            ...

    The decorated object is returned unchanged.
    """
    def decorator(validator):
        ValidatorTable().register(name or validator.__name__, validator)
        return validator
    return decorator
