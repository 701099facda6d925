from __future__ import annotations

import logging
import threading
import weakref
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from fast_permit.core.rules import ValidationRule, ValidatorRef, bind_rule, build_rule
from fast_permit.exceptions.registry_exceptions import RegistryFrozenException, UnknownFieldException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatorRegistryEntry:
    field: str
    rule: ValidationRule
    refs: tuple[ValidatorRef, ...]


class ValidatorRegistry:
    """
    Ordered `(field, rule)` entries of one record type.

    Entries are appended while the record type is being defined. The first
    read (`entries`, `entries_for`) freezes the registry; from then on it is
    an immutable tuple and can be read from any thread without locking.
    """

    def __init__(self, record_type: type, entries: Iterable[ValidatorRegistryEntry] = ()):
        self.record_type = record_type
        self._entries: list[ValidatorRegistryEntry] | tuple[ValidatorRegistryEntry, ...] = list(entries)
        self._frozen = False
        self._lock = threading.Lock()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, field: str, rule: Any) -> ValidatorRegistryEntry:
        declared = declared_fields(self.record_type)
        if declared is not None and field not in declared:
            raise UnknownFieldException(self.record_type, field)

        normalised = build_rule(rule)
        entry = ValidatorRegistryEntry(field=field, rule=normalised, refs=bind_rule(normalised))

        with self._lock:
            if self._frozen:
                raise RegistryFrozenException(self.record_type, field)
            self._entries.append(entry)

        logger.debug(
            f"[REGISTRY] {self.record_type.__name__}.{field} <- {', '.join(ref.identity for ref in entry.refs)}"
        )
        return entry

    def freeze(self) -> ValidatorRegistry:
        if self._frozen:
            return self
        with self._lock:
            if not self._frozen:
                self._entries = tuple(self._entries)
                self._frozen = True
                logger.debug(f"[REGISTRY] {self.record_type.__name__} frozen with {len(self._entries)} entries")
        return self

    @property
    def entries(self) -> tuple[ValidatorRegistryEntry, ...]:
        return self.freeze()._entries

    def entries_for(self, fields: Iterable[str]) -> tuple[ValidatorRegistryEntry, ...]:
        """Entries whose field is in `fields`, in registration order."""
        selected = set(fields)
        return tuple(entry for entry in self.entries if entry.field in selected)

    def fields(self) -> list[str]:
        return list(dict.fromkeys(entry.field for entry in self.entries))

    def __iter__(self) -> Iterator[ValidatorRegistryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        state = "frozen" if self._frozen else "open"
        return f"<ValidatorRegistry {self.record_type.__name__} {state} entries={len(self._entries)}>"


_registries: weakref.WeakKeyDictionary[type, ValidatorRegistry] = weakref.WeakKeyDictionary()
_registries_lock = threading.Lock()


def declared_fields(record_type: type) -> list[str] | None:
    """Field names of a `Record` subclass (annotations are not evaluated), `None` for other types."""
    from fast_permit.contracts.record import Record

    if isinstance(record_type, type) and issubclass(record_type, Record):
        return record_type.field_names()
    return None


def registry_for(record_type: type) -> ValidatorRegistry:
    """The process-wide registry of `record_type`, created on first access."""
    registry = _registries.get(record_type)
    if registry is not None:
        return registry
    with _registries_lock:
        registry = _registries.get(record_type)
        if registry is None:
            registry = ValidatorRegistry(record_type)
            _registries[record_type] = registry
    return registry


def inherit_registry(record_type: type, parent: type) -> ValidatorRegistry:
    """Seed the registry of `record_type` with the (now frozen) entries of `parent`."""
    inherited = registry_for(parent).entries
    with _registries_lock:
        registry = ValidatorRegistry(record_type, inherited)
        _registries[record_type] = registry
    return registry


def register(record_type: type, field: str, rule: Any) -> ValidatorRegistryEntry:
    """Declare `rule` for `field` of `record_type`. Only valid before the registry is frozen."""
    return registry_for(record_type).register(field, rule)


def entries_for(record_type: type, fields: Iterable[str]) -> tuple[ValidatorRegistryEntry, ...]:
    return registry_for(record_type).entries_for(fields)


def freeze(record_type: type) -> ValidatorRegistry:
    return registry_for(record_type).freeze()
