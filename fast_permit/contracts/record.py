from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional, get_origin, get_type_hints

from fast_permit.contracts.draft import DraftRecord, change
from fast_permit.core import registry

if sys.version_info >= (3, 14):
    import annotationlib

if TYPE_CHECKING:
    from fast_permit.core.registry import ValidatorRegistryEntry


def _own_annotations(cls: type) -> dict[str, Any]:
    if sys.version_info >= (3, 14):
        return annotationlib.get_annotations(cls, format=annotationlib.Format.FORWARDREF)
    return cls.__dict__.get("__annotations__", {})


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


class Record:
    """
    Base for record types whose fields are validated by fast-permit.

    Fields are declared with annotations (and optional defaults). Validators
    are declared in an inner Meta class, with the `@validates` decorator, or
    with `fast_permit.register` before the record type is first used:

        class User(Record):
            name: str = None
            email: str = None

            class Meta:
                validates = [
                    Record.Validates("name", {"validate_length": {"min": 1, "max": 20}}),
                    Record.Validates("email", ("validate_format", {"pattern": r"@"})),
                ]

    A subclass starts with a copy of its parent's validators.
    """

    class Validates:
        def __init__(self, field: str, rule: Any):
            self.field = field
            self.rule = rule

        def __repr__(self):
            return f"Validates({self.field!r}, {self.rule!r})"

    _cached_fields: ClassVar[Optional[dict[str, Any]]] = None
    _cached_field_names: ClassVar[Optional[list[str]]] = None

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if key in self.field_names():
                setattr(self, key, value)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._cached_fields = None
        cls._cached_field_names = None

        parent = next((base for base in cls.__mro__[1:] if issubclass(base, Record) and base is not Record), None)
        if parent is not None:
            registry.inherit_registry(cls, parent)

        meta = cls.__dict__.get("Meta")
        for declaration in getattr(meta, "validates", None) or []:
            registry.register(cls, declaration.field, declaration.rule)

    def __str__(self):
        return str(self.to_dict())

    def __repr__(self):
        values = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"{self.__class__.__name__}({values})"

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @classmethod
    def field_names(cls) -> list[str]:
        """Declared field names, parents first, read without evaluating annotations."""
        if cls.__dict__.get("_cached_field_names") is not None:
            return cls._cached_field_names

        names: dict[str, None] = {}
        for base in reversed(cls.__mro__):
            if base is object:
                continue
            for name, annotation in _own_annotations(base).items():
                if not _is_class_var(annotation):
                    names[name] = None

        cls._cached_field_names = list(names)
        return cls._cached_field_names

    @classmethod
    def fields(cls) -> dict[str, Any]:
        """Field name -> resolved type hint. Evaluates annotations, so only call once the module is loaded."""
        if cls.__dict__.get("_cached_fields") is not None:
            return cls._cached_fields

        annotations: dict[str, Any] = {}
        for name, hint in get_type_hints(cls).items():
            # Skip ClassVar annotations
            if get_origin(hint) is ClassVar or hint is ClassVar:
                continue
            annotations[name] = hint

        cls._cached_fields = annotations
        return annotations

    def get(self, field: str, default: Any = None) -> Any:
        return getattr(self, field, default)

    def to_dict(self) -> dict[str, Any]:
        return {field: getattr(self, field, None) for field in self.field_names()}

    @classmethod
    def validators(cls) -> tuple[ValidatorRegistryEntry, ...]:
        """Declared validators of this record type, in registration order."""
        return registry.registry_for(cls).entries

    def change(self, changes: Optional[Mapping[str, Any]] = None) -> DraftRecord:
        return change(self, changes)
