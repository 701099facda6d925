from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Union

from fast_permit.contracts.validator import Validator
from fast_permit.core.validator_table import ValidatorTable
from fast_permit.exceptions.registry_exceptions import InvalidRuleException

if TYPE_CHECKING:
    from fast_permit.contracts.draft import DraftRecord

ValidatorId = Union[str, Callable[..., Any]]


@dataclass(frozen=True)
class Single:
    validator_id: ValidatorId


@dataclass(frozen=True)
class WithArgs:
    validator_id: ValidatorId
    args: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RuleList:
    rules: tuple[Union[Single, WithArgs], ...] = ()


ValidationRule = Union[Single, WithArgs, RuleList]


@dataclass(frozen=True)
class ValidatorRef:
    """A resolved validator bound to the static arguments of its rule."""

    identity: str
    validator: Callable[..., Any]
    args: Mapping[str, Any] = field(default_factory=dict)

    def __call__(self, draft: 'DraftRecord', field: str) -> 'DraftRecord':
        return self.validator(draft, field, **self.args)


def _build_step(declaration: Any) -> Union[Single, WithArgs]:
    if isinstance(declaration, (Single, WithArgs)):
        return declaration
    if isinstance(declaration, str) or callable(declaration):
        return Single(declaration)
    if isinstance(declaration, tuple) and len(declaration) == 2:
        validator_id, args = declaration
        if (isinstance(validator_id, str) or callable(validator_id)) and isinstance(args, Mapping):
            return WithArgs(validator_id, dict(args))
    raise InvalidRuleException(declaration)


def build_rule(declaration: Any) -> ValidationRule:
    """
    Normalise a rule declaration.

    Accepted shapes:
        "validate_length"                              -> Single
        ("validate_length", {"min": 1})                -> WithArgs
        {"validate_length": {"min": 1, "max": 20}}     -> RuleList of WithArgs, in mapping order
        ["foreign_key_constraint", (...), ...]         -> RuleList
    """
    if isinstance(declaration, (Single, WithArgs, RuleList)):
        return declaration
    if isinstance(declaration, Mapping):
        steps = []
        for validator_id, args in declaration.items():
            if args is None:
                steps.append(Single(validator_id))
            elif isinstance(args, Mapping):
                steps.append(WithArgs(validator_id, dict(args)))
            else:
                raise InvalidRuleException({validator_id: args})
        if not steps:
            raise InvalidRuleException(declaration)
        return RuleList(tuple(steps))
    if isinstance(declaration, list):
        if not declaration:
            raise InvalidRuleException(declaration)
        return RuleList(tuple(_build_step(item) for item in declaration))
    return _build_step(declaration)


def _check_args(step: Union[Single, WithArgs], validator: Callable[..., Any], args: Mapping[str, Any]) -> None:
    target = validator.validate if isinstance(validator, Validator) else validator
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # No introspectable signature (C callables)
        return
    try:
        signature.bind(None, "field", **args)
    except TypeError as exc:
        raise InvalidRuleException(step, str(exc)) from exc


def bind_rule(rule: ValidationRule, table: ValidatorTable | None = None) -> tuple[ValidatorRef, ...]:
    """
    Resolve every validator of `rule` and check its arguments against the
    validator's signature, failing fast on unknown identities and on missing
    or unexpected arguments.
    """
    table = table or ValidatorTable()
    steps = rule.rules if isinstance(rule, RuleList) else (rule,)

    refs = []
    for step in steps:
        identity, validator = table.resolve(step.validator_id)
        args = step.args if isinstance(step, WithArgs) else {}
        _check_args(step, validator, args)
        refs.append(ValidatorRef(identity=identity, validator=validator, args=args))
    return tuple(refs)
