from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fast_permit.contracts.draft import DraftRecord


class Validator(ABC):
    """
    Contract for field validators run by `fast_permit.validate`.

    A validator receives the draft, the field it was declared on and the
    static arguments of its rule, and returns a draft. Failures are recorded
    with `draft.add_error(field, ...)`; never raise for invalid input.
    Plain functions with the same signature are accepted as well.
    """

    @abstractmethod
    def validate(self, draft: 'DraftRecord', field: str, **args: Any) -> 'DraftRecord':
        """
        Validate `field` of `draft`.

        Args:
            draft: The draft being validated.
            field: The field the rule was declared for.
            **args: Static arguments from the rule declaration.

        Returns:
            DraftRecord: The draft, with errors appended on failure.
        """
        raise NotImplementedError

    def __call__(self, draft: 'DraftRecord', field: str, **args: Any) -> 'DraftRecord':
        return self.validate(draft, field, **args)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
