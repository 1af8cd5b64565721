"""Mutation models: copy strategies, errors and warnings."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from copymutate.core.types import Copier


class CopyStrategy(StrEnum):
    """How the private copy handed to a transformation is made."""

    DEEP = "deep"  # copy.deepcopy, no shared mutable sub-state
    SHALLOW = "shallow"  # copy.copy, nested objects are shared

    def get_copier(self) -> Copier[Any]:
        """Get the copy function for this strategy.

        Returns:
            Pure function duplicating a value.
        """
        # Late import to avoid circular dependency
        from copymutate.core.mutation import operations

        copiers = {
            CopyStrategy.DEEP: operations.copy_deep,
            CopyStrategy.SHALLOW: operations.copy_shallow,
        }
        return copiers[self]


class UncopyableValueError(TypeError):
    """Raised when a value cannot be duplicated by the selected copy strategy."""

    def __init__(self, value_type: type, strategy: str) -> None:
        self.value_type = value_type
        self.strategy = strategy
        super().__init__(
            f"Cannot make a {strategy} copy of {value_type.__name__}. "
            f"Implement __copy__/__deepcopy__ or pass a custom copier."
        )


class DiscardedReturnWarning(UserWarning):
    """A mutating transformation returned a value that copy_mutate ignores."""


class MissingReturnWarning(UserWarning):
    """A value-returning transformation returned None, likely mutating in place."""
