"""Pure functions for duplicating values.

These implement the copy strategies and the resolution of a `strategy`
argument into a concrete copier.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any, TypeVar

from copymutate.core.mutation.models import CopyStrategy, UncopyableValueError
from copymutate.core.types import Copier

T = TypeVar("T")

StrategyLike = CopyStrategy | str | Callable[[Any], Any] | None


def copy_deep(value: T) -> T:
    """Duplicate a value and everything it references.

    Args:
        value: Value to copy.

    Returns:
        Deep copy via copy.deepcopy (honors __deepcopy__).
    """
    return copy.deepcopy(value)


def copy_shallow(value: T) -> T:
    """Duplicate only the top-level object.

    Args:
        value: Value to copy.

    Returns:
        Shallow copy via copy.copy (honors __copy__).
    """
    return copy.copy(value)


def resolve_copier(strategy: StrategyLike, default: CopyStrategy) -> Copier[Any]:
    """Turn a strategy argument into a copy function.

    Args:
        strategy: CopyStrategy, its string value, a custom copier, or None.
        default: Strategy used when `strategy` is None.

    Returns:
        Function duplicating a value.

    Raises:
        ValueError: If `strategy` is a string naming no known strategy.
        TypeError: If `strategy` is neither a strategy nor callable.
    """
    if strategy is None:
        return default.get_copier()
    if isinstance(strategy, str):
        # StrEnum members are str too
        return CopyStrategy(strategy).get_copier()
    if callable(strategy):
        return strategy
    raise TypeError(f"Invalid copy strategy: {strategy!r}")


def duplicate(value: T, copier: Copier[Any]) -> T:
    """Copy `value`, reporting copy failures as UncopyableValueError.

    Args:
        value: Value to copy.
        copier: Copy function from resolve_copier.

    Returns:
        Independent copy of value.

    Raises:
        UncopyableValueError: If the copier fails for any reason (unsupported
            type, broken __setstate__, nesting deeper than the recursion limit).
    """
    try:
        return copier(value)
    except Exception as e:
        name = getattr(copier, "__name__", type(copier).__name__)
        raise UncopyableValueError(type(value), name.removeprefix("copy_")) from e
