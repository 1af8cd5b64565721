"""Copy-and-mutate operations.

Usage:
    @dataclass
    class Point:
        x: int
        y: int

    def move(p: Point) -> None:
        p.x = 99

    original = Point(1, 2)
    moved = copy_mutate(original, move)      # Point(99, 2), original untouched
    moved = original | mutation(move)        # operator form
    moved = copying(move)(original)          # decorator form
"""

from __future__ import annotations

import functools
import os
import warnings
from collections.abc import Callable
from typing import Any, overload

from copymutate.config import get_settings
from copymutate.core.mutation.models import DiscardedReturnWarning, MissingReturnWarning
from copymutate.core.mutation.operations import StrategyLike, duplicate, resolve_copier
from copymutate.core.types import Copy, Mutator, Updater

# Warnings point at the first frame outside this package
_PACKAGE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "")


def copy_mutate[T](original: T, transform: Mutator[T], *, strategy: StrategyLike = None) -> Copy[T]:
    """Apply an in-place transformation to a copy of a value.

    Args:
        original: Value to start from. Never modified.
        transform: Callable mutating its argument in place.
        strategy: Copy strategy, its name, a custom copier, or None for the
            configured default.

    Returns:
        The private copy after `transform` ran on it.

    Raises:
        UncopyableValueError: If `original` cannot be copied. `transform` is
            not called.

    Note:
        Exceptions raised by `transform` propagate unchanged and the partially
        mutated copy is dropped.
    """
    settings = get_settings()
    result = duplicate(original, resolve_copier(strategy, settings.default_strategy))
    returned = transform(result)
    if returned is not None and settings.warn_on_discarded_return:
        warnings.warn(
            f"Transformation {_name_of(transform)} returned a "
            f"{type(returned).__name__}, which copy_mutate discards. "
            f"Use copy_update() for transformations that return the new value.",
            DiscardedReturnWarning,
            skip_file_prefixes=(_PACKAGE_DIR,),
        )
    return result


def copy_update[T](original: T, transform: Updater[T], *, strategy: StrategyLike = None) -> T:
    """Apply a value-returning transformation to a copy of a value.

    For values Python cannot mutate in place (numbers, strings, tuples, frozen
    dataclasses) or transformations written as `old -> new`.

    Args:
        original: Value to start from. Never passed to `transform`.
        transform: Callable receiving the copy and returning the new value.
        strategy: Copy strategy, its name, a custom copier, or None.

    Returns:
        Whatever `transform` returns.

    Note:
        A `None` result from a non-None original usually means `transform`
        mutated in place; a MissingReturnWarning is emitted unless disabled.
    """
    settings = get_settings()
    result = transform(duplicate(original, resolve_copier(strategy, settings.default_strategy)))
    if result is None and original is not None and settings.warn_on_missing_return:
        warnings.warn(
            f"Transformation {_name_of(transform)} returned None for a "
            f"{type(original).__name__}. Use copy_mutate() for transformations "
            f"that mutate in place.",
            MissingReturnWarning,
            skip_file_prefixes=(_PACKAGE_DIR,),
        )
    return result


class Mutation[T]:
    """Reusable copy-and-mutate step, applied with `value | m` or `m(value)`."""

    __slots__ = ("_transform", "_strategy")

    def __init__(self, transform: Mutator[T], strategy: StrategyLike = None) -> None:
        self._transform = transform
        self._strategy = strategy

    @property
    def transform(self) -> Mutator[T]:
        """Return the wrapped transformation."""
        return self._transform

    def __call__(self, original: T) -> Copy[T]:
        return copy_mutate(original, self._transform, strategy=self._strategy)

    def __ror__(self, original: T) -> Copy[T]:
        return copy_mutate(original, self._transform, strategy=self._strategy)

    def __repr__(self) -> str:
        return f"Mutation({_name_of(self._transform)}, strategy={self._strategy!r})"


def mutation[T](transform: Mutator[T], *, strategy: StrategyLike = None) -> Mutation[T]:
    """Build a Mutation for the operator form `value | mutation(transform)`.

    Types that implement `__or__` for arbitrary operands (numpy arrays, some
    query builders) take precedence; call the Mutation directly for those.
    """
    return Mutation(transform, strategy)


@overload
def copying(
    func: Callable[..., Any], *, strategy: StrategyLike = None
) -> Callable[..., Any]: ...


@overload
def copying(
    func: None = None, *, strategy: StrategyLike = None
) -> Callable[[Callable[..., Any]], Callable[..., Any]]: ...


def copying(
    func: Callable[..., Any] | None = None, *, strategy: StrategyLike = None
) -> Callable[..., Any] | Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Turn an in-place mutating function into one returning a mutated copy.

    Supports two forms:
        @copying                      # bare decorator
        @copying(strategy="shallow")  # factory with args

    The first positional argument of the decorated function is the value to
    copy; remaining arguments are forwarded to each call.

    >>> @copying
    ... def append(items, value):
    ...     items.append(value)
    >>> base = [1]
    >>> append(base, 2)
    [1, 2]
    >>> base
    [1]
    """

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(f)
        def wrapper(original: Any, /, *args: Any, **kwargs: Any) -> Any:
            @functools.wraps(f)
            def apply(value: Any) -> Any:
                return f(value, *args, **kwargs)

            return copy_mutate(original, apply, strategy=strategy)

        return wrapper

    if func is None:
        return decorator
    return decorator(func)


def _name_of(transform: Callable[..., Any]) -> str:
    return getattr(transform, "__qualname__", None) or repr(transform)

