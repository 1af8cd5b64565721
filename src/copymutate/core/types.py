"""Core type definitions for copymutate."""

from collections.abc import Callable

type Copy[T] = T
"""Type alias indicating a value is an independent copy.

When you see `Copy[T]` in a return type, the returned value was duplicated from
the caller's input. Mutations to this copy do NOT affect the original.
"""

type Mutator[T] = Callable[[T], None]
"""In-place transformation: receives a value and mutates it, returns nothing."""

type Updater[T] = Callable[[T], T]
"""Functional transformation: receives a value and returns the new value."""

type Copier[T] = Callable[[T], T]
"""Duplicates a value (e.g. `copy.deepcopy`)."""
