"""Mutation functionality: copy-and-mutate operations, strategies and errors."""

from copymutate.core.mutation.core import (
    Mutation,
    copy_mutate,
    copy_update,
    copying,
    mutation,
)
from copymutate.core.mutation.models import (
    CopyStrategy,
    DiscardedReturnWarning,
    MissingReturnWarning,
    UncopyableValueError,
)
from copymutate.core.mutation.operations import (
    copy_deep,
    copy_shallow,
    duplicate,
    resolve_copier,
)

__all__ = [
    # Models
    "CopyStrategy",
    "UncopyableValueError",
    "DiscardedReturnWarning",
    "MissingReturnWarning",
    # Operations
    "copy_deep",
    "copy_shallow",
    "duplicate",
    "resolve_copier",
    # Core
    "copy_mutate",
    "copy_update",
    "mutation",
    "Mutation",
    "copying",
]
