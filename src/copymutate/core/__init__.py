"""Core primitives for copymutate."""

from copymutate.core.mutation import (
    CopyStrategy,
    DiscardedReturnWarning,
    MissingReturnWarning,
    Mutation,
    UncopyableValueError,
    copy_mutate,
    copy_update,
    copying,
    mutation,
)
from copymutate.core.types import Copier, Copy, Mutator, Updater

__all__ = [
    # Types
    "Copy",
    "Copier",
    "Mutator",
    "Updater",
    # Mutation
    "copy_mutate",
    "copy_update",
    "mutation",
    "Mutation",
    "copying",
    "CopyStrategy",
    "UncopyableValueError",
    "DiscardedReturnWarning",
    "MissingReturnWarning",
]
