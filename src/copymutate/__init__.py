"""copymutate: produce modified copies of values with in-place mutation syntax.

Usage:
    from copymutate import copy_mutate, mutation

    @dataclass
    class Point:
        x: int
        y: int

    def move_right(p: Point) -> None:
        p.x += 1

    original = Point(1, 2)
    moved = copy_mutate(original, move_right)   # Point(2, 2)
    moved = original | mutation(move_right)     # same, operator form
    assert original == Point(1, 2)
"""

__version__ = "0.1.0"

# Core primitives
from copymutate.core import (
    Copier,
    Copy,
    CopyStrategy,
    DiscardedReturnWarning,
    MissingReturnWarning,
    Mutation,
    Mutator,
    UncopyableValueError,
    Updater,
    copy_mutate,
    copy_update,
    copying,
    mutation,
)

# Configuration
from copymutate.config import (
    CopyMutateSettings,
    get_settings,
    set_settings,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "copy_mutate",
    "copy_update",
    "mutation",
    "Mutation",
    "copying",
    "CopyStrategy",
    "UncopyableValueError",
    "DiscardedReturnWarning",
    "MissingReturnWarning",
    # Types
    "Copy",
    "Copier",
    "Mutator",
    "Updater",
    # Config
    "CopyMutateSettings",
    "get_settings",
    "set_settings",
]
