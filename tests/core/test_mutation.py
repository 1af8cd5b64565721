"""Tests for copy_mutate."""

import copy
import threading
import warnings
from dataclasses import FrozenInstanceError, dataclass, field
from unittest.mock import Mock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from copymutate import (
    CopyMutateSettings,
    DiscardedReturnWarning,
    UncopyableValueError,
    copy_mutate,
    set_settings,
)


@dataclass(slots=True)
class Point:
    x: int
    y: int


@dataclass
class Inventory:
    owner: str
    items: dict[str, list[int]] = field(default_factory=dict)


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


@dataclass
class Guarded:
    value: int
    lock: threading.Lock = field(default_factory=threading.Lock)


def set_x_to_99(point: Point) -> None:
    point.x = 99


def no_op(value: object) -> None:
    pass


# Scenario from the docs


def test_point_scenario():
    """Setting x on the copy leaves the original Point untouched."""
    original = Point(x=1, y=2)

    result = copy_mutate(original, set_x_to_99)

    assert result == Point(x=99, y=2)
    assert original == Point(x=1, y=2)


def test_result_is_new_object():
    original = Point(1, 2)
    result = copy_mutate(original, no_op)
    assert result is not original


def test_identity_transform_returns_equal_value():
    original = Inventory("ada", {"bolts": [1, 2]})
    assert copy_mutate(original, no_op) == original


def test_transform_receives_copy_not_original():
    original = Point(1, 2)
    seen = []

    copy_mutate(original, seen.append)

    assert len(seen) == 1
    assert seen[0] is not original


def test_nested_state_not_aliased():
    """CRITICAL: Default copy is deep, nested containers are not shared.

    Why: A shallow copy would let the transform reach the caller's lists.
    """
    original = Inventory("ada", {"bolts": [1, 2]})

    result = copy_mutate(original, lambda inv: inv.items["bolts"].append(3))

    assert result.items["bolts"] == [1, 2, 3]
    assert original.items["bolts"] == [1, 2]


def test_mutating_result_later_does_not_affect_original():
    original = Inventory("ada", {"bolts": [1]})
    result = copy_mutate(original, no_op)

    result.items["bolts"].append(2)
    result.items["nuts"] = [7]
    result.owner = "grace"

    assert original == Inventory("ada", {"bolts": [1]})


def test_builtin_containers():
    original = [1, 2, 3]
    assert copy_mutate(original, lambda items: items.reverse()) == [3, 2, 1]
    assert original == [1, 2, 3]

    mapping = {"a": 1}
    assert copy_mutate(mapping, lambda d: d.update(b=2)) == {"a": 1, "b": 2}
    assert mapping == {"a": 1}


# Failure propagation


def test_transform_failure_propagates_unchanged():
    """CRITICAL: Failures raised by the transform reach the caller as-is."""
    original = Point(1, 2)
    error = RuntimeError("boom")

    def fail_halfway(point: Point) -> None:
        point.x = 5
        raise error

    with pytest.raises(RuntimeError) as exc_info:
        copy_mutate(original, fail_halfway)

    assert exc_info.value is error
    assert original == Point(1, 2)


def test_transform_type_error_not_wrapped():
    """A TypeError from the transform is not mistaken for a copy failure."""

    def bad(point: Point) -> None:
        raise TypeError("wrong operand")

    with pytest.raises(TypeError, match="wrong operand") as exc_info:
        copy_mutate(Point(1, 2), bad)

    assert not isinstance(exc_info.value, UncopyableValueError)


def test_frozen_value_error_propagates():
    """Values that cannot be mutated in place fail inside the transform."""
    original = FrozenPoint(1, 2)

    def move(point: FrozenPoint) -> None:
        point.x = 3  # type: ignore[misc]

    with pytest.raises(FrozenInstanceError):
        copy_mutate(original, move)


def test_uncopyable_value_raises_before_transform():
    transform = Mock()

    with pytest.raises(UncopyableValueError, match="Guarded") as exc_info:
        copy_mutate(Guarded(1), transform)

    transform.assert_not_called()
    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.value_type is Guarded
    assert exc_info.value.strategy == "deep"
    assert exc_info.value.__cause__ is not None


# Discarded return values


def test_returned_value_warns_and_is_discarded():
    original = Point(1, 2)

    with pytest.warns(DiscardedReturnWarning, match="copy_update") as record:
        result = copy_mutate(original, lambda p: Point(p.x + 1, p.y))

    assert result == Point(1, 2)
    assert result is not original
    # Points at the caller, not at library internals
    assert record[0].filename == __file__


def test_returned_value_warning_can_be_disabled():
    set_settings(CopyMutateSettings(warn_on_discarded_return=False))

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = copy_mutate([1], lambda items: items.pop())

    assert result == []


def test_none_return_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        copy_mutate(Point(1, 2), set_x_to_99)


# Property tests

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=5),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=3), children, max_size=4),
    max_leaves=20,
)
containers = st.lists(json_values, max_size=5) | st.dictionaries(
    st.text(max_size=3), json_values, max_size=5
)


def scramble(value: list | dict) -> None:
    """Mutate a container and every nested container reachable from it."""
    children = list(value.values()) if isinstance(value, dict) else list(value)
    for child in children:
        if isinstance(child, (list, dict)):
            scramble(child)
    if isinstance(value, dict):
        value["__scrambled__"] = True
    else:
        value.append("__scrambled__")
        value.reverse()


@given(value=containers)
def test_original_unchanged_property(value):
    """PROPERTY: The original equals its pre-call snapshot after any transform."""
    snapshot = copy.deepcopy(value)

    copy_mutate(value, scramble)

    assert value == snapshot


@given(value=containers)
def test_matches_manual_copy_property(value):
    """PROPERTY: copy_mutate(v, f) equals copying v by hand and applying f."""
    manual = copy.deepcopy(value)
    scramble(manual)

    assert copy_mutate(value, scramble) == manual


@given(value=containers)
def test_identity_property(value):
    """PROPERTY: A no-op transform yields a value equal to the original."""
    assert copy_mutate(value, no_op) == value


@given(value=containers)
def test_result_independent_property(value):
    """PROPERTY: Mutating the result after the call never reaches the original."""
    snapshot = copy.deepcopy(value)

    result = copy_mutate(value, no_op)
    scramble(result)

    assert value == snapshot
