"""Unit tests for result generators."""

from __future__ import annotations

import collections

import pytest

from callspec.invocation import Invocation
from callspec.results import (
    DUMMY_RESULT,
    NO_RESULT,
    CodeResult,
    ConstantResult,
    IterableResult,
    dummy_value,
)


@pytest.fixture
def invocation() -> Invocation:
    """Return a simple invocation record."""
    return Invocation(receiver=object(), method_name="size", return_type=int)


def test_no_result_returns_none(invocation: Invocation) -> None:
    """The default generator produces ``None``."""
    assert NO_RESULT.generate(invocation) is None


def test_constant_result_returns_same_object(invocation: Invocation) -> None:
    """Constants are returned verbatim on every call."""
    value = ["shared"]
    result = ConstantResult(value)
    assert result.generate(invocation) is value
    assert result.generate(invocation) is value


def test_code_result_receives_invocation(invocation: Invocation) -> None:
    """Computed results see the matched invocation."""
    result = CodeResult(lambda inv: inv.method_name.upper())
    assert result.generate(invocation) == "SIZE"


def test_code_result_errors_propagate(invocation: Invocation) -> None:
    """Errors from result functions reach the caller unchanged."""

    def boom(inv: Invocation) -> object:
        raise RuntimeError(inv.method_name)

    with pytest.raises(RuntimeError, match="size"):
        CodeResult(boom).generate(invocation)


def test_iterable_result_repeats_last(invocation: Invocation) -> None:
    """Once exhausted the last value is returned forever."""
    result = IterableResult((1, 2, 3))
    produced = [result.generate(invocation) for _ in range(5)]
    assert produced == [1, 2, 3, 3, 3]


def test_iterable_result_materialises_iterables(invocation: Invocation) -> None:
    """Generators are consumed once at construction."""
    result = IterableResult(n * 2 for n in range(2))
    assert result.values == (0, 2)
    assert [result.generate(invocation) for _ in range(3)] == [0, 2, 2]


def test_empty_iterable_result(invocation: Invocation) -> None:
    """An empty sequence yields ``None``."""
    assert IterableResult(()).generate(invocation) is None


def test_iterable_result_equality_ignores_cursor(invocation: Invocation) -> None:
    """Advancing the cursor does not change equality."""
    first = IterableResult((1, 2))
    second = IterableResult([1, 2])
    first.generate(invocation)
    assert first == second


@pytest.mark.parametrize(
    ("return_type", "expected"),
    [
        (None, None),
        (bool, False),
        (int, 0),
        (float, 0.0),
        (str, ""),
        (bytes, b""),
        (list, []),
        (tuple, ()),
        (dict, {}),
        (set, set()),
        (frozenset, frozenset()),
        (object, None),
    ],
)
def test_dummy_value(return_type: type | None, expected: object) -> None:
    """Builtin types produce their empty value."""
    value = dummy_value(return_type)
    assert value == expected
    assert type(value) is type(expected)


def test_dummy_value_for_subclass() -> None:
    """Subclasses of builtins fall back to the builtin's empty value."""
    assert dummy_value(collections.OrderedDict) == {}


def test_dummy_result_uses_return_type(invocation: Invocation) -> None:
    """The dummy generator consults the declared return type."""
    assert DUMMY_RESULT.generate(invocation) == 0
    invocation.return_type = None
    assert DUMMY_RESULT.generate(invocation) is None
