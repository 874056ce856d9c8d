"""Unit tests for argument constraints."""

from __future__ import annotations

import pytest

from callspec.arguments import (
    ANY_ARGUMENT,
    AnyArgument,
    CodeArgument,
    EqualArgument,
    NegatingArgument,
    TypeArgument,
)


@pytest.mark.parametrize("value", [None, 0, "x", object(), [1, 2]])
def test_any_argument_accepts_everything(value: object) -> None:
    """The wildcard constraint is always satisfied."""
    assert ANY_ARGUMENT.is_satisfied_by(value)
    assert AnyArgument() == ANY_ARGUMENT
    assert repr(ANY_ARGUMENT) == "_"


def test_equal_argument_uses_value_equality() -> None:
    """Equal values match even when they are different objects."""
    constraint = EqualArgument([1, 2])
    assert constraint.is_satisfied_by([1, 2])
    assert not constraint.is_satisfied_by([2, 1])
    assert EqualArgument(1).is_satisfied_by(1.0)
    assert repr(constraint) == "EqualArgument(value=[1, 2])"


def test_code_argument_truthiness() -> None:
    """The predicate result is coerced to ``bool``."""
    constraint = CodeArgument(lambda arg: arg and arg.upper())
    assert constraint.is_satisfied_by("hi")
    assert not constraint.is_satisfied_by("")


def test_code_argument_errors_propagate() -> None:
    """Predicate failures are not turned into non-matches."""

    def boom(arg: object) -> bool:
        raise KeyError(arg)

    with pytest.raises(KeyError):
        CodeArgument(boom).is_satisfied_by("x")


def test_type_argument_short_circuits() -> None:
    """The wrapped constraint is only consulted for values of the type."""
    seen: list[object] = []

    def record(arg: object) -> bool:
        seen.append(arg)
        return True

    constraint = TypeArgument(str, CodeArgument(record))
    assert not constraint.is_satisfied_by(5)
    assert seen == []
    assert constraint.is_satisfied_by("five")
    assert seen == ["five"]


def test_type_argument_accepts_subclasses() -> None:
    """Narrowing is by assignability, not exact type."""
    assert TypeArgument(int, ANY_ARGUMENT).is_satisfied_by(True)
    assert not TypeArgument(int, ANY_ARGUMENT).is_satisfied_by(None)


def test_negating_argument() -> None:
    """Negation inverts the wrapped result."""
    constraint = NegatingArgument(EqualArgument(5))
    assert not constraint.is_satisfied_by(5)
    assert constraint.is_satisfied_by(6)
    assert constraint.is_satisfied_by("5")


def test_structural_equality() -> None:
    """Constraints compare by structure."""
    assert NegatingArgument(TypeArgument(str, ANY_ARGUMENT)) == NegatingArgument(
        TypeArgument(str, AnyArgument())
    )
    assert EqualArgument(1) != EqualArgument(2)
