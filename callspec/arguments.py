"""Constraints applied to individual call arguments."""

from __future__ import annotations

import dataclasses as dc
import typing as t


class ArgumentConstraint(t.Protocol):
    """Predicate over a single argument value."""

    def is_satisfied_by(self, arg: object) -> bool:
        """Return ``True`` if *arg* satisfies the constraint."""
        ...


@dc.dataclass(frozen=True, slots=True)
class AnyArgument:
    """Match any argument."""

    def is_satisfied_by(self, arg: object) -> bool:
        """Return ``True`` for any input."""
        return True

    def __repr__(self) -> str:
        return "_"


ANY_ARGUMENT = AnyArgument()


@dc.dataclass(frozen=True, slots=True)
class EqualArgument:
    """Match arguments equal to ``value``."""

    value: object

    def is_satisfied_by(self, arg: object) -> bool:
        """Return ``True`` if *arg* equals ``value``."""
        return bool(arg == self.value)


@dc.dataclass(frozen=True, slots=True)
class CodeArgument:
    """Use a caller-supplied ``predicate`` to decide a match.

    Exceptions raised by ``predicate`` are not caught.
    """

    predicate: t.Callable[[t.Any], object]

    def is_satisfied_by(self, arg: object) -> bool:
        """Return ``True`` if ``predicate(arg)`` is truthy."""
        return bool(self.predicate(arg))


@dc.dataclass(frozen=True, slots=True)
class TypeArgument:
    """Require an argument of type ``typ`` that also satisfies ``constraint``."""

    typ: type
    constraint: ArgumentConstraint

    def is_satisfied_by(self, arg: object) -> bool:
        """Check the type first, then the wrapped constraint."""
        return isinstance(arg, self.typ) and self.constraint.is_satisfied_by(arg)


@dc.dataclass(frozen=True, slots=True)
class NegatingArgument:
    """Invert the result of ``constraint``."""

    constraint: ArgumentConstraint

    def is_satisfied_by(self, arg: object) -> bool:
        """Return ``True`` if the wrapped constraint rejects *arg*."""
        return not self.constraint.is_satisfied_by(arg)


__all__ = [
    "ANY_ARGUMENT",
    "AnyArgument",
    "ArgumentConstraint",
    "CodeArgument",
    "EqualArgument",
    "NegatingArgument",
    "TypeArgument",
]
