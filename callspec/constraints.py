"""Constraints applied to a whole invocation."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .arguments import ArgumentConstraint
    from .invocation import Invocation


class InvocationConstraint(t.Protocol):
    """Predicate over a complete :class:`Invocation`."""

    def is_satisfied_by(self, invocation: Invocation) -> bool:
        """Return ``True`` if *invocation* satisfies the constraint."""
        ...


@dc.dataclass(frozen=True, slots=True)
class IdenticalTarget:
    """Require the call to be made on exactly ``target``."""

    target: object

    def is_satisfied_by(self, invocation: Invocation) -> bool:
        """Compare receivers by identity, never by equality."""
        return invocation.receiver is self.target


@dc.dataclass(frozen=True, slots=True)
class EqualMethodName:
    """Require the invoked method to be called ``name``."""

    name: str

    def is_satisfied_by(self, invocation: Invocation) -> bool:
        """Return ``True`` if the method names are equal."""
        return invocation.method_name == self.name


@dc.dataclass(frozen=True, slots=True)
class RegexMethodName:
    """Require the whole method name to match ``pattern``."""

    pattern: str
    _regex: re.Pattern[str] = dc.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    def is_satisfied_by(self, invocation: Invocation) -> bool:
        """Return ``True`` if the method name matches ``pattern`` in full."""
        return self._regex.fullmatch(invocation.method_name) is not None


@dc.dataclass(frozen=True, slots=True)
class PositionalArgumentList:
    """Match positional arguments one-to-one against ``constraints``.

    Invocations passing keyword arguments never match.
    """

    constraints: tuple[ArgumentConstraint, ...] = ()

    def is_satisfied_by(self, invocation: Invocation) -> bool:
        """Validate argument count and each position in order."""
        if invocation.kwargs:
            return False
        if len(invocation.args) != len(self.constraints):
            return False
        return all(
            constraint.is_satisfied_by(arg)
            for arg, constraint in zip(invocation.args, self.constraints, strict=True)
        )


@dc.dataclass(frozen=True, slots=True)
class NamedArgumentList:
    """Match keyword arguments by name against paired ``constraints``.

    Every declared name must be present and satisfy its constraint; keyword
    arguments without a declared name are not checked.
    """

    names: tuple[str, ...] = ()
    constraints: tuple[ArgumentConstraint, ...] = ()

    def __post_init__(self) -> None:
        if len(self.names) != len(self.constraints):
            msg = "names and constraints must have the same length"
            raise ValueError(msg)

    def is_satisfied_by(self, invocation: Invocation) -> bool:
        """Resolve each declared name against the invocation's kwargs."""
        kwargs = invocation.kwargs
        for name, constraint in zip(self.names, self.constraints, strict=True):
            if name not in kwargs:
                return False
            if not constraint.is_satisfied_by(kwargs[name]):
                return False
        return True


__all__ = [
    "EqualMethodName",
    "IdenticalTarget",
    "InvocationConstraint",
    "NamedArgumentList",
    "PositionalArgumentList",
    "RegexMethodName",
]
