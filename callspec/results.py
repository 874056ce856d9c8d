"""Result generators producing return values for matched invocations."""

from __future__ import annotations

import dataclasses as dc
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .invocation import Invocation


class ResultGenerator(t.Protocol):
    """Produce the value returned for a matched invocation."""

    def generate(self, invocation: Invocation) -> object:
        """Return the result for *invocation*."""
        ...


# Ordered so that ``bool`` wins over its ``int`` base.
_DUMMY_VALUES: tuple[tuple[type, t.Callable[[], object]], ...] = (
    (bool, bool),
    (int, int),
    (float, float),
    (complex, complex),
    (str, str),
    (bytes, bytes),
    (list, list),
    (tuple, tuple),
    (dict, dict),
    (set, set),
    (frozenset, frozenset),
)


def dummy_value(return_type: type | None) -> object:
    """Return a placeholder value suitable for *return_type*.

    Builtin scalar and container types yield their empty or zero value;
    anything else, including an unknown return type, yields ``None``.
    """
    if not isinstance(return_type, type):
        return None
    for base, factory in _DUMMY_VALUES:
        if issubclass(return_type, base):
            return factory()
    return None


@dc.dataclass(frozen=True, slots=True)
class NoResult:
    """Return ``None``."""

    def generate(self, invocation: Invocation) -> None:
        """Return ``None`` for every invocation."""
        return None


NO_RESULT = NoResult()


@dc.dataclass(frozen=True, slots=True)
class DummyResult:
    """Return a placeholder matching the invocation's declared return type."""

    def generate(self, invocation: Invocation) -> object:
        """Delegate to :func:`dummy_value`."""
        return dummy_value(invocation.return_type)


DUMMY_RESULT = DummyResult()


@dc.dataclass(frozen=True, slots=True)
class ConstantResult:
    """Return ``value`` on every invocation."""

    value: object

    def generate(self, invocation: Invocation) -> object:
        """Return the stored value verbatim."""
        return self.value


@dc.dataclass(frozen=True, slots=True)
class CodeResult:
    """Compute the result by calling ``func`` with the invocation.

    Exceptions raised by ``func`` propagate to the caller.
    """

    func: t.Callable[[Invocation], object]

    def generate(self, invocation: Invocation) -> object:
        """Return ``func(invocation)``."""
        return self.func(invocation)


@dc.dataclass(slots=True)
class IterableResult:
    """Return ``values`` one at a time, repeating the last once exhausted.

    An empty sequence yields ``None`` on every invocation. The cursor is not
    part of equality.
    """

    values: tuple[object, ...]
    _index: int = dc.field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.values = tuple(self.values)

    def generate(self, invocation: Invocation) -> object:
        """Return the next value in sequence."""
        if not self.values:
            return None
        value = self.values[self._index]
        if self._index < len(self.values) - 1:
            self._index += 1
        return value


__all__ = [
    "DUMMY_RESULT",
    "NO_RESULT",
    "CodeResult",
    "ConstantResult",
    "DummyResult",
    "IterableResult",
    "NoResult",
    "ResultGenerator",
    "dummy_value",
]
