"""The immutable interaction produced by :class:`InteractionBuilder`."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .counts import CountRange
from .results import NO_RESULT

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .constraints import InvocationConstraint
    from .invocation import Invocation
    from .results import ResultGenerator


@dc.dataclass(frozen=True, slots=True)
class Interaction:
    """An expected call on a mock together with its response.

    Parameters
    ----------
    line, column, text:
        Location and source text of the declaration, used in failure
        messages.
    count_range:
        How often the interaction may be invoked.
    constraints:
        Invocation constraints; all of them must hold for a match.
    result:
        Generator for the value returned by matched invocations.
    """

    line: int
    column: int
    text: str
    count_range: CountRange = dc.field(default_factory=CountRange)
    constraints: tuple[InvocationConstraint, ...] = ()
    result: ResultGenerator = NO_RESULT

    # Equality is structural and may involve unhashable values, so
    # interactions are never hashable; key them by identity instead.
    __hash__ = None  # type: ignore[assignment]

    @property
    def location(self) -> tuple[int, int, str]:
        """Return the ``(line, column, text)`` diagnostic triple."""
        return (self.line, self.column, self.text)

    def matches(self, invocation: Invocation) -> bool:
        """Return ``True`` if *invocation* satisfies every constraint."""
        return all(c.is_satisfied_by(invocation) for c in self.constraints)

    def produce_result(self, invocation: Invocation) -> object:
        """Return the next result for a matched *invocation*."""
        return self.result.generate(invocation)

    def is_satisfied(self, count: int) -> bool:
        """Return ``True`` if *count* invocations meet the lower bound."""
        return self.count_range.is_satisfied_by(count)

    def is_exhausted(self, count: int) -> bool:
        """Return ``True`` if *count* invocations reach the upper bound."""
        return self.count_range.is_exhausted_by(count)

    def __str__(self) -> str:
        return self.text


__all__ = ["Interaction"]
