"""Invocation count ranges."""

from __future__ import annotations

import dataclasses as dc
import numbers


@dc.dataclass(frozen=True, slots=True)
class CountRange:
    """Inclusive bounds on how often an interaction may be invoked.

    ``max_count`` of ``None`` means the range is unbounded above.
    """

    min_count: int = 0
    max_count: int | None = None

    def __post_init__(self) -> None:
        if self.min_count < 0:
            msg = "min_count must be >= 0"
            raise ValueError(msg)
        if self.max_count is not None and self.min_count > self.max_count:
            msg = "min_count must not exceed max_count"
            raise ValueError(msg)

    @classmethod
    def exactly(cls, count: int) -> CountRange:
        """Return a range admitting only *count*."""
        return cls(count, count)

    @property
    def unbounded(self) -> bool:
        """Return ``True`` when there is no upper bound."""
        return self.max_count is None

    def __contains__(self, count: object) -> bool:
        """Return ``True`` if *count* lies within the range."""
        if not isinstance(count, int):
            return False
        return self.is_satisfied_by(count) and (
            self.max_count is None or count <= self.max_count
        )

    def is_satisfied_by(self, count: int) -> bool:
        """Return ``True`` once *count* invocations reach the lower bound."""
        return count >= self.min_count

    def is_exhausted_by(self, count: int) -> bool:
        """Return ``True`` when *count* invocations leave no room for another."""
        return self.max_count is not None and count >= self.max_count

    def __str__(self) -> str:
        if self.max_count is None:
            return f"[{self.min_count}, unbounded)"
        return f"[{self.min_count}, {self.max_count}]"


def convert_count(count: object, *, inclusive: bool = True) -> int:
    """Convert a user-supplied invocation count to an inclusive bound.

    The value is truncated toward zero. An exclusive bound is turned into an
    inclusive one by subtracting one before the sign check.

    Raises
    ------
    TypeError
        When *count* is not a number, or is complex.
    ValueError
        When *count* is not finite or the resulting bound is negative.
    """
    if (
        isinstance(count, bool)
        or not isinstance(count, numbers.Number)
        or (isinstance(count, numbers.Complex) and not isinstance(count, numbers.Real))
    ):
        msg = "invocation count must be a number"
        raise TypeError(msg)
    try:
        int_count = int(count)  # type: ignore[call-overload]
    except (ValueError, OverflowError) as exc:
        msg = "invocation count must be finite"
        raise ValueError(msg) from exc

    if not inclusive:
        int_count -= 1
    if int_count < 0:
        msg = "invocation count must be >= 0"
        raise ValueError(msg)
    return int_count


__all__ = ["CountRange", "convert_count"]
