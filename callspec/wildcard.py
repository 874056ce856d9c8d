"""The wildcard sentinel and the tagged slots it is normalised into."""

from __future__ import annotations

import dataclasses as dc
import typing as t


class _Wildcard:
    """Placeholder meaning "no constraint here"."""

    __slots__ = ()
    _instance: t.ClassVar[_Wildcard | None] = None

    def __new__(cls) -> _Wildcard:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "_"


WILDCARD = _Wildcard()
_ = WILDCARD

#: Textual form of the wildcard, used where a slot only accepts names.
WILDCARD_TEXT = str(WILDCARD)


class Unconstrained:
    """Slot tag for a value the interaction does not constrain."""

    __slots__ = ()
    _instance: t.ClassVar[Unconstrained | None] = None

    def __new__(cls) -> Unconstrained:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCONSTRAINED"


UNCONSTRAINED = Unconstrained()


@dc.dataclass(frozen=True, slots=True)
class Constrained:
    """Slot tag wrapping a concrete value."""

    value: object


Slot = Unconstrained | Constrained


def to_slot(value: object) -> Slot:
    """Normalise *value* into a tagged slot.

    Only the :data:`WILDCARD` instance itself (compared by identity) is read
    as unconstrained. Values that are already tagged pass through unchanged,
    so ``Constrained(WILDCARD)`` can be used to expect the sentinel literally.
    """
    if isinstance(value, (Unconstrained, Constrained)):
        return value
    if value is WILDCARD:
        return UNCONSTRAINED
    return Constrained(value)


__all__ = [
    "UNCONSTRAINED",
    "WILDCARD",
    "WILDCARD_TEXT",
    "Constrained",
    "Slot",
    "Unconstrained",
    "to_slot",
    "_",
]
