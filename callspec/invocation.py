"""Invocation records evaluated against interactions."""

from __future__ import annotations

import dataclasses as dc
import typing as t


@dc.dataclass(slots=True)
class Invocation:
    """A single call made on a mock object.

    Records are created by the mock proxy when it intercepts a call and are
    handed to :meth:`Interaction.matches` and
    :meth:`Interaction.produce_result`. ``return_type`` is the declared return
    type of the mocked method, when the proxy knows it.
    """

    receiver: object
    method_name: str
    args: tuple[t.Any, ...] = ()
    kwargs: dict[str, t.Any] = dc.field(default_factory=dict)
    return_type: type | None = None

    def __post_init__(self) -> None:
        self.args = tuple(self.args)
        self.kwargs = dict(self.kwargs)

    def __repr__(self) -> str:
        """Return the call in source-like form."""
        parts = [repr(arg) for arg in self.args]
        parts.extend(f"{key}={value!r}" for key, value in self.kwargs.items())
        return f"Invocation({self.method_name}({', '.join(parts)}))"


__all__ = ["Invocation"]
