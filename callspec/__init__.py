"""Immutable, evaluable specifications of expected calls on mock objects.

An :class:`InteractionBuilder` collects a count range, invocation and
argument constraints and a result generator, then freezes them into an
:class:`Interaction` that a matching engine tests against recorded
:class:`Invocation` objects.
"""

from __future__ import annotations

from .arguments import (
    ANY_ARGUMENT,
    AnyArgument,
    CodeArgument,
    EqualArgument,
    NegatingArgument,
    TypeArgument,
)
from .builder import OPERATIONS, InteractionBuilder, build_interaction
from .constraints import (
    EqualMethodName,
    IdenticalTarget,
    NamedArgumentList,
    PositionalArgumentList,
    RegexMethodName,
)
from .counts import CountRange, convert_count
from .errors import CallSpecError, InteractionSyntaxError, LifecycleError
from .interaction import Interaction
from .invocation import Invocation
from .results import (
    DUMMY_RESULT,
    NO_RESULT,
    CodeResult,
    ConstantResult,
    DummyResult,
    IterableResult,
    NoResult,
    dummy_value,
)
from .wildcard import (
    UNCONSTRAINED,
    WILDCARD,
    Constrained,
    Unconstrained,
    _,
    to_slot,
)

__all__ = [
    "ANY_ARGUMENT",
    "DUMMY_RESULT",
    "NO_RESULT",
    "OPERATIONS",
    "UNCONSTRAINED",
    "WILDCARD",
    "AnyArgument",
    "CallSpecError",
    "CodeArgument",
    "CodeResult",
    "ConstantResult",
    "Constrained",
    "CountRange",
    "DummyResult",
    "EqualArgument",
    "EqualMethodName",
    "IdenticalTarget",
    "Interaction",
    "InteractionBuilder",
    "InteractionSyntaxError",
    "Invocation",
    "IterableResult",
    "LifecycleError",
    "NamedArgumentList",
    "NegatingArgument",
    "NoResult",
    "PositionalArgumentList",
    "RegexMethodName",
    "TypeArgument",
    "Unconstrained",
    "_",
    "build_interaction",
    "convert_count",
    "dummy_value",
    "to_slot",
]
