"""Staged builder assembling :class:`Interaction` objects."""

from __future__ import annotations

import inspect
import logging
import re
import typing as t

from .arguments import (
    ANY_ARGUMENT,
    CodeArgument,
    EqualArgument,
    NegatingArgument,
    TypeArgument,
)
from .constraints import (
    EqualMethodName,
    IdenticalTarget,
    NamedArgumentList,
    PositionalArgumentList,
    RegexMethodName,
)
from .counts import CountRange, convert_count
from .errors import InteractionSyntaxError, LifecycleError
from .interaction import Interaction
from .results import (
    DUMMY_RESULT,
    NO_RESULT,
    CodeResult,
    ConstantResult,
    IterableResult,
)
from .wildcard import WILDCARD_TEXT, Unconstrained, to_slot

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .arguments import ArgumentConstraint
    from .constraints import InvocationConstraint
    from .results import ResultGenerator

logger = logging.getLogger(__name__)

#: Builder operations a front-end may emit, in grammar order.
OPERATIONS: frozenset[str] = frozenset(
    {
        "set_fixed_count",
        "set_range_count",
        "add_equal_target",
        "add_equal_method_name",
        "add_regex_method_name",
        "set_arg_list_kind",
        "add_arg_name",
        "add_equal_arg",
        "add_code_arg",
        "type_last_arg",
        "negate_last_arg",
        "set_dummy_result",
        "set_constant_result",
        "set_code_result",
        "set_iterable_result",
        "build",
    }
)


class InteractionBuilder:
    """Accumulate the pieces of one interaction and freeze them on ``build()``.

    Operations are expected in grammar order: count, target, method name,
    argument list kind, per-argument constraints and modifiers, result.
    Structural problems raise :class:`InteractionSyntaxError` as soon as
    they are detected. Every operation except :meth:`build` returns the
    builder so calls can be chained. A builder can only be built once.
    """

    def __init__(self, line: int, column: int, text: str) -> None:
        self.line = line
        self.column = column
        self.text = text

        self._count_range = CountRange()
        self._constraints: list[InvocationConstraint] = []
        self._arg_list_index: int | None = None
        self._arg_names: list[str] | None = None
        self._arg_constraints: list[ArgumentConstraint] | None = None
        self._result: ResultGenerator = NO_RESULT
        self._built = False

    # ------------------------------------------------------------------
    # Invocation count
    # ------------------------------------------------------------------
    def set_fixed_count(self, count: object) -> InteractionBuilder:
        """Expect exactly *count* invocations; the wildcard allows any number."""
        self._require_unbuilt("set_fixed_count")
        slot = to_slot(count)
        if isinstance(slot, Unconstrained):
            self._count_range = CountRange()
        else:
            self._count_range = CountRange.exactly(self._convert_count(slot.value))
        return self

    def set_range_count(
        self, min_count: object, max_count: object, inclusive: bool = True
    ) -> InteractionBuilder:
        """Expect between *min_count* and *max_count* invocations.

        A wildcard lower bound means zero and a wildcard upper bound means
        unbounded. When *inclusive* is false the upper bound is excluded.
        """
        self._require_unbuilt("set_range_count")
        low_slot = to_slot(min_count)
        high_slot = to_slot(max_count)
        low = (
            0
            if isinstance(low_slot, Unconstrained)
            else self._convert_count(low_slot.value)
        )
        high = (
            None
            if isinstance(high_slot, Unconstrained)
            else self._convert_count(high_slot.value, inclusive=inclusive)
        )
        if high is not None and low > high:
            msg = "lower bound of invocation count must not exceed upper bound"
            raise self._syntax_error(msg)
        self._count_range = CountRange(low, high)
        return self

    # ------------------------------------------------------------------
    # Target and method name
    # ------------------------------------------------------------------
    def add_equal_target(self, target: object) -> InteractionBuilder:
        """Require calls on *target* itself unless it is the wildcard."""
        self._require_unbuilt("add_equal_target")
        slot = to_slot(target)
        if not isinstance(slot, Unconstrained):
            self._constraints.append(IdenticalTarget(slot.value))
        return self

    def add_equal_method_name(self, name: object) -> InteractionBuilder:
        """Require the method to be called *name* unless *name* is ``"_"``."""
        self._require_unbuilt("add_equal_method_name")
        slot = to_slot(name)
        if isinstance(slot, Unconstrained):
            return self
        if not isinstance(slot.value, str):
            msg = "method name must be a string"
            raise self._syntax_error(msg)
        if slot.value != WILDCARD_TEXT:
            self._constraints.append(EqualMethodName(slot.value))
        return self

    def add_regex_method_name(self, pattern: str) -> InteractionBuilder:
        """Require the method name to match *pattern* in full."""
        self._require_unbuilt("add_regex_method_name")
        try:
            constraint = RegexMethodName(pattern)
        except (re.error, TypeError) as exc:
            msg = f"invalid method name pattern {pattern!r}: {exc}"
            raise self._syntax_error(msg) from exc
        self._constraints.append(constraint)
        return self

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------
    def set_arg_list_kind(self, positional: bool) -> InteractionBuilder:
        """Establish a positional or named argument list.

        The argument list constraint keeps its place among the other
        invocation constraints. Only one argument list may be established.
        """
        self._require_unbuilt("set_arg_list_kind")
        if self._arg_constraints is not None:
            msg = "argument list already established"
            raise self._syntax_error(msg)
        self._arg_list_index = len(self._constraints)
        self._arg_constraints = []
        self._arg_names = None if positional else []
        return self

    def add_arg_name(self, name: str) -> InteractionBuilder:
        """Name the next argument of a named argument list."""
        self._require_unbuilt("add_arg_name")
        self._require_arg_list()
        if self._arg_names is None:
            msg = "argument names require a named argument list"
            raise self._syntax_error(msg)
        self._arg_names.append(name)
        return self

    def add_equal_arg(self, value: object) -> InteractionBuilder:
        """Append an equality constraint; the wildcard accepts any argument."""
        self._require_unbuilt("add_equal_arg")
        args = self._require_arg_list()
        slot = to_slot(value)
        if isinstance(slot, Unconstrained):
            args.append(ANY_ARGUMENT)
        else:
            args.append(EqualArgument(slot.value))
        return self

    def add_code_arg(self, predicate: t.Callable[[t.Any], object]) -> InteractionBuilder:
        """Append a constraint delegating to *predicate*."""
        self._require_unbuilt("add_code_arg")
        args = self._require_arg_list()
        if not callable(predicate):
            msg = "argument predicate must be callable"
            raise self._syntax_error(msg)
        args.append(CodeArgument(predicate))
        return self

    def type_last_arg(self, typ: type) -> InteractionBuilder:
        """Narrow the most recently added argument constraint to *typ*."""
        self._require_unbuilt("type_last_arg")
        args = self._require_last_arg("type")
        try:
            isinstance(None, typ)
        except TypeError as exc:
            msg = f"argument type must be a class, got {typ!r}"
            raise self._syntax_error(msg) from exc
        args[-1] = TypeArgument(typ, args[-1])
        return self

    def negate_last_arg(self) -> InteractionBuilder:
        """Invert the most recently added argument constraint."""
        self._require_unbuilt("negate_last_arg")
        args = self._require_last_arg("negate")
        args[-1] = NegatingArgument(args[-1])
        return self

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def set_dummy_result(self) -> InteractionBuilder:
        """Return a placeholder for the invoked method's return type."""
        self._require_unbuilt("set_dummy_result")
        self._result = DUMMY_RESULT
        return self

    def set_constant_result(self, value: object) -> InteractionBuilder:
        """Return *value* on every call; the wildcard keeps the current result."""
        self._require_unbuilt("set_constant_result")
        slot = to_slot(value)
        if not isinstance(slot, Unconstrained):
            self._result = ConstantResult(slot.value)
        return self

    def set_code_result(
        self, func: t.Callable[[t.Any], object]
    ) -> InteractionBuilder:
        """Compute each result by calling *func* with the invocation."""
        self._require_unbuilt("set_code_result")
        if not callable(func):
            msg = "result function must be callable"
            raise self._syntax_error(msg)
        self._result = CodeResult(func)
        return self

    def set_iterable_result(self, values: t.Iterable[object]) -> InteractionBuilder:
        """Return the items of *values* in turn, repeating the last one."""
        self._require_unbuilt("set_iterable_result")
        try:
            items = tuple(values)
        except TypeError as exc:
            msg = f"iterable result must be iterable, got {type(values).__name__}"
            raise self._syntax_error(msg) from exc
        self._result = IterableResult(items)
        return self

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def build(self) -> Interaction:
        """Freeze the accumulated state into an :class:`Interaction`."""
        self._require_unbuilt("build")
        constraints = list(self._constraints)
        if self._arg_list_index is not None:
            constraints.insert(self._arg_list_index, self._build_arg_list())
        self._built = True
        interaction = Interaction(
            line=self.line,
            column=self.column,
            text=self.text,
            count_range=self._count_range,
            constraints=tuple(constraints),
            result=self._result,
        )
        logger.debug(
            "Built interaction %r at line %d, column %d with count %s",
            self.text,
            self.line,
            self.column,
            self._count_range,
        )
        return interaction

    def apply(self, operation: str, *args: object) -> InteractionBuilder | Interaction:
        """Invoke the builder operation named *operation* with *args*."""
        if operation not in OPERATIONS:
            msg = f"unknown builder operation {operation!r}"
            raise self._syntax_error(msg)
        method = getattr(self, operation)
        try:
            inspect.signature(method).bind(*args)
        except TypeError as exc:
            msg = f"invalid arguments for {operation}: {exc}"
            raise self._syntax_error(msg) from exc
        return method(*args)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_arg_list(self) -> InvocationConstraint:
        arg_constraints = tuple(self._arg_constraints or ())
        if self._arg_names is None:
            return PositionalArgumentList(arg_constraints)
        if len(self._arg_names) != len(arg_constraints):
            msg = (
                f"named argument list has {len(self._arg_names)} names "
                f"but {len(arg_constraints)} argument constraints"
            )
            raise self._syntax_error(msg)
        return NamedArgumentList(tuple(self._arg_names), arg_constraints)

    def _require_unbuilt(self, action: str) -> None:
        """Ensure ``build()`` has not been called yet."""
        if self._built:
            msg = (
                f"Cannot call {action}(): interaction {self.text!r} "
                "has already been built"
            )
            raise LifecycleError(msg)

    def _require_arg_list(self) -> list[ArgumentConstraint]:
        """Return the active argument constraints or fail."""
        if self._arg_constraints is None:
            msg = "no argument list established"
            raise self._syntax_error(msg)
        return self._arg_constraints

    def _require_last_arg(self, modifier: str) -> list[ArgumentConstraint]:
        """Return the argument constraints when a modifier has a target."""
        args = self._require_arg_list()
        if not args:
            msg = f"cannot {modifier} an argument before any argument constraint"
            raise self._syntax_error(msg)
        return args

    def _convert_count(self, count: object, *, inclusive: bool = True) -> int:
        try:
            return convert_count(count, inclusive=inclusive)
        except (TypeError, ValueError) as exc:
            raise self._syntax_error(str(exc)) from exc

    def _syntax_error(self, message: str) -> InteractionSyntaxError:
        return InteractionSyntaxError(message, self.line, self.column, self.text)


def build_interaction(
    line: int,
    column: int,
    text: str,
    calls: t.Iterable[tuple[str, t.Sequence[object]]],
) -> Interaction:
    """Replay front-end *calls* on a fresh builder and return the interaction.

    Each call is an ``(operation, args)`` pair naming one of
    :data:`OPERATIONS`. A trailing ``build`` call is optional.
    """
    builder = InteractionBuilder(line, column, text)
    outcome: InteractionBuilder | Interaction = builder
    for operation, args in calls:
        outcome = builder.apply(operation, *args)
    if isinstance(outcome, Interaction):
        return outcome
    return builder.build()


__all__ = ["OPERATIONS", "InteractionBuilder", "build_interaction"]
