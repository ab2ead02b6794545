"""
Fluent builder for ternary expressions.

The chain reads like a conditional expression:

    if_cond(5 > 3).then(10).else_(20)                              # 10
    if_cond(5 > 3).then_lazy(lambda: 10).else_lazy(lambda: 20)     # 10

Each step returns a new frozen holder exposing only the next legal step, so an
eager ``then`` can only be finished by ``else_`` and a lazy ``then_lazy`` only by
``else_lazy``. Resolution delegates to :mod:`ternary.selection`, so the chain
behaves exactly like the direct helpers. ``if_cond(flag, strict=True)`` gives the
chain the checks of the ``*_strict`` helpers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .conditions import require_bool, require_producer
from .selection import select, select_lazy, select_lazy_strict

T = TypeVar("T")


@dataclass(frozen=True)
class PendingCondition:
    """Condition of a ternary expression awaiting its true branch."""

    condition: bool
    strict: bool = False

    def then(self, true_value: T) -> PendingDecision[T]:
        """Attach the value returned when the condition holds."""
        return PendingDecision(condition=self.condition, true_value=true_value)

    def then_lazy(self, true_factory: Callable[[], T]) -> PendingDecisionLazy[T]:
        """Attach a factory invoked only when the condition holds."""
        if self.strict:
            require_producer(true_factory, "true_factory")
        return PendingDecisionLazy(condition=self.condition, true_factory=true_factory, strict=self.strict)


@dataclass(frozen=True)
class PendingDecision(Generic[T]):
    """Condition plus true value; ``else_`` completes the expression."""

    condition: bool
    true_value: T

    def else_(self, false_value: T) -> T:
        return select(self.condition, self.true_value, false_value)


@dataclass(frozen=True)
class PendingDecisionLazy(Generic[T]):
    """Condition plus true-branch factory; ``else_lazy`` completes the expression."""

    condition: bool
    true_factory: Callable[[], T]
    strict: bool = False

    def else_lazy(self, false_factory: Callable[[], T]) -> T:
        """Attach the false-branch factory and invoke whichever factory the condition selects."""
        if self.strict:
            return select_lazy_strict(self.condition, self.true_factory, false_factory)
        return select_lazy(self.condition, self.true_factory, false_factory)


def if_cond(condition: object, *, strict: bool = False) -> PendingCondition:
    """
    Begin a ternary expression.

    The condition is evaluated once, here. With ``strict=True`` the condition
    must be a ``bool`` and lazy branches must be callable.

    Raises:
        ConditionTypeError: If ``strict`` is set and the condition is not a ``bool``
    """
    if strict:
        return PendingCondition(condition=require_bool(condition), strict=True)
    return PendingCondition(condition=bool(condition))


__all__ = [
    "PendingCondition",
    "PendingDecision",
    "PendingDecisionLazy",
    "if_cond",
]
