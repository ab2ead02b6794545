"""Helpers for selecting between two values the way a ternary expression would.

Eager helpers receive both values already computed. Lazy helpers receive
zero-argument factories and invoke exactly one of them, so the cost and side
effects of the unchosen branch never happen. Exceptions raised by a factory
propagate to the caller untouched.

The plain helpers never raise on their own and read no process state. The
``*_strict`` variants additionally reject non-``bool`` conditions and
non-callable factories before choosing a branch.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .conditions import require_bool, require_producer

T = TypeVar("T")
U = TypeVar("U")


def select(condition: object, true_value: T, false_value: T) -> T:
    """
    Return ``true_value`` when the condition holds, otherwise ``false_value``.

    Both arguments are evaluated by the caller before the call. Use
    :func:`select_lazy` when computing the unchosen branch is expensive or
    has side effects.

    Example:
        select(5 > 3, 10, 20)  # 10
    """
    if condition:
        return true_value
    return false_value


def select_lazy(condition: object, true_factory: Callable[[], T], false_factory: Callable[[], T]) -> T:
    """
    Invoke and return ``true_factory()`` when the condition holds, otherwise ``false_factory()``.

    Exactly one factory is invoked per call.

    Example:
        select_lazy(5 > 3, lambda: 10, lambda: 20)  # 10
    """
    if condition:
        return true_factory()
    return false_factory()


def select_strict(condition: bool, true_value: T, false_value: T) -> T:
    """Like :func:`select`, but raise ConditionTypeError unless the condition is a ``bool``."""
    return select(require_bool(condition), true_value, false_value)


def select_lazy_strict(condition: bool, true_factory: Callable[[], T], false_factory: Callable[[], T]) -> T:
    """
    Like :func:`select_lazy`, with type checks on every argument.

    Both factories are checked before either is invoked, so a wrong argument is
    reported even for the branch that would not have run.

    Raises:
        ConditionTypeError: If the condition is not a ``bool``
        ProducerTypeError: If either factory is not callable
    """
    chosen = require_bool(condition)
    require_producer(true_factory, "true_factory")
    require_producer(false_factory, "false_factory")
    return select_lazy(chosen, true_factory, false_factory)


def select_truthy(value: T, alternate: U) -> T | U:
    if value:
        return value
    return alternate


def select_truthy_lazy(value: T, alternate_factory: Callable[[], U]) -> T | U:
    """Return ``value`` when truthy; otherwise invoke ``alternate_factory`` and return its result."""
    if value:
        return value
    return alternate_factory()


__all__ = [
    "select",
    "select_lazy",
    "select_lazy_strict",
    "select_strict",
    "select_truthy",
    "select_truthy_lazy",
]
