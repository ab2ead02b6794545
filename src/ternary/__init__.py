"""Ternary expression helpers: eager, lazy and fluent conditional value selection."""

from .exceptions import ConditionTypeError, ProducerTypeError, TernaryError
from .fluent import PendingCondition, PendingDecision, PendingDecisionLazy, if_cond
from .selection import (
    select,
    select_lazy,
    select_lazy_strict,
    select_strict,
    select_truthy,
    select_truthy_lazy,
)

__all__ = [
    "ConditionTypeError",
    "PendingCondition",
    "PendingDecision",
    "PendingDecisionLazy",
    "ProducerTypeError",
    "TernaryError",
    "if_cond",
    "select",
    "select_lazy",
    "select_lazy_strict",
    "select_strict",
    "select_truthy",
    "select_truthy_lazy",
]
