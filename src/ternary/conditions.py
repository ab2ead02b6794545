"""
Condition and producer guards used by the strict selection helpers.

Each helper focuses on a single check so the strict variants can compose them
without introducing additional branching. The plain helpers never call these.
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import ConditionTypeError, ProducerTypeError

logger = logging.getLogger(__name__)


def require_bool(condition: Any) -> bool:
    """Return the condition unchanged when it is a real ``bool``."""
    if not isinstance(condition, bool):
        logger.debug("Rejecting %s condition in strict selection", type(condition).__name__)
        raise ConditionTypeError(value=condition)
    return condition


def require_producer(factory: Any, field_name: str) -> None:
    """Ensure a lazy branch is callable."""
    if not callable(factory):
        logger.debug("Rejecting non-callable %s in strict selection", field_name)
        raise ProducerTypeError(field_name=field_name, value=factory)


__all__ = ["require_bool", "require_producer"]
