"""Exception classes for the ternary helpers.

Selection itself never raises. These exceptions exist only for strict mode,
which checks condition and producer types before a branch is chosen.

Exception classes support two patterns:
1. No-argument raise: raise ConditionTypeError()
2. Contextual attributes: err = ConditionTypeError(value="yes"); raise err
"""

from typing import Any


class TernaryError(Exception):
    """Base exception for all ternary errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Ternary error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConditionTypeError(TernaryError, TypeError):
    """Condition must be a bool in strict mode."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message and "value" in kwargs:
            message = f"Condition must be a bool in strict mode (got {type(kwargs['value']).__name__})"
        super().__init__(message, **kwargs)


class ProducerTypeError(TernaryError, TypeError):
    """Lazy branch must be a zero-argument callable."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message and "field_name" in kwargs:
            message = f"{kwargs['field_name']} must be a zero-argument callable"
            if "value" in kwargs:
                message += f" (got {type(kwargs['value']).__name__})"
        super().__init__(message, **kwargs)


__all__ = [
    "TernaryError",
    "ConditionTypeError",
    "ProducerTypeError",
]
