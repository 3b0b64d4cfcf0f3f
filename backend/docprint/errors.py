"""Boundary validation failures raised by the fingerprinting engine."""
from __future__ import annotations

from typing import Any


class FingerprintValidationError(ValueError):
    """A caller passed an argument outside the engine's contract."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")


def require_text(value: Any, parameter: str = "text") -> str:
    if not isinstance(value, str):
        raise FingerprintValidationError(parameter, f"expected str, got {type(value).__name__}")
    return value


def require_positive_int(value: Any, parameter: str) -> int:
    # bool is an int subclass but never a meaningful size.
    if isinstance(value, bool) or not isinstance(value, int):
        raise FingerprintValidationError(parameter, f"expected int, got {type(value).__name__}")
    if value <= 0:
        raise FingerprintValidationError(parameter, f"must be > 0, got {value}")
    return value
