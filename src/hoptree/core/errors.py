"""Error taxonomy for hop tree construction."""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError


class HopTreeError(Exception):
    """Base class for all hoptree errors."""


class InvalidRangeError(HopTreeError, ValueError):
    """Requested distance range is empty or negative. Raised before any work starts."""

    def __init__(self, min_distance: int, max_distance: int):
        self.min_distance = min_distance
        self.max_distance = max_distance
        if min_distance < 0:
            message = f"Min ({min_distance}) must be >= 0"
        else:
            message = f"Max ({max_distance}) < min ({min_distance})"
        super().__init__(message)


class DistanceError(HopTreeError):
    """Failure tied to one target distance; other distances are unaffected."""

    def __init__(self, target_distance: int, reason: str):
        self.target_distance = target_distance
        self.reason = reason
        super().__init__(f"Distance {target_distance}: {reason}")


class WeightOverflowError(DistanceError, ArithmeticError):
    """An inverse probability weight does not fit the configured integer width."""

    def __init__(self, target_distance: int, weight_bits: int, value: int, factor: int):
        self.weight_bits = weight_bits
        self.value = value
        self.factor = factor
        super().__init__(
            target_distance,
            f"inverse probability weight {value} x {factor} overflows {weight_bits}-bit unsigned range",
        )


class NodeLimitExceededError(DistanceError):
    """Tree grew past the configured node ceiling."""

    def __init__(self, target_distance: int, max_nodes: int):
        self.max_nodes = max_nodes
        super().__init__(target_distance, f"tree exceeds max_nodes={max_nodes}")


class InternalInvariantError(HopTreeError):
    """A defect, not a user error. Never caught by the runner."""

    def __init__(self, message: str, *, target_distance: Optional[int] = None):
        self.target_distance = target_distance
        if target_distance is not None:
            message = f"Distance {target_distance}: {message}"
        super().__init__(message)


class ConfigError(HopTreeError):
    """A settings file is missing, unreadable or fails validation."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        text = f"{message} ({file_path})"
        if isinstance(cause, ValidationError):
            # One "field: reason" pair per rejected builder setting
            fields = [(".".join(str(part) for part in err["loc"]) or "builder", err["msg"]) for err in cause.errors()]
            text += ": " + "; ".join(f"{name}: {msg}" for name, msg in fields)
        elif cause is not None:
            text += f": {cause}"
        super().__init__(text)


__all__ = [
    "HopTreeError",
    "InvalidRangeError",
    "DistanceError",
    "WeightOverflowError",
    "NodeLimitExceededError",
    "InternalInvariantError",
    "ConfigError",
]
