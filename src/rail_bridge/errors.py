"""
Errors - Exception Types for Rail Bridge.

Only one failure is part of the domain: a train asked to manage itself
before a lead has been assigned. It is surfaced as UnconfiguredError
instead of failing on a missing attribute deep inside the delegation.

Input errors (a missing train handed to a lead, an unknown variant name)
use the built-in ValueError.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of domain errors."""

    UNCONFIGURED = "UNCONFIGURED"


class RailBridgeError(Exception):
    """Base class for all Rail Bridge domain errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class UnconfiguredError(RailBridgeError):
    """Raised when a train is managed without an assigned lead."""

    def __init__(self, category_label: Optional[str] = None) -> None:
        self.category_label = category_label
        target = category_label or "train"
        super().__init__(
            f"{target} has no lead assigned; call set_lead() before manage()",
            ErrorKind.UNCONFIGURED,
        )
