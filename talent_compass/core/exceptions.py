"""Exception hierarchy for Talent Compass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class TalentCompassError(Exception):
    """Base class for domain errors with structured payloads."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        base = f"[{self.error_code}] {self.message}"
        if self.details:
            return f"{base} :: {self.details}"
        return base


class InvalidRatingError(TalentCompassError):
    """Raised when a performance or potential rating is not 1, 2 or 3."""


class UnknownCapabilityError(TalentCompassError):
    """Raised when a permission lookup names a capability that does not exist."""


class InvalidRecordError(TalentCompassError):
    """Raised when record fields carry values outside their enumerations."""


class RecordNotFoundError(TalentCompassError):
    """Raised when an employee or user id is not present in the store."""


class DuplicateRecordError(TalentCompassError):
    """Raised when a record id or username is already taken."""


class PermissionDeniedError(TalentCompassError):
    """Raised by services when the acting user lacks a capability or section."""


__all__ = [
    "DuplicateRecordError",
    "InvalidRatingError",
    "InvalidRecordError",
    "PermissionDeniedError",
    "RecordNotFoundError",
    "TalentCompassError",
    "UnknownCapabilityError",
]
