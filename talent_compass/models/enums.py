"""Enumerations shared by employee and user records."""

from __future__ import annotations

from enum import Enum, IntEnum


class PerformanceRating(IntEnum):
    BELOW = 1
    MEETS = 2
    EXCEEDS = 3

    @property
    def label(self) -> str:
        return f"{self.name.title()} Expectations"


class PotentialRating(IntEnum):
    LIMITED = 1
    MODERATE = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return f"{self.name.title()} Growth"


class RiskLevel(str, Enum):
    """Used for both risk of loss and impact of loss."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def ordinal(self) -> int:
        return _RISK_ORDINALS[self]


_RISK_ORDINALS = {RiskLevel.LOW: 1, RiskLevel.MEDIUM: 2, RiskLevel.HIGH: 3}


class Readiness(str, Enum):
    READY_NOW = "Ready Now"
    ONE_TO_THREE_YEARS = "1-3 Years"
    MORE_THAN_THREE_YEARS = "More than 3 Years"

    @property
    def score(self) -> int:
        return _READINESS_SCORES[self]


_READINESS_SCORES = {
    Readiness.READY_NOW: 3,
    Readiness.ONE_TO_THREE_YEARS: 2,
    Readiness.MORE_THAN_THREE_YEARS: 1,
}


class Direction(str, Enum):
    OPERATIONS = "Operations"
    FINANCE = "Finance"
    HR = "HR"
    SALES_AND_MARKETING = "Sales & Marketing"
    IT = "IT"


class JobGrade(str, Enum):
    G1 = "G1"
    G2 = "G2"
    G3 = "G3"
    G4 = "G4"


class UserRole(str, Enum):
    MANAGER = "Manager"
    HR = "HR"


__all__ = [
    "Direction",
    "JobGrade",
    "PerformanceRating",
    "PotentialRating",
    "Readiness",
    "RiskLevel",
    "UserRole",
]
