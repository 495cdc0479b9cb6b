"""Retention and development decision tables.

Each table is evaluated top to bottom and the first matching branch wins. The
final branch always matches. Step order is part of the contract.
"""

from __future__ import annotations

from typing import List, Tuple

from talent_compass.models.enums import Readiness, RiskLevel
from talent_compass.utils.validators import coerce_enum, require_rating

IMMEDIATE_RETENTION_ACTIONS: Tuple[str, ...] = (
    "Immediate retention bonus consideration",
    "Career development plan within 30 days",
    "Regular one-on-one meetings with senior leadership",
    "Explore internal growth opportunities",
)

HIGH_RISK_ACTIONS: Tuple[str, ...] = (
    "Schedule retention conversation",
    "Review compensation and benefits",
    "Identify development opportunities",
)

STANDARD_RETENTION_ACTIONS: Tuple[str, ...] = (
    "Regular check-ins",
    "Monitor engagement levels",
    "Provide growth opportunities",
)

LEADERSHIP_TRACK: Tuple[str, ...] = (
    "Assign to leadership development program",
    "Provide mentoring opportunities",
    "Consider for immediate promotion",
    "Cross-functional project leadership",
)

MANAGEMENT_TRACK: Tuple[str, ...] = (
    "Enroll in management training",
    "Assign stretch assignments",
    "Quarterly performance reviews",
    "Skill gap analysis and development",
)

FOUNDATION_TRACK: Tuple[str, ...] = (
    "Focus on core competency building",
    "Regular coaching sessions",
    "Technical skills enhancement",
    "Performance improvement plan",
)


def recommend(risk: RiskLevel | str, impact: RiskLevel | str) -> List[str]:
    """Retention actions for an employee's risk and impact of loss."""

    risk = coerce_enum(RiskLevel, risk, "risk_of_loss")
    impact = coerce_enum(RiskLevel, impact, "impact_of_loss")
    if risk is RiskLevel.HIGH and impact is RiskLevel.HIGH:
        return list(IMMEDIATE_RETENTION_ACTIONS)
    if risk is RiskLevel.HIGH:
        return list(HIGH_RISK_ACTIONS)
    return list(STANDARD_RETENTION_ACTIONS)


def development_plan(readiness: Readiness | str, performance: int) -> List[str]:
    """Development steps for an employee's readiness and current performance."""

    readiness = coerce_enum(Readiness, readiness, "readiness")
    performance = require_rating(performance, "performance")
    if readiness is Readiness.READY_NOW and performance == 3:
        return list(LEADERSHIP_TRACK)
    if readiness is Readiness.ONE_TO_THREE_YEARS:
        return list(MANAGEMENT_TRACK)
    return list(FOUNDATION_TRACK)


__all__ = [
    "FOUNDATION_TRACK",
    "HIGH_RISK_ACTIONS",
    "IMMEDIATE_RETENTION_ACTIONS",
    "LEADERSHIP_TRACK",
    "MANAGEMENT_TRACK",
    "STANDARD_RETENTION_ACTIONS",
    "development_plan",
    "recommend",
]
