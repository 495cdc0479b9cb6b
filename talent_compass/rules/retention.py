"""Retention watchlist built on the recommendation table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from talent_compass.models.employee import Employee
from talent_compass.models.enums import RiskLevel
from talent_compass.rules.recommendations import recommend

WATCHED_RISK_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.MEDIUM})


@dataclass
class RetentionCase:
    employee: Employee
    actions: List[str] = field(default_factory=list)


def retention_watchlist(employees: Iterable[Employee]) -> List[Employee]:
    """Medium and high risk employees, highest risk first, input order kept within a level."""

    watched = [employee for employee in employees if employee.risk_of_loss in WATCHED_RISK_LEVELS]
    return sorted(watched, key=lambda employee: employee.risk_of_loss.ordinal, reverse=True)


def retention_summary(employees: Iterable[Employee]) -> Dict[str, int]:
    counts = {level.value: 0 for level in (RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.LOW)}
    for employee in employees:
        counts[employee.risk_of_loss.value] += 1
    return counts


def retention_spotlight(employees: Iterable[Employee], limit: int = 4) -> List[RetentionCase]:
    return [
        RetentionCase(employee=employee, actions=recommend(employee.risk_of_loss, employee.impact_of_loss))
        for employee in retention_watchlist(employees)[: max(limit, 0)]
    ]


__all__ = ["RetentionCase", "retention_spotlight", "retention_summary", "retention_watchlist"]
