"""Monitoring utilities leveraging Prometheus client."""

from __future__ import annotations

from prometheus_client import Counter

assessments_recorded_total = Counter(
    "talent_compass_assessments_recorded_total",
    "Total 9-box assessments recorded",
    ["direction"],
)

rating_rejections_total = Counter(
    "talent_compass_rating_rejections_total",
    "Assessment submissions rejected for invalid ratings",
)

employee_changes_total = Counter(
    "talent_compass_employee_changes_total",
    "Employee record changes",
    ["action"],
)

user_changes_total = Counter(
    "talent_compass_user_changes_total",
    "User account and permission changes",
    ["action"],
)


def observe_assessment(direction: str) -> None:
    assessments_recorded_total.labels(direction=direction).inc()


def observe_rating_rejection() -> None:
    rating_rejections_total.inc()


def observe_employee_change(action: str) -> None:
    employee_changes_total.labels(action=action).inc()


def observe_user_change(action: str) -> None:
    user_changes_total.labels(action=action).inc()


__all__ = [
    "assessments_recorded_total",
    "employee_changes_total",
    "observe_assessment",
    "observe_employee_change",
    "observe_rating_rejection",
    "observe_user_change",
    "rating_rejections_total",
    "user_changes_total",
]
