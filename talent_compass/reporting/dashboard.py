"""Dashboard summary assembled from the aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from talent_compass.models.employee import Employee
from talent_compass.ninebox.aggregator import NamedView, RiskImpactPoint, TalentAggregator, ViewShare
from talent_compass.ninebox.classifier import classify_employee


@dataclass
class DashboardSummary:
    total_employees: int
    critical_roles: int
    average_performance: float
    average_readiness_score: float
    retention_risk: Dict[str, int]
    readiness_by_direction: Dict[str, Dict[str, int]]
    risk_impact: List[RiskImpactPoint]
    category_counts: Dict[str, int]
    named_views: Dict[str, ViewShare]
    readiness_shares: Dict[str, ViewShare]
    top_performers: List[Employee] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_employees": self.total_employees,
            "critical_roles": self.critical_roles,
            "average_performance": self.average_performance,
            "average_readiness_score": self.average_readiness_score,
            "retention_risk": dict(self.retention_risk),
            "readiness_by_direction": {row: dict(columns) for row, columns in self.readiness_by_direction.items()},
            "risk_impact": [point._asdict() for point in self.risk_impact],
            "category_counts": dict(self.category_counts),
            "named_views": {name: _share(value) for name, value in self.named_views.items()},
            "readiness_shares": {name: _share(value) for name, value in self.readiness_shares.items()},
            "top_performers": [
                {
                    "id": employee.id,
                    "name": employee.name,
                    "job_title": employee.job_title,
                    "performance": int(employee.performance),
                    "evolution_potential": int(employee.evolution_potential),
                    "category": classify_employee(employee).value,
                }
                for employee in self.top_performers
            ],
        }


def _share(value: ViewShare) -> Dict[str, int]:
    return {"count": value.count, "percent": value.percent}


def build_dashboard(employees: Iterable[Employee], top_n: int = 5) -> DashboardSummary:
    aggregator = TalentAggregator(employees)
    return DashboardSummary(
        total_employees=aggregator.total_count,
        critical_roles=aggregator.critical_role_count,
        average_performance=aggregator.average_performance(),
        average_readiness_score=aggregator.average_readiness_score(),
        retention_risk=aggregator.distribution_by("risk_of_loss"),
        readiness_by_direction=aggregator.cross_tab("direction", "readiness"),
        risk_impact=aggregator.risk_impact_pairs(),
        category_counts=aggregator.view_counts(),
        named_views={view.value: aggregator.named_view(view) for view in NamedView},
        readiness_shares=aggregator.readiness_shares(),
        top_performers=aggregator.top_by_performance(top_n),
    )


__all__ = ["DashboardSummary", "build_dashboard"]
