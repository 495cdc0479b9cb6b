"""KPI and chart aggregation over an employee snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Callable, Dict, Iterable, List, NamedTuple, Tuple, Type

from talent_compass.models.employee import Employee
from talent_compass.models.enums import Direction, JobGrade, Readiness, RiskLevel
from talent_compass.ninebox.classifier import CATEGORY_GRID, NineBoxCategory, cells_for

DISTRIBUTION_FIELDS: Dict[str, Type[Enum]] = {
    "risk_of_loss": RiskLevel,
    "impact_of_loss": RiskLevel,
    "direction": Direction,
    "readiness": Readiness,
    "job_grade": JobGrade,
}

# Categories shown individually on the dashboard bar chart; the rest fold into "Others".
DASHBOARD_CATEGORIES = (
    NineBoxCategory.FUTURE_LEADERS,
    NineBoxCategory.GROWTH_EMPLOYEES,
    NineBoxCategory.CORE_EMPLOYEES,
    NineBoxCategory.EFFECTIVE_PERFORMERS,
)
OTHERS_LABEL = "Others"


class NamedView(str, Enum):
    TOP_TALENT = "Top Talent"
    DEVELOPMENT_NEEDED = "Development Needed"
    AT_RISK = "At Risk"


NAMED_VIEW_CATEGORIES: Dict[NamedView, Tuple[NineBoxCategory, ...]] = {
    NamedView.TOP_TALENT: (NineBoxCategory.FUTURE_LEADERS,),
    NamedView.DEVELOPMENT_NEEDED: (
        NineBoxCategory.UNDERPERFORMERS,
        NineBoxCategory.DILEMMA,
        NineBoxCategory.SPECIALISTS,
        NineBoxCategory.EFFECTIVE_PERFORMERS,
    ),
    NamedView.AT_RISK: (
        NineBoxCategory.UNDERPERFORMERS,
        NineBoxCategory.DILEMMA,
        NineBoxCategory.ENIGMA,
    ),
}


class RiskImpactPoint(NamedTuple):
    name: str
    risk: int
    impact: int


@dataclass(frozen=True)
class ViewShare:
    count: int
    percent: int


def round_half_up(value: float, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class TalentAggregator:
    """Derive dashboard metrics from an immutable snapshot of employees.

    The snapshot is taken at construction, so later changes to the caller's
    collection do not leak into results. Every method is total on an empty
    snapshot.
    """

    def __init__(self, employees: Iterable[Employee]) -> None:
        self.employees: Tuple[Employee, ...] = tuple(employees)

    @property
    def total_count(self) -> int:
        return len(self.employees)

    @property
    def critical_role_count(self) -> int:
        return sum(
            1
            for employee in self.employees
            if employee.impact_of_loss is RiskLevel.HIGH and employee.risk_of_loss is RiskLevel.HIGH
        )

    def average_performance(self) -> float:
        return self._mean(lambda employee: int(employee.performance))

    def average_readiness_score(self) -> float:
        return self._mean(lambda employee: employee.readiness.score)

    def distribution_by(self, field: str) -> Dict[str, int]:
        """Count employees per value of an enum-valued field, including empty buckets."""

        enum_cls = DISTRIBUTION_FIELDS.get(field)
        if enum_cls is None:
            raise ValueError(f"Unsupported distribution field '{field}'; expected one of {sorted(DISTRIBUTION_FIELDS)}")
        counts = {member.value: 0 for member in enum_cls}
        for employee in self.employees:
            counts[getattr(employee, field).value] += 1
        return counts

    def cross_tab(self, row_field: str = "direction", column_field: str = "readiness") -> Dict[str, Dict[str, int]]:
        for name in (row_field, column_field):
            if name not in DISTRIBUTION_FIELDS:
                raise ValueError(f"Unsupported cross-tab field '{name}'; expected one of {sorted(DISTRIBUTION_FIELDS)}")
        columns = [member.value for member in DISTRIBUTION_FIELDS[column_field]]
        matrix = {
            member.value: {column: 0 for column in columns} for member in DISTRIBUTION_FIELDS[row_field]
        }
        for employee in self.employees:
            matrix[getattr(employee, row_field).value][getattr(employee, column_field).value] += 1
        return matrix

    def risk_impact_pairs(self) -> List[RiskImpactPoint]:
        return [
            RiskImpactPoint(employee.name, employee.risk_of_loss.ordinal, employee.impact_of_loss.ordinal)
            for employee in self.employees
        ]

    def top_by_performance(self, n: int) -> List[Employee]:
        """Best performers first; ties on (performance, potential) keep snapshot order.

        ``sorted`` is guaranteed stable, including with ``reverse=True``.
        """

        ranked = sorted(
            self.employees,
            key=lambda employee: (int(employee.performance), int(employee.evolution_potential)),
            reverse=True,
        )
        return ranked[: max(n, 0)]

    def category_distribution(self) -> Dict[str, int]:
        counts = {category.value: 0 for category in NineBoxCategory}
        for employee in self.employees:
            cell = (int(employee.performance), int(employee.evolution_potential))
            counts[CATEGORY_GRID[cell].value] += 1
        return counts

    def view_counts(self) -> Dict[str, int]:
        """Dashboard buckets: four named categories plus everything else as "Others"."""

        distribution = self.category_distribution()
        counts = {category.value: distribution[category.value] for category in DASHBOARD_CATEGORIES}
        counts[OTHERS_LABEL] = sum(
            count for label, count in distribution.items() if NineBoxCategory(label) not in DASHBOARD_CATEGORIES
        )
        return counts

    def named_view(self, view: NamedView | str) -> ViewShare:
        cells = set(cells_for(NAMED_VIEW_CATEGORIES[NamedView(view)]))
        count = sum(
            1
            for employee in self.employees
            if (int(employee.performance), int(employee.evolution_potential)) in cells
        )
        return ViewShare(count=count, percent=self._percent(count))

    def readiness_shares(self) -> Dict[str, ViewShare]:
        return {
            readiness: ViewShare(count=count, percent=self._percent(count))
            for readiness, count in self.distribution_by("readiness").items()
        }

    def _mean(self, scalar: Callable[[Employee], int]) -> float:
        if not self.employees:
            return 0
        total = sum(scalar(employee) for employee in self.employees)
        return round_half_up(total / len(self.employees), 1)

    def _percent(self, count: int) -> int:
        if not self.employees:
            return 0
        return int(round_half_up(count * 100 / len(self.employees), 0))


__all__ = [
    "DASHBOARD_CATEGORIES",
    "DISTRIBUTION_FIELDS",
    "NAMED_VIEW_CATEGORIES",
    "NamedView",
    "OTHERS_LABEL",
    "RiskImpactPoint",
    "TalentAggregator",
    "ViewShare",
    "round_half_up",
]
