"""9-box classification.

One table maps every (performance, potential) cell to its category. Coarser
groupings elsewhere in the package are sums over cells of this table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from talent_compass.models.employee import Employee
from talent_compass.utils.validators import VALID_RATINGS, require_rating


class NineBoxCategory(str, Enum):
    FUTURE_LEADERS = "Future Leaders"
    GROWTH_EMPLOYEES = "Growth Employees"
    CORE_EMPLOYEES = "Core Employees"
    EFFECTIVE_PERFORMERS = "Effective Performers"
    HIGH_IMPACT_PERFORMERS = "High Impact Performers"
    SPECIALISTS = "Specialists"
    ENIGMA = "Enigma"
    DILEMMA = "Dilemma"
    UNDERPERFORMERS = "Underperformers"


Cell = Tuple[int, int]

# (performance, potential) -> category
CATEGORY_GRID: Dict[Cell, NineBoxCategory] = {
    (1, 1): NineBoxCategory.UNDERPERFORMERS,
    (1, 2): NineBoxCategory.DILEMMA,
    (1, 3): NineBoxCategory.ENIGMA,
    (2, 1): NineBoxCategory.SPECIALISTS,
    (2, 2): NineBoxCategory.EFFECTIVE_PERFORMERS,
    (2, 3): NineBoxCategory.GROWTH_EMPLOYEES,
    (3, 1): NineBoxCategory.HIGH_IMPACT_PERFORMERS,
    (3, 2): NineBoxCategory.CORE_EMPLOYEES,
    (3, 3): NineBoxCategory.FUTURE_LEADERS,
}

CATEGORY_DESCRIPTIONS: Dict[NineBoxCategory, str] = {
    NineBoxCategory.FUTURE_LEADERS: "High performance, high potential - ready for advancement",
    NineBoxCategory.GROWTH_EMPLOYEES: "Medium performance, high potential - invest in development",
    NineBoxCategory.CORE_EMPLOYEES: "High performance, medium potential - backbone of organization",
    NineBoxCategory.EFFECTIVE_PERFORMERS: "Medium performance, medium potential - solid contributors",
    NineBoxCategory.HIGH_IMPACT_PERFORMERS: "High performance, limited potential - retain expertise in role",
    NineBoxCategory.SPECIALISTS: "Medium performance, limited potential - deepen role mastery",
    NineBoxCategory.ENIGMA: "Low performance, high potential - coaching needed",
    NineBoxCategory.DILEMMA: "Low performance, medium potential - clarify fit and expectations",
    NineBoxCategory.UNDERPERFORMERS: "Low performance, low potential - performance improvement required",
}


def classify(performance: int, potential: int) -> NineBoxCategory:
    """Return the 9-box category for a performance/potential pair.

    Both ratings must be 1, 2 or 3; anything else raises ``InvalidRatingError``.
    """

    cell = (require_rating(performance, "performance"), require_rating(potential, "potential"))
    return CATEGORY_GRID[cell]


def classify_employee(employee: Employee) -> NineBoxCategory:
    return classify(employee.performance, employee.evolution_potential)


def cells_for(categories: Iterable[NineBoxCategory]) -> List[Cell]:
    wanted = set(categories)
    return [cell for cell, category in CATEGORY_GRID.items() if category in wanted]


@dataclass
class GridCell:
    """One box of the rendered 3x3 grid."""

    performance: int
    potential: int
    category: NineBoxCategory
    count: int = 0
    preview_names: List[str] = field(default_factory=list)
    overflow: int = 0

    @property
    def description(self) -> str:
        return CATEGORY_DESCRIPTIONS[self.category]


def build_grid(employees: Sequence[Employee], preview: int = 2) -> List[GridCell]:
    """Lay employees out in grid order: potential rows high to low, performance columns low to high."""

    members: Dict[Cell, List[str]] = {cell: [] for cell in CATEGORY_GRID}
    for employee in employees:
        members[(int(employee.performance), int(employee.evolution_potential))].append(employee.name)

    grid: List[GridCell] = []
    for potential in reversed(VALID_RATINGS):
        for performance in VALID_RATINGS:
            names = members[(performance, potential)]
            shown = names[: max(preview, 0)]
            grid.append(
                GridCell(
                    performance=performance,
                    potential=potential,
                    category=CATEGORY_GRID[(performance, potential)],
                    count=len(names),
                    preview_names=shown,
                    overflow=len(names) - len(shown),
                )
            )
    return grid


__all__ = [
    "CATEGORY_DESCRIPTIONS",
    "CATEGORY_GRID",
    "GridCell",
    "NineBoxCategory",
    "build_grid",
    "cells_for",
    "classify",
    "classify_employee",
]
