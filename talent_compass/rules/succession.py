"""Succession pipeline grouped by readiness."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from talent_compass.models.employee import Employee
from talent_compass.models.enums import Readiness
from talent_compass.rules.recommendations import development_plan


@dataclass
class PipelineEntry:
    employee: Employee
    # Only Ready Now candidates get a step-by-step plan.
    plan: Optional[List[str]] = None


@dataclass
class SuccessionPipeline:
    stages: Dict[Readiness, List[PipelineEntry]] = field(
        default_factory=lambda: {readiness: [] for readiness in Readiness}
    )

    def counts(self) -> Dict[str, int]:
        return {readiness.value: len(entries) for readiness, entries in self.stages.items()}

    @property
    def ready_now(self) -> List[PipelineEntry]:
        return self.stages[Readiness.READY_NOW]


def succession_pipeline(employees: Iterable[Employee]) -> SuccessionPipeline:
    pipeline = SuccessionPipeline()
    for employee in employees:
        plan = None
        if employee.readiness is Readiness.READY_NOW:
            plan = development_plan(employee.readiness, employee.performance)
        pipeline.stages[employee.readiness].append(PipelineEntry(employee=employee, plan=plan))
    return pipeline


__all__ = ["PipelineEntry", "SuccessionPipeline", "succession_pipeline"]
