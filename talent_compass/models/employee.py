"""Employee and assessment record models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from talent_compass.models.enums import (
    Direction,
    JobGrade,
    PerformanceRating,
    PotentialRating,
    Readiness,
    RiskLevel,
)
from talent_compass.utils.validators import coerce_enum, require_rating


class _RatedRecord(BaseModel):
    """Shared validation for records carrying 9-box ratings and risk fields."""

    model_config = ConfigDict(frozen=True)

    performance: PerformanceRating
    evolution_potential: PotentialRating
    risk_of_loss: RiskLevel
    impact_of_loss: RiskLevel
    readiness: Readiness
    next_role: str

    @field_validator("performance", mode="before")
    def _check_performance(cls, value: Any) -> PerformanceRating:
        return PerformanceRating(require_rating(value, "performance"))

    @field_validator("evolution_potential", mode="before")
    def _check_potential(cls, value: Any) -> PotentialRating:
        return PotentialRating(require_rating(value, "evolution_potential"))

    @field_validator("risk_of_loss", "impact_of_loss", mode="before")
    def _check_risk(cls, value: Any, info: ValidationInfo) -> RiskLevel:
        return coerce_enum(RiskLevel, value, info.field_name)

    @field_validator("readiness", mode="before")
    def _check_readiness(cls, value: Any) -> Readiness:
        return coerce_enum(Readiness, value, "readiness")


class AssessmentRecord(_RatedRecord):
    """One submitted 9-box assessment, kept in an employee's history."""

    assessed_at: datetime
    assessor_id: str
    comments: Optional[str] = None


class Employee(_RatedRecord):
    id: str
    name: str
    job_title: str
    job_grade: JobGrade
    direction: Direction
    department: str
    job_category: str = "Management"
    last_3_years_performance: float = 0
    assessment_history: Tuple[AssessmentRecord, ...] = Field(default_factory=tuple)

    @field_validator("job_grade", mode="before")
    def _check_grade(cls, value: Any) -> JobGrade:
        return coerce_enum(JobGrade, value, "job_grade")

    @field_validator("direction", mode="before")
    def _check_direction(cls, value: Any) -> Direction:
        return coerce_enum(Direction, value, "direction")

    @property
    def latest_assessment(self) -> Optional[AssessmentRecord]:
        return self.assessment_history[-1] if self.assessment_history else None


__all__ = ["AssessmentRecord", "Employee"]
