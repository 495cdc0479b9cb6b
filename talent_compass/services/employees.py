"""Employee records: intake, edits, assessments and lookups."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, NamedTuple, Optional

from talent_compass.core.config import settings
from talent_compass.core.exceptions import InvalidRatingError
from talent_compass.core.permissions import Capability, PermissionHolder, is_restricted_to
from talent_compass.models.employee import AssessmentRecord, Employee
from talent_compass.models.enums import Direction
from talent_compass.services.base import (
    RecordService,
    ensure_permitted,
    reject_fields,
    reject_unknown_fields,
    require_fields,
    validate_record,
)
from talent_compass.utils.audit import audit_log
from talent_compass.utils.monitoring import (
    observe_assessment,
    observe_employee_change,
    observe_rating_rejection,
)
from talent_compass.utils.validators import coerce_enum

logger = logging.getLogger(__name__)

ALL_DIRECTIONS = "All"

EMPLOYEE_REQUIRED_FIELDS = (
    "name",
    "job_title",
    "job_grade",
    "direction",
    "department",
    "performance",
    "evolution_potential",
    "risk_of_loss",
    "impact_of_loss",
    "readiness",
    "next_role",
)
ASSESSMENT_FIELDS = (
    "performance",
    "evolution_potential",
    "risk_of_loss",
    "impact_of_loss",
    "readiness",
    "next_role",
)
# Changed only through intake or assessment submission.
PROTECTED_EMPLOYEE_FIELDS = ("id", "assessment_history")


class AssessmentEntry(NamedTuple):
    employee_id: str
    employee_name: str
    record: AssessmentRecord


class EmployeeDirectory(RecordService):
    """Employee operations guarded by the acting user's permissions.

    Records are frozen; every change replaces the stored record with a newly
    validated copy. Employees are never deleted.
    """

    @audit_log
    def add_employee(self, payload: Dict[str, Any], *, actor: PermissionHolder) -> Employee:
        ensure_permitted(actor, Capability.ADD_EMPLOYEES)
        require_fields(payload, EMPLOYEE_REQUIRED_FIELDS)
        reject_unknown_fields(payload, set(Employee.model_fields) - set(PROTECTED_EMPLOYEE_FIELDS))

        record = {
            "job_category": settings.DEFAULT_JOB_CATEGORY,
            "last_3_years_performance": settings.DEFAULT_LAST_3_YEARS_PERFORMANCE,
            **payload,
            "id": self.next_employee_id(),
            "assessment_history": (),
        }
        employee = validate_record(Employee, record)
        self.store.add_employee(employee)
        observe_employee_change("create")
        logger.info("Added employee %s (%s)", employee.id, employee.direction.value)
        return employee

    @audit_log
    def update_employee(
        self, employee_id: str, changes: Dict[str, Any], *, actor: PermissionHolder
    ) -> Employee:
        current = self.store.get_employee(employee_id)
        ensure_permitted(actor, Capability.EDIT_EMPLOYEE_DATA, current.direction)
        reject_fields(changes, PROTECTED_EMPLOYEE_FIELDS)
        reject_unknown_fields(changes, Employee.model_fields)
        if "direction" in changes:
            ensure_permitted(actor, Capability.EDIT_EMPLOYEE_DATA, changes["direction"])

        updated = validate_record(
            Employee,
            {
                **current.model_dump(exclude={"assessment_history"}),
                **changes,
                "assessment_history": current.assessment_history,
            }
        )
        self.store.put_employee(updated)
        observe_employee_change("update")
        logger.info("Updated employee %s fields=%s", employee_id, sorted(changes))
        return updated

    @audit_log
    def submit_assessment(self, submission: Dict[str, Any], *, actor: PermissionHolder) -> Employee:
        """Record a 9-box assessment and make it the employee's current rating."""

        require_fields(submission, ("employee_id",))
        current = self.store.get_employee(submission["employee_id"])
        ensure_permitted(actor, Capability.ASSESS_EMPLOYEES, current.direction)

        values = {name: submission.get(name) for name in ASSESSMENT_FIELDS}
        if values["next_role"] in (None, ""):
            values["next_role"] = current.next_role
        try:
            record = validate_record(
                AssessmentRecord,
                {
                    **values,
                    "assessed_at": self.clock(),
                    "assessor_id": str(getattr(actor, "id", "anonymous")),
                    "comments": submission.get("comments") or None,
                }
            )
        except InvalidRatingError:
            observe_rating_rejection()
            raise

        updated = validate_record(
            Employee,
            {
                **current.model_dump(exclude={"assessment_history"}),
                **record.model_dump(include=set(ASSESSMENT_FIELDS)),
                "assessment_history": current.assessment_history + (record,),
            }
        )
        self.store.put_employee(updated)
        observe_assessment(updated.direction.value)
        logger.info("Recorded assessment for %s by %s", updated.id, record.assessor_id)
        return updated

    def recent_assessments(self, limit: Optional[int] = None) -> List[AssessmentEntry]:
        """Latest assessment records across all employees, newest first."""

        limit = settings.RECENT_ASSESSMENTS_LIMIT if limit is None else limit
        entries = [
            AssessmentEntry(employee.id, employee.name, record)
            for employee in self.store.employees()
            for record in employee.assessment_history
        ]
        entries.sort(key=lambda entry: entry.record.assessed_at, reverse=True)
        return entries[: max(limit, 0)]

    def search(self, query: str = "", direction: str = ALL_DIRECTIONS) -> List[Employee]:
        """Case-insensitive match on name, job title or department, optionally within one direction."""

        needle = (query or "").strip().lower()
        wanted: Optional[Direction] = None
        if direction != ALL_DIRECTIONS:
            wanted = coerce_enum(Direction, direction, "direction")

        matches = []
        for employee in self.store.employees():
            if wanted is not None and employee.direction is not wanted:
                continue
            haystacks = (employee.name, employee.job_title, employee.department)
            if needle and not any(needle in text.lower() for text in haystacks):
                continue
            matches.append(employee)
        return matches

    def visible_to(self, user: PermissionHolder) -> List[Employee]:
        return [employee for employee in self.store.employees() if is_restricted_to(user, employee.direction)]

    def next_employee_id(self) -> str:
        prefix = settings.EMPLOYEE_ID_PREFIX
        pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
        numbers = [
            int(match.group(1))
            for employee in self.store.employees()
            if (match := pattern.match(employee.id))
        ]
        return f"{prefix}{max(numbers, default=0) + 1:03d}"


__all__ = ["ALL_DIRECTIONS", "AssessmentEntry", "EmployeeDirectory"]
