"""CSV export of employee records."""

from __future__ import annotations

import csv
from datetime import date
from typing import IO, Iterable, List

from talent_compass.models.employee import Employee

CSV_HEADER = [
    "ID",
    "Name",
    "Job Title",
    "Grade",
    "Direction",
    "Department",
    "Performance",
    "Potential",
    "Risk",
    "Readiness",
    "Next Role",
]


def employee_row(employee: Employee) -> List[str]:
    return [
        employee.id,
        employee.name,
        employee.job_title,
        employee.job_grade.value,
        employee.direction.value,
        employee.department,
        str(int(employee.performance)),
        str(int(employee.evolution_potential)),
        employee.risk_of_loss.value,
        employee.readiness.value,
        employee.next_role,
    ]


def write_employees_csv(employees: Iterable[Employee], stream: IO[str]) -> int:
    """Write the header and one row per employee; return the number of rows written.

    Fields containing commas, quotes or newlines are quoted.
    """

    writer = csv.writer(stream, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    count = 0
    for employee in employees:
        writer.writerow(employee_row(employee))
        count += 1
    return count


def export_filename(today: date) -> str:
    return f"employees_{today.strftime('%Y-%m-%d')}.csv"


__all__ = ["CSV_HEADER", "employee_row", "export_filename", "write_employees_csv"]
