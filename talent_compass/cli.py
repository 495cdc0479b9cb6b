"""Command line entry for Talent Compass."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from talent_compass.core.config import settings
from talent_compass.core.exceptions import TalentCompassError
from talent_compass.core.store import RecordStore
from talent_compass.models.employee import Employee
from talent_compass.models.enums import PerformanceRating, PotentialRating
from talent_compass.ninebox.classifier import build_grid, classify_employee
from talent_compass.reporting.csv_export import export_filename, write_employees_csv
from talent_compass.reporting.dashboard import build_dashboard
from talent_compass.rules.retention import retention_spotlight, retention_summary, retention_watchlist
from talent_compass.rules.succession import succession_pipeline
from talent_compass.services.employees import ALL_DIRECTIONS, EmployeeDirectory

logger = logging.getLogger("talent_compass.cli")


def load_store(snapshot: Optional[Path]) -> RecordStore:
    path = snapshot or settings.SNAPSHOT_PATH
    if path is None:
        logger.debug("No snapshot configured; using bundled sample records")
        return RecordStore.from_sample()
    return RecordStore.from_snapshot_file(path)


def _employee_brief(employee: Employee) -> Dict[str, Any]:
    return {
        "id": employee.id,
        "name": employee.name,
        "job_title": employee.job_title,
        "direction": employee.direction.value,
        "department": employee.department,
        "performance": int(employee.performance),
        "evolution_potential": int(employee.evolution_potential),
        "category": classify_employee(employee).value,
        "risk_of_loss": employee.risk_of_loss.value,
        "impact_of_loss": employee.impact_of_loss.value,
        "readiness": employee.readiness.value,
        "next_role": employee.next_role,
    }


def cmd_dashboard(store: RecordStore, args: argparse.Namespace) -> Any:
    return build_dashboard(store.employees(), top_n=args.top).as_dict()


def cmd_grid(store: RecordStore, args: argparse.Namespace) -> Any:
    return [
        {
            "performance": cell.performance,
            "potential": cell.potential,
            "performance_label": PerformanceRating(cell.performance).label,
            "potential_label": PotentialRating(cell.potential).label,
            "category": cell.category.value,
            "description": cell.description,
            "count": cell.count,
            "preview": cell.preview_names,
            "more": cell.overflow,
        }
        for cell in build_grid(store.employees(), preview=args.preview)
    ]


def cmd_retention(store: RecordStore, args: argparse.Namespace) -> Any:
    employees = store.employees()
    return {
        "summary": retention_summary(employees),
        "watchlist": [_employee_brief(employee) for employee in retention_watchlist(employees)],
        "spotlight": [
            {"employee": _employee_brief(case.employee), "actions": case.actions}
            for case in retention_spotlight(employees, limit=args.limit)
        ],
    }


def cmd_next_steps(store: RecordStore, args: argparse.Namespace) -> Any:
    pipeline = succession_pipeline(store.employees())
    return {
        "counts": pipeline.counts(),
        "stages": {
            readiness.value: [
                {"employee": _employee_brief(entry.employee), "plan": entry.plan} for entry in entries
            ]
            for readiness, entries in pipeline.stages.items()
        },
    }


def cmd_employees(store: RecordStore, args: argparse.Namespace) -> Any:
    directory = EmployeeDirectory(store)
    return [_employee_brief(employee) for employee in directory.search(args.query, args.direction)]


def cmd_export_csv(store: RecordStore, args: argparse.Namespace) -> Any:
    output = args.output or settings.EXPORT_DIR / export_filename(date.today())
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8", newline="") as handle:
        rows = write_employees_csv(store.employees(), handle)
    logger.info("Exported %d employees to %s", rows, output)
    return {"path": str(output), "rows": rows}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="talent-compass", description=settings.APP_TITLE)
    parser.add_argument("--snapshot", type=Path, default=None, help="JSON snapshot with employees and users")
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    dashboard = subparsers.add_parser("dashboard", help="KPI and chart data")
    dashboard.add_argument("--top", type=int, default=settings.TOP_PERFORMERS_LIMIT)
    dashboard.set_defaults(handler=cmd_dashboard)

    grid = subparsers.add_parser("grid", help="9-box grid with member previews")
    grid.add_argument("--preview", type=int, default=settings.GRID_PREVIEW_NAMES)
    grid.set_defaults(handler=cmd_grid)

    retention = subparsers.add_parser("retention", help="Retention watchlist and actions")
    retention.add_argument("--limit", type=int, default=settings.RETENTION_SPOTLIGHT_LIMIT)
    retention.set_defaults(handler=cmd_retention)

    next_steps = subparsers.add_parser("next-steps", help="Succession pipeline by readiness")
    next_steps.set_defaults(handler=cmd_next_steps)

    employees = subparsers.add_parser("employees", help="Search employees")
    employees.add_argument("--query", default="")
    employees.add_argument("--direction", default=ALL_DIRECTIONS)
    employees.set_defaults(handler=cmd_employees)

    export_csv = subparsers.add_parser("export-csv", help="Write employees to a CSV file")
    export_csv.add_argument("--output", type=Path, default=None)
    export_csv.set_defaults(handler=cmd_export_csv)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)
    try:
        store = load_store(args.snapshot)
        result = args.handler(store, args)
    except (TalentCompassError, OSError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
