"""In-memory record store for employees and users."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from talent_compass.core.exceptions import DuplicateRecordError, InvalidRecordError, RecordNotFoundError
from talent_compass.models.employee import Employee
from talent_compass.models.user import User

logger = logging.getLogger(__name__)


class RecordStore:
    """Holds employee and user records in insertion order.

    Readers get tuple snapshots, so a write made after a snapshot was taken
    never shows up in it.
    """

    def __init__(
        self,
        employees: Optional[Iterable[Employee]] = None,
        users: Optional[Iterable[User]] = None,
    ) -> None:
        self._employees: Dict[str, Employee] = {}
        self._users: Dict[str, User] = {}
        for employee in employees or ():
            self.add_employee(employee)
        for user in users or ():
            self.add_user(user)

    @classmethod
    def from_sample(cls) -> "RecordStore":
        from talent_compass.data.sample import sample_employees, sample_users

        return cls(employees=sample_employees(), users=sample_users())

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "RecordStore":
        if not isinstance(payload, dict):
            raise InvalidRecordError(
                error_code="INVALID_SNAPSHOT",
                message="Snapshot must be a JSON object with 'employees' and 'users' arrays",
            )
        employees = [Employee.model_validate(item) for item in payload.get("employees", [])]
        users = [User.model_validate(item) for item in payload.get("users", [])]
        return cls(employees=employees, users=users)

    @classmethod
    def from_snapshot_file(cls, path: Path | str) -> "RecordStore":
        snapshot_path = Path(path)
        logger.info("Loading record snapshot from %s", snapshot_path)
        with snapshot_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        store = cls.from_payload(payload)
        logger.info(
            "Loaded %d employees and %d users", len(store._employees), len(store._users)
        )
        return store

    def snapshot_payload(self) -> Dict[str, Any]:
        return {
            "employees": [employee.model_dump(mode="json") for employee in self._employees.values()],
            "users": [user.model_dump(mode="json") for user in self._users.values()],
        }

    def write_snapshot_file(self, path: Path | str) -> Path:
        snapshot_path = Path(path)
        snapshot_path.parent.mkdir(parents=True, exist_ok=True)
        with snapshot_path.open("w", encoding="utf-8") as handle:
            json.dump(self.snapshot_payload(), handle, indent=2)
        return snapshot_path

    # Employees

    def employees(self) -> Tuple[Employee, ...]:
        return tuple(self._employees.values())

    def get_employee(self, employee_id: str) -> Employee:
        try:
            return self._employees[employee_id]
        except KeyError as exc:
            raise RecordNotFoundError(
                error_code="EMPLOYEE_NOT_FOUND",
                message=f"Employee '{employee_id}' does not exist",
            ) from exc

    def add_employee(self, employee: Employee) -> Employee:
        if employee.id in self._employees:
            raise DuplicateRecordError(
                error_code="DUPLICATE_EMPLOYEE",
                message=f"Employee '{employee.id}' already exists",
            )
        self._employees[employee.id] = employee
        return employee

    def put_employee(self, employee: Employee) -> Employee:
        """Insert or replace, keeping the original position of a replaced record."""

        self._employees[employee.id] = employee
        return employee

    # Users

    def users(self) -> Tuple[User, ...]:
        return tuple(self._users.values())

    def get_user(self, user_id: str) -> User:
        try:
            return self._users[user_id]
        except KeyError as exc:
            raise RecordNotFoundError(
                error_code="USER_NOT_FOUND",
                message=f"User '{user_id}' does not exist",
            ) from exc

    def find_user_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        for user in self._users.values():
            if user.username.lower() == wanted:
                return user
        return None

    def add_user(self, user: User) -> User:
        if user.id in self._users:
            raise DuplicateRecordError(
                error_code="DUPLICATE_USER",
                message=f"User '{user.id}' already exists",
            )
        if self.find_user_by_username(user.username) is not None:
            raise DuplicateRecordError(
                error_code="DUPLICATE_USERNAME",
                message=f"Username '{user.username}' is already taken",
            )
        self._users[user.id] = user
        return user

    def put_user(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def remove_user(self, user_id: str) -> User:
        user = self.get_user(user_id)
        del self._users[user_id]
        return user


__all__ = ["RecordStore"]
