from datetime import datetime, timedelta

import pytest

from talent_compass.core.store import RecordStore
from talent_compass.models.employee import Employee
from talent_compass.utils.audit import AuditLogger


class RecordingAuditLogger(AuditLogger):
    def __init__(self):
        self.events = []

    def record(self, action, actor, details):
        self.events.append((action, actor, details))


class StepClock:
    """Returns a strictly increasing timestamp on every call."""

    def __init__(self, start=datetime(2024, 3, 1, 9, 0, 0)):
        self.current = start

    def __call__(self):
        self.current = self.current + timedelta(minutes=1)
        return self.current


@pytest.fixture
def make_employee():
    counter = {"next": 1}

    def factory(**overrides):
        number = counter["next"]
        counter["next"] += 1
        record = {
            "id": f"T{number:03d}",
            "name": f"Employee {number}",
            "job_title": "Analyst",
            "job_grade": "G3",
            "direction": "Operations",
            "department": "Planning",
            "performance": 2,
            "evolution_potential": 2,
            "risk_of_loss": "Low",
            "impact_of_loss": "Low",
            "readiness": "1-3 Years",
            "next_role": "Senior Analyst",
        }
        record.update(overrides)
        return Employee.model_validate(record)

    return factory


@pytest.fixture
def store():
    return RecordStore.from_sample()


@pytest.fixture
def hr_user(store):
    return store.get_user("user-4")


@pytest.fixture
def manager_user(store):
    # Ahmed Hassan, restricted to Operations
    return store.get_user("user-1")


@pytest.fixture
def audit_recorder():
    return RecordingAuditLogger()


@pytest.fixture
def clock():
    return StepClock()
