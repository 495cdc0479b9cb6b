import pytest

from talent_compass.core.exceptions import (
    DuplicateRecordError,
    InvalidRecordError,
    PermissionDeniedError,
    RecordNotFoundError,
    UnknownCapabilityError,
)
from talent_compass.core.permissions import Capability, has_capability, is_restricted_to
from talent_compass.models.enums import UserRole
from talent_compass.services.users import UserDirectory


@pytest.fixture
def directory(store, audit_recorder, clock):
    return UserDirectory(store, audit_logger=audit_recorder, clock=clock)


def manager_payload(**overrides):
    payload = {
        "username": "manager4",
        "full_name": "Heba Mansour",
        "email": "heba.mansour@ecpc.com",
        "department": "IT",
        "role": "Manager",
    }
    payload.update(overrides)
    return payload


def test_create_user_applies_role_template(directory, store, hr_user):
    user = directory.create_user(manager_payload(), actor=hr_user)

    assert user.id == "user-6"
    assert user.role is UserRole.MANAGER
    assert user.permissions.granted == {Capability.ASSESS_EMPLOYEES, Capability.ACCESS_ANALYTICS}
    assert user.permissions.restricted_to_sections == {"IT"}
    assert store.get_user("user-6") == user


def test_create_user_keeps_explicit_permissions(directory, hr_user):
    user = directory.create_user(
        manager_payload(permissions={"granted": ["export_reports"], "restricted_to_sections": []}),
        actor=hr_user,
    )

    assert user.permissions.granted == {Capability.EXPORT_REPORTS}
    assert is_restricted_to(user, "Finance")


def test_create_user_requires_manage_users(directory, manager_user):
    with pytest.raises(PermissionDeniedError):
        directory.create_user(manager_payload(), actor=manager_user)


def test_create_user_rejects_duplicate_username(directory, hr_user):
    with pytest.raises(DuplicateRecordError):
        directory.create_user(manager_payload(username="Manager1"), actor=hr_user)


def test_create_user_does_not_accept_passwords(directory, hr_user):
    with pytest.raises(InvalidRecordError) as excinfo:
        directory.create_user(manager_payload(password="pass123"), actor=hr_user)
    assert excinfo.value.error_code == "UNKNOWN_FIELD"


def test_role_change_keeps_permissions(directory, hr_user):
    updated = directory.update_user("user-1", {"role": "HR"}, actor=hr_user)

    assert updated.role is UserRole.HR
    assert not has_capability(updated, "manage_users")
    assert updated.permissions.restricted_to_sections == {"Operations"}


def test_role_change_requires_assign_roles(directory, store, hr_user):
    limited = directory.set_permission("user-5", "assign_roles", False, actor=hr_user)

    with pytest.raises(PermissionDeniedError):
        directory.update_user("user-2", {"role": "HR"}, actor=limited)
    assert directory.update_user("user-2", {"full_name": "Sara M. Mohamed"}, actor=limited).full_name == "Sara M. Mohamed"
    assert store.get_user("user-2").role is UserRole.MANAGER


def test_update_user_cannot_touch_permissions(directory, hr_user):
    with pytest.raises(InvalidRecordError):
        directory.update_user("user-1", {"permissions": {"granted": ["manage_users"]}}, actor=hr_user)


def test_set_permission_grants_and_revokes(directory, store, hr_user):
    granted = directory.set_permission("user-2", Capability.EXPORT_REPORTS, True, actor=hr_user)
    assert has_capability(granted, "export_reports")

    revoked = directory.set_permission("user-2", "export_reports", False, actor=hr_user)
    assert not has_capability(revoked, Capability.EXPORT_REPORTS)
    assert store.get_user("user-2") is revoked


def test_set_permission_rejects_unknown_capability(directory, hr_user):
    with pytest.raises(UnknownCapabilityError):
        directory.set_permission("user-2", "delete_everything", True, actor=hr_user)


def test_set_sections_validates_and_lifts_restrictions(directory, hr_user):
    widened = directory.set_sections("user-3", ["Sales & Marketing", "IT"], actor=hr_user)
    assert widened.permissions.restricted_to_sections == {"Sales & Marketing", "IT"}

    lifted = directory.set_sections("user-3", [], actor=hr_user)
    assert is_restricted_to(lifted, "Finance")

    with pytest.raises(InvalidRecordError):
        directory.set_sections("user-3", ["Legal"], actor=hr_user)


def test_delete_user(directory, store, hr_user):
    removed = directory.delete_user("user-3", actor=hr_user)

    assert removed.username == "manager3"
    with pytest.raises(RecordNotFoundError):
        store.get_user("user-3")


def test_cannot_delete_self(directory, store, hr_user):
    with pytest.raises(PermissionDeniedError) as excinfo:
        directory.delete_user("user-4", actor=hr_user)
    assert excinfo.value.error_code == "SELF_DELETE"
    assert store.get_user("user-4") == hr_user


def test_search_and_role_counts(directory):
    assert [user.username for user in directory.search("ALI")] == ["manager3"]
    assert [user.username for user in directory.search("hr")] == ["hr1", "hr2"]
    assert len(directory.search()) == 5
    assert directory.role_counts() == {"Manager": 3, "HR": 2}


def test_failed_mutation_is_audited(directory, audit_recorder, manager_user):
    with pytest.raises(PermissionDeniedError):
        directory.delete_user(user_id="user-5", actor=manager_user)

    assert [event[0] for event in audit_recorder.events] == ["start", "error"]
    assert "PERMISSION_DENIED" in audit_recorder.events[1][2]["error"]


def test_manager_with_free_text_department_takes_explicit_section(directory, hr_user):
    user = directory.create_user(
        manager_payload(department="Plant Operations", section="Operations"),
        actor=hr_user,
    )

    assert user.department == "Plant Operations"
    assert user.permissions.restricted_to_sections == {"Operations"}
    assert not is_restricted_to(user, "Finance")


def test_manager_without_known_section_is_rejected(directory, store, hr_user):
    with pytest.raises(InvalidRecordError) as excinfo:
        directory.create_user(manager_payload(department="Plant Operations"), actor=hr_user)

    assert excinfo.value.error_code == "MISSING_SECTION"
    assert len(store.users()) == 5


def test_manager_section_must_be_known(directory, hr_user):
    with pytest.raises(InvalidRecordError) as excinfo:
        directory.create_user(manager_payload(department="Plant Operations", section="Legal"), actor=hr_user)

    assert excinfo.value.error_code == "UNKNOWN_SECTION"


def test_hr_user_needs_no_section(directory, hr_user):
    user = directory.create_user(
        manager_payload(username="hr3", role="HR", department="Talent Acquisition"),
        actor=hr_user,
    )

    assert user.permissions.restricted_to_sections == frozenset()
    assert has_capability(user, "manage_users")


def test_update_user_reports_invalid_email_as_record_error(directory, store, hr_user):
    original = store.get_user("user-1")

    with pytest.raises(InvalidRecordError) as excinfo:
        directory.update_user("user-1", {"email": "not-an-email"}, actor=hr_user)

    assert excinfo.value.error_code == "INVALID_FIELD"
    assert excinfo.value.details["fields"] == ["email"]
    assert store.get_user("user-1") is original


def test_create_user_reports_invalid_email_as_record_error(directory, hr_user):
    with pytest.raises(InvalidRecordError) as excinfo:
        directory.create_user(manager_payload(email="heba"), actor=hr_user)
    assert excinfo.value.error_code == "INVALID_FIELD"


def test_update_user_rejects_blank_username(directory, store, hr_user):
    with pytest.raises(InvalidRecordError) as excinfo:
        directory.update_user("user-2", {"username": "   "}, actor=hr_user)

    assert excinfo.value.error_code == "EMPTY_FIELD"
    assert store.get_user("user-2").username == "manager2"


def test_update_user_strips_username(directory, hr_user):
    assert directory.update_user("user-2", {"username": " sara.m "}, actor=hr_user).username == "sara.m"


def test_positional_user_id_reaches_audit_record(directory, audit_recorder, hr_user):
    directory.set_permission("user-2", "export_reports", True, actor=hr_user)

    assert audit_recorder.events[0][2]["user_id"] == "user-2"
    assert audit_recorder.events[0][1] == "user-4"
