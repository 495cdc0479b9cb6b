import pytest

from talent_compass.core.exceptions import UnknownCapabilityError
from talent_compass.core.permissions import (
    Capability,
    UserPermissions,
    default_permissions,
    has_capability,
    is_restricted_to,
    permits,
)
from talent_compass.models.user import User


def make_user(**permission_fields):
    return User(
        id="user-x",
        username="tester",
        full_name="Test User",
        email="test.user@ecpc.com",
        department="Finance",
        role="Manager",
        permissions=UserPermissions(**permission_fields),
    )


def test_has_capability_accepts_members_and_names():
    user = make_user(granted={"assess_employees"})

    assert has_capability(user, Capability.ASSESS_EMPLOYEES)
    assert has_capability(user, "assess_employees")
    assert not has_capability(user, "manage_users")


def test_unknown_capability_raises():
    user = make_user()

    with pytest.raises(UnknownCapabilityError) as excinfo:
        has_capability(user, "can_fly")
    assert excinfo.value.error_code == "UNKNOWN_CAPABILITY"


def test_unknown_capability_rejected_when_building_permissions():
    with pytest.raises(UnknownCapabilityError):
        UserPermissions(granted={"assess_employees", "export_to_pdf"})


def test_empty_restriction_means_unrestricted():
    user = make_user()

    assert is_restricted_to(user, "Finance")
    assert is_restricted_to(user, "IT")


def test_restriction_limits_sections():
    user = make_user(restricted_to_sections={"Finance"})

    assert is_restricted_to(user, "Finance")
    assert not is_restricted_to(user, "Operations")


def test_permits_combines_capability_and_section():
    user = make_user(granted={Capability.ASSESS_EMPLOYEES}, restricted_to_sections={"Finance"})

    assert permits(user, "assess_employees")
    assert permits(user, "assess_employees", "Finance")
    assert not permits(user, "assess_employees", "IT")
    assert not permits(user, "add_employees", "Finance")


def test_as_flags_is_exhaustive():
    flags = UserPermissions(granted={Capability.EXPORT_REPORTS}).as_flags()

    assert list(flags) == list(Capability)
    assert len(flags) == 11
    assert [capability for capability, granted in flags.items() if granted] == [Capability.EXPORT_REPORTS]


def test_with_capability_returns_new_permissions():
    original = UserPermissions(granted={Capability.ASSESS_EMPLOYEES}, restricted_to_sections={"IT"})

    granted = original.with_capability("manage_users", True)
    revoked = granted.with_capability(Capability.ASSESS_EMPLOYEES, False)

    assert Capability.MANAGE_USERS not in original.granted
    assert granted.granted == {Capability.ASSESS_EMPLOYEES, Capability.MANAGE_USERS}
    assert revoked.granted == {Capability.MANAGE_USERS}
    assert revoked.restricted_to_sections == {"IT"}


def test_with_sections_replaces_restriction():
    permissions = UserPermissions(restricted_to_sections={"IT"}).with_sections(["Finance", "HR"])

    assert permissions.restricted_to_sections == {"Finance", "HR"}


def test_role_templates():
    hr = default_permissions("HR", "HR")
    manager = default_permissions("Manager", "Operations")

    assert hr.granted == set(Capability)
    assert hr.restricted_to_sections == frozenset()
    assert manager.granted == {Capability.ASSESS_EMPLOYEES, Capability.ACCESS_ANALYTICS}
    assert manager.restricted_to_sections == {"Operations"}
