"""Permission accessors.

Permissions are plain data: a set of granted capabilities plus an optional
restriction to organisational sections. This module only answers questions
about that data; callers decide what to do with the answers.
"""

from __future__ import annotations

from typing import Optional, Protocol

from talent_compass.models.enums import UserRole
from talent_compass.models.permissions import (
    Capability,
    CapabilityLike,
    UserPermissions,
    resolve_capability,
)
from talent_compass.utils.validators import coerce_enum


class PermissionHolder(Protocol):
    permissions: UserPermissions


def has_capability(user: PermissionHolder, capability: CapabilityLike) -> bool:
    return resolve_capability(capability) in user.permissions.granted


def is_restricted_to(user: PermissionHolder, section: str) -> bool:
    """True when the user may act on ``section``.

    An empty restriction set means the user is unrestricted.
    """

    sections = user.permissions.restricted_to_sections
    # Sections are stored as plain strings.
    return not sections or getattr(section, "value", section) in sections


def permits(user: PermissionHolder, capability: CapabilityLike, section: Optional[str] = None) -> bool:
    if not has_capability(user, capability):
        return False
    return section is None or is_restricted_to(user, section)


HR_CAPABILITIES = frozenset(Capability)
MANAGER_CAPABILITIES = frozenset({Capability.ASSESS_EMPLOYEES, Capability.ACCESS_ANALYTICS})


def default_permissions(role: UserRole | str, section: Optional[str] = None) -> UserPermissions:
    """Template permissions for a newly provisioned user.

    Managers are restricted to ``section``. Only applied at creation;
    afterwards permissions change independently of role.
    """

    if coerce_enum(UserRole, role, "role") is UserRole.HR:
        return UserPermissions(granted=HR_CAPABILITIES)
    sections = frozenset({section}) if section else frozenset()
    return UserPermissions(granted=MANAGER_CAPABILITIES, restricted_to_sections=sections)


__all__ = [
    "Capability",
    "CapabilityLike",
    "HR_CAPABILITIES",
    "MANAGER_CAPABILITIES",
    "PermissionHolder",
    "UserPermissions",
    "default_permissions",
    "has_capability",
    "is_restricted_to",
    "permits",
    "resolve_capability",
]
