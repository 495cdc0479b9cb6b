"""User account and permission management."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from talent_compass.core.config import settings
from talent_compass.core.exceptions import DuplicateRecordError, InvalidRecordError, PermissionDeniedError
from talent_compass.core.permissions import Capability, CapabilityLike, PermissionHolder, default_permissions
from talent_compass.models.enums import UserRole
from talent_compass.models.permissions import UserPermissions
from talent_compass.models.user import User
from talent_compass.services.base import (
    RecordService,
    ensure_permitted,
    reject_fields,
    reject_unknown_fields,
    require_fields,
    validate_record,
)
from talent_compass.utils.audit import audit_log
from talent_compass.utils.monitoring import observe_user_change
from talent_compass.utils.validators import coerce_enum, require_non_empty

logger = logging.getLogger(__name__)

USER_REQUIRED_FIELDS = ("username", "full_name", "email", "department", "role")
USER_ID_PREFIX = "user-"
# Accepted on create only; seeds the Manager section restriction.
SECTION_FIELD = "section"
# Permissions change through set_permission/set_sections only.
PROTECTED_USER_FIELDS = ("id", "permissions", "created_at")


class UserDirectory(RecordService):
    """User administration. Every mutation requires ``manage_users``.

    A role only seeds permissions when the account is created; later role
    changes leave the stored permissions untouched.
    """

    @audit_log
    def create_user(self, payload: Dict[str, Any], *, actor: PermissionHolder) -> User:
        """Provision an account.

        Without explicit ``permissions`` the role template applies. A Manager
        is restricted to ``section`` when given, else to ``department`` when
        that names a known section.
        """

        ensure_permitted(actor, Capability.MANAGE_USERS)
        require_fields(payload, USER_REQUIRED_FIELDS)
        fields = {name: value for name, value in payload.items() if name != SECTION_FIELD}
        reject_unknown_fields(fields, set(User.model_fields) - {"id", "created_at"})
        username = require_non_empty(payload["username"], "username")

        role = coerce_enum(UserRole, payload["role"], "role")
        if "permissions" in payload and payload["permissions"] is not None:
            permissions = validate_record(UserPermissions, payload["permissions"])
        else:
            section = self._template_section(role, payload.get(SECTION_FIELD), payload["department"])
            permissions = default_permissions(role, section)
        self._check_sections(permissions.restricted_to_sections)

        user = validate_record(
            User,
            {
                **fields,
                "id": self.next_user_id(),
                "username": username,
                "role": role,
                "permissions": permissions,
                "created_at": self.clock(),
            },
        )
        self.store.add_user(user)
        observe_user_change("create")
        logger.info("Created user %s (%s)", user.username, user.role.value)
        return user

    @audit_log
    def update_user(self, user_id: str, changes: Dict[str, Any], *, actor: PermissionHolder) -> User:
        ensure_permitted(actor, Capability.MANAGE_USERS)
        current = self.store.get_user(user_id)
        reject_fields(changes, PROTECTED_USER_FIELDS)
        reject_unknown_fields(changes, User.model_fields)

        if "role" in changes and coerce_enum(UserRole, changes["role"], "role") is not current.role:
            ensure_permitted(actor, Capability.ASSIGN_ROLES)
        if "username" in changes:
            username = require_non_empty(changes["username"], "username")
            other = self.store.find_user_by_username(username)
            if other is not None and other.id != user_id:
                raise DuplicateRecordError(
                    error_code="DUPLICATE_USERNAME",
                    message=f"Username '{username}' is already taken",
                )
            changes = {**changes, "username": username}

        updated = validate_record(User, {**current.model_dump(), **changes, "permissions": current.permissions})
        self.store.put_user(updated)
        observe_user_change("update")
        logger.info("Updated user %s fields=%s", user_id, sorted(changes))
        return updated

    @audit_log
    def set_permission(
        self, user_id: str, capability: CapabilityLike, granted: bool, *, actor: PermissionHolder
    ) -> User:
        ensure_permitted(actor, Capability.MANAGE_USERS)
        current = self.store.get_user(user_id)
        permissions = current.permissions.with_capability(capability, granted)
        return self._replace_permissions(current, permissions, "set_permission")

    @audit_log
    def set_sections(self, user_id: str, sections: Iterable[str], *, actor: PermissionHolder) -> User:
        """Restrict a user to ``sections``; an empty iterable lifts the restriction."""

        ensure_permitted(actor, Capability.MANAGE_USERS)
        current = self.store.get_user(user_id)
        resolved = frozenset(getattr(section, "value", section) for section in sections)
        self._check_sections(resolved)
        return self._replace_permissions(current, current.permissions.with_sections(resolved), "set_sections")

    @audit_log
    def delete_user(self, user_id: str, *, actor: PermissionHolder) -> User:
        ensure_permitted(actor, Capability.MANAGE_USERS)
        if getattr(actor, "id", None) == user_id:
            raise PermissionDeniedError(
                error_code="SELF_DELETE",
                message="Users cannot delete their own account",
                details={"user_id": user_id},
            )
        removed = self.store.remove_user(user_id)
        observe_user_change("delete")
        logger.info("Deleted user %s", removed.username)
        return removed

    def search(self, query: str = "") -> List[User]:
        needle = (query or "").strip().lower()
        if not needle:
            return list(self.store.users())
        return [
            user
            for user in self.store.users()
            if any(needle in text.lower() for text in (user.full_name, user.username, user.email))
        ]

    def role_counts(self) -> Dict[str, int]:
        counts = {role.value: 0 for role in UserRole}
        for user in self.store.users():
            counts[user.role.value] += 1
        return counts

    def next_user_id(self) -> str:
        pattern = re.compile(rf"^{re.escape(USER_ID_PREFIX)}(\d+)$")
        numbers = [int(match.group(1)) for user in self.store.users() if (match := pattern.match(user.id))]
        return f"{USER_ID_PREFIX}{max(numbers, default=0) + 1}"

    def _replace_permissions(self, current: User, permissions: UserPermissions, action: str) -> User:
        updated = current.model_copy(update={"permissions": permissions})
        self.store.put_user(updated)
        observe_user_change(action)
        logger.info("Changed permissions of %s via %s", current.username, action)
        return updated

    def _template_section(self, role: UserRole, section: Any, department: str) -> Optional[str]:
        if role is UserRole.HR:
            return None
        if section not in (None, ""):
            resolved = require_non_empty(getattr(section, "value", section), SECTION_FIELD)
            self._check_sections({resolved})
            return resolved
        if department in settings.SECTIONS:
            return department
        raise InvalidRecordError(
            error_code="MISSING_SECTION",
            message=f"Department '{department}' is not a section; give the manager a section explicitly",
            details={"field": SECTION_FIELD, "known": list(settings.SECTIONS)},
        )

    def _check_sections(self, sections: Iterable[str]) -> None:
        unknown = sorted(set(sections) - set(settings.SECTIONS))
        if unknown:
            raise InvalidRecordError(
                error_code="UNKNOWN_SECTION",
                message=f"Unknown sections: {', '.join(unknown)}",
                details={"known": list(settings.SECTIONS)},
            )


__all__ = ["UserDirectory"]
