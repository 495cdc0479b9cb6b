"""Capability set stored on each user record."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from talent_compass.core.exceptions import UnknownCapabilityError


class Capability(str, Enum):
    ASSESS_EMPLOYEES = "assess_employees"
    VIEW_ALL_ASSESSMENTS = "view_all_assessments"
    EDIT_ALL_ASSESSMENTS = "edit_all_assessments"
    ADD_EMPLOYEES = "add_employees"
    EDIT_EMPLOYEE_DATA = "edit_employee_data"
    DELETE_EMPLOYEES = "delete_employees"
    VIEW_ALL_EMPLOYEES = "view_all_employees"
    MANAGE_USERS = "manage_users"
    ASSIGN_ROLES = "assign_roles"
    EXPORT_REPORTS = "export_reports"
    ACCESS_ANALYTICS = "access_analytics"


CapabilityLike = Union[Capability, str]


def resolve_capability(name: CapabilityLike) -> Capability:
    """Map a capability or its string value to a ``Capability`` member."""

    if isinstance(name, Capability):
        return name
    try:
        return Capability(name)
    except ValueError as exc:
        raise UnknownCapabilityError(
            error_code="UNKNOWN_CAPABILITY",
            message=f"Capability '{name}' is not defined.",
            details={"known": [capability.value for capability in Capability]},
        ) from exc


class UserPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    granted: FrozenSet[Capability] = Field(default_factory=frozenset)
    restricted_to_sections: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("granted", mode="before")
    def _resolve_granted(cls, value: Iterable[CapabilityLike]) -> FrozenSet[Capability]:
        return frozenset(resolve_capability(item) for item in value or ())

    @field_validator("restricted_to_sections", mode="before")
    def _plain_sections(cls, value: Iterable[str]) -> FrozenSet[str]:
        return frozenset(getattr(item, "value", item) for item in value or ())

    @field_serializer("granted", when_used="json")
    def _dump_granted(self, granted: FrozenSet[Capability]) -> List[str]:
        return [capability.value for capability in Capability if capability in granted]

    @field_serializer("restricted_to_sections", when_used="json")
    def _dump_sections(self, sections: FrozenSet[str]) -> List[str]:
        return sorted(sections)

    def as_flags(self) -> Dict[Capability, bool]:
        """Exhaustive capability -> granted map, in declaration order."""

        return {capability: capability in self.granted for capability in Capability}

    def with_capability(self, capability: CapabilityLike, granted: bool) -> "UserPermissions":
        resolved = resolve_capability(capability)
        updated = self.granted | {resolved} if granted else self.granted - {resolved}
        return UserPermissions(granted=updated, restricted_to_sections=self.restricted_to_sections)

    def with_sections(self, sections: Iterable[str]) -> "UserPermissions":
        return UserPermissions(granted=self.granted, restricted_to_sections=frozenset(sections))


__all__ = ["Capability", "CapabilityLike", "UserPermissions", "resolve_capability"]
