from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from talent_compass.models.permissions import UserPermissions
from talent_compass.models.enums import UserRole
from talent_compass.utils.validators import coerce_enum


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    full_name: str
    email: EmailStr
    department: str
    role: UserRole
    permissions: UserPermissions = Field(default_factory=UserPermissions)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    last_login: Optional[datetime] = None

    @field_validator("role", mode="before")
    def _check_role(cls, value: Any) -> UserRole:
        return coerce_enum(UserRole, value, "role")

    @property
    def first_name(self) -> str:
        return self.full_name.split(" ")[0]
