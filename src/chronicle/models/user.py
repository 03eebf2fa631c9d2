"""Pydantic models describing user profiles and roles."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict

from chronicle.models.base import ChronicleBaseModel


class UserRole(str, Enum):
    """Closed set of roles a profile can carry."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class UserProfile(ChronicleBaseModel):
    """Domain model representing a row in the ``users`` table."""

    id: UUID
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER
    bio: Optional[str] = None
    website: Optional[str] = None
    twitter: Optional[str] = None
    youtube: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


__all__ = ["UserProfile", "UserRole"]
