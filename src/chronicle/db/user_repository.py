"""Repository for reading profiles from the `users` table."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from chronicle.db import ConnectionFactory
from chronicle.db.repositories import BaseRepository, RecordNotFoundError
from chronicle.models.user import UserProfile


class UserRepository(BaseRepository[UserProfile]):
    """Profiles are created by the auth provider; this repository only reads them."""

    table_name = "users"
    model_type = UserProfile
    insert_fields = ()

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        super().__init__(connection_factory)

    def find_profile(self, user_id: UUID) -> Optional[UserProfile]:
        try:
            return self.get_by_id(user_id)
        except RecordNotFoundError:
            return None


__all__ = ["UserRepository"]
