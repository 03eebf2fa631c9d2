"""Role checks applied once at the admin boundary."""

from __future__ import annotations

from typing import Optional, Union
from uuid import UUID

from rich.console import Console

from chronicle.db.connection import get_connection
from chronicle.db.user_repository import UserRepository
from chronicle.models.user import UserProfile, UserRole


class AuthorizationError(PermissionError):
    """Raised when a user may not perform an administrative action."""


class AdminGuard:
    """Load a profile and confirm it carries the ``admin`` role.

    Authentication itself belongs to the auth provider; callers pass the already
    authenticated user's identifier.
    """

    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        *,
        console: Optional[Console] = None,
    ) -> None:
        self._users = user_repository or UserRepository(get_connection)
        self._console = console or Console()

    def require_admin(self, user_id: Union[UUID, str]) -> UserProfile:
        try:
            identifier = user_id if isinstance(user_id, UUID) else UUID(str(user_id))
        except ValueError as exc:
            raise AuthorizationError(f"Malformed user identifier: {user_id!r}") from exc

        profile = self._users.find_profile(identifier)
        if profile is None:
            self._console.log(f"[yellow]Auth:[/yellow] no profile for user {identifier}")
            raise AuthorizationError(f"No profile found for user {identifier}.")
        if profile.role is not UserRole.ADMIN:
            self._console.log(f"[yellow]Auth:[/yellow] user {identifier} has role {profile.role.value}")
            raise AuthorizationError(f"User {identifier} is not an administrator.")
        return profile


__all__ = ["AdminGuard", "AuthorizationError"]
