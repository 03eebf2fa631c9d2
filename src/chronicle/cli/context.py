"""Lazily constructed services shared by CLI commands."""

from __future__ import annotations

from functools import cached_property
from typing import Optional
from uuid import UUID

import typer
from rich.console import Console

from chronicle.cli.exit_codes import ExitCode
from chronicle.config.settings import Settings, get_settings
from chronicle.db.connection import close_pool
from chronicle.services import SupportsClose
from chronicle.services.auth import AdminGuard, AuthorizationError
from chronicle.services.featured import FeaturedContentService
from chronicle.services.media import HeroMediaService
from chronicle.services.object_store import ObjectStore, SupabaseObjectStore


class ServiceContainer:
    """Build services on first use so commands that need none never touch configuration."""

    def __init__(
        self,
        console: Console,
        *,
        settings: Optional[Settings] = None,
        store: Optional[ObjectStore] = None,
        hero_service: Optional[HeroMediaService] = None,
        featured_service: Optional[FeaturedContentService] = None,
        admin_guard: Optional[AdminGuard] = None,
    ) -> None:
        self._console = console
        self._overrides = {
            "settings": settings,
            "store": store,
            "hero": hero_service,
            "featured": featured_service,
            "guard": admin_guard,
        }

    @cached_property
    def settings(self) -> Settings:
        return self._overrides["settings"] or get_settings()

    @cached_property
    def store(self) -> ObjectStore:
        return self._overrides["store"] or SupabaseObjectStore(settings=self.settings, console=self._console)

    @cached_property
    def hero(self) -> HeroMediaService:
        return self._overrides["hero"] or HeroMediaService(self.store, settings=self.settings, console=self._console)

    @cached_property
    def featured(self) -> FeaturedContentService:
        return self._overrides["featured"] or FeaturedContentService(
            self.store, settings=self.settings, console=self._console
        )

    @cached_property
    def guard(self) -> AdminGuard:
        return self._overrides["guard"] or AdminGuard(console=self._console)

    def authorize(self, as_user: Optional[UUID]) -> None:
        """Exit with :attr:`ExitCode.UNAUTHORIZED` unless ``as_user`` is absent or an admin."""

        if as_user is None:
            return
        try:
            self.guard.require_admin(as_user)
        except AuthorizationError as exc:
            self._console.print(f"[red]Unauthorized:[/red] {exc}")
            raise typer.Exit(code=ExitCode.UNAUTHORIZED) from exc

    def close(self) -> None:
        store = self.__dict__.get("store")
        if isinstance(store, SupportsClose):
            store.close()
        close_pool()


__all__ = ["ServiceContainer"]
