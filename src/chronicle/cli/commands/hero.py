"""CLI commands for the homepage hero background."""

from __future__ import annotations

import asyncio
import json
import mimetypes
from pathlib import Path
from typing import Optional
from uuid import UUID

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chronicle.cli.context import ServiceContainer
from chronicle.cli.exit_codes import ExitCode
from chronicle.models.media import HeroMedia, MediaSlot
from chronicle.services.media import MediaError
from chronicle.services.object_store import ObjectStoreError


def register(app: typer.Typer, console: Console, services: ServiceContainer) -> None:
    """Register the `hero` command group."""

    hero_app = typer.Typer(help="Manage the homepage hero background image and video.")
    app.add_typer(hero_app, name="hero")

    @hero_app.command("show")
    def show(
        json_output: bool = typer.Option(False, "--json", help="Output resolved media as JSON"),
    ) -> None:
        """Show which hero assets are currently active."""

        hero = asyncio.run(services.hero.resolve())

        if json_output:
            payload = {**hero.model_dump(mode="json"), "background": hero.background}
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
            return

        _render_hero(console, hero)

    @hero_app.command("upload")
    def upload(
        file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Image or video file"),
        slot: MediaSlot = typer.Option(..., "--slot", help="Slot the file replaces"),
        content_type: Optional[str] = typer.Option(
            None, "--content-type", help="Override the MIME type guessed from the file name"
        ),
        as_user: Optional[UUID] = typer.Option(None, "--as-user", help="Acting user; must be an admin"),
    ) -> None:
        """Upload a new hero image or video, replacing the existing file of the same type."""

        services.authorize(as_user)
        mime_type = content_type or mimetypes.guess_type(file.name)[0] or ""

        try:
            public_url = services.hero.upload(slot, file.read_bytes(), mime_type)
        except MediaError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(code=ExitCode.INVALID_INPUT) from exc
        except ObjectStoreError as exc:
            console.print(f"[red]Upload failed:[/red] {escape(str(exc))}")
            raise typer.Exit(code=ExitCode.STORAGE_ERROR) from exc

        console.print(f"[green]Hero {slot.value} updated successfully![/green]")
        console.print(f"Public URL: {public_url}")

    @hero_app.command("remove")
    def remove(
        slot: MediaSlot = typer.Option(..., "--slot", help="Slot whose variants are deleted"),
        as_user: Optional[UUID] = typer.Option(None, "--as-user", help="Acting user; must be an admin"),
    ) -> None:
        """Remove every variant of a hero slot."""

        services.authorize(as_user)
        try:
            removed = services.hero.remove(slot)
        except ObjectStoreError as exc:
            console.print(f"[red]Failed to remove media:[/red] {escape(str(exc))}")
            raise typer.Exit(code=ExitCode.STORAGE_ERROR) from exc

        console.print(f"[green]Hero {slot.value} removed[/green] ({', '.join(removed)})")


def _render_hero(console: Console, hero: HeroMedia) -> None:
    table = Table(title="Hero Media")
    table.add_column("Slot", style="cyan")
    table.add_column("Public URL", overflow="fold")

    table.add_row(MediaSlot.IMAGE.value, hero.image_url or "-")
    table.add_row(MediaSlot.VIDEO.value, hero.video_url or "-")

    console.print(table)
    console.print(f"Background: [bold]{hero.background}[/bold]")


__all__ = ["register"]
