"""CLI commands for curating featured homepage content."""

from __future__ import annotations

import json
import mimetypes
from pathlib import Path
from typing import Optional, Sequence
from uuid import UUID

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chronicle.cli.context import ServiceContainer
from chronicle.cli.exit_codes import ExitCode
from chronicle.models.featured import FeaturedCard, FeaturedItem
from chronicle.services.featured import FeaturedItemValidationError, ThumbnailUpload
from chronicle.services.object_store import ObjectStoreError


def register(app: typer.Typer, console: Console, services: ServiceContainer) -> None:
    """Register the `featured` command group."""

    featured_app = typer.Typer(help="Curate the featured YouTube videos shown on the homepage.")
    app.add_typer(featured_app, name="featured")

    @featured_app.command("add")
    def add(
        url: str = typer.Option(..., "--url", help="YouTube URL or bare video ID"),
        title: str = typer.Option(..., "--title", help="Card title"),
        description: str = typer.Option(..., "--description", help="Card description"),
        thumbnail: Optional[Path] = typer.Option(
            None, "--thumbnail", exists=True, dir_okay=False, readable=True, help="Custom thumbnail image"
        ),
        as_user: Optional[UUID] = typer.Option(None, "--as-user", help="Acting user; must be an admin"),
    ) -> None:
        """Add a featured item."""

        services.authorize(as_user)

        upload: Optional[ThumbnailUpload] = None
        if thumbnail is not None:
            upload = ThumbnailUpload(
                file_name=thumbnail.name,
                data=thumbnail.read_bytes(),
                content_type=mimetypes.guess_type(thumbnail.name)[0] or "application/octet-stream",
            )

        try:
            item = services.featured.add_item(url, title, description, thumbnail=upload)
        except FeaturedItemValidationError as exc:
            console.print(f"[red]Missing info:[/red] {escape(str(exc))}")
            raise typer.Exit(code=ExitCode.INVALID_INPUT) from exc
        except ObjectStoreError as exc:
            console.print(f"[red]Thumbnail upload failed:[/red] {escape(str(exc))}")
            raise typer.Exit(code=ExitCode.STORAGE_ERROR) from exc

        console.print(f"[green]Featured item added:[/green] {escape(item.title)} ({item.watch_url})")
        console.print(f"Record ID: {item.id}")

    @featured_app.command("list")
    def list_items(
        limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum items to show"),
        json_output: bool = typer.Option(False, "--json", help="Output items as JSON"),
    ) -> None:
        """List featured items, newest first."""

        items = services.featured.list_items(limit)

        if json_output:
            typer.echo(json.dumps([_item_payload(item) for item in items], ensure_ascii=False, indent=2))
            return

        _render_items(console, items)

    @featured_app.command("remove")
    def remove(
        item_id: UUID = typer.Argument(..., help="Featured item UUID"),
        as_user: Optional[UUID] = typer.Option(None, "--as-user", help="Acting user; must be an admin"),
    ) -> None:
        """Remove a featured item."""

        services.authorize(as_user)
        if not services.featured.remove_item(item_id):
            console.print(f"[red]Featured item not found:[/red] {item_id}")
            raise typer.Exit(code=ExitCode.NOT_FOUND)
        console.print(f"[green]Featured item removed:[/green] {item_id}")

    @featured_app.command("homepage")
    def homepage(
        limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Number of cards"),
        json_output: bool = typer.Option(False, "--json", help="Output cards as JSON"),
    ) -> None:
        """Preview the featured-content cards the homepage renders."""

        cards = services.featured.homepage_cards(limit)

        if json_output:
            typer.echo(json.dumps([_card_payload(card) for card in cards], ensure_ascii=False, indent=2))
            return

        _render_cards(console, cards)


def _item_payload(item: FeaturedItem) -> dict[str, object]:
    return {
        "id": str(item.id) if item.id else None,
        "youtube_id": item.youtube_id,
        "watch_url": item.watch_url,
        "title": item.title,
        "description": item.description,
        "thumbnail_url": item.display_thumbnail_url,
        "created_at": item.created_at.isoformat() if item.created_at else None,
    }


def _card_payload(card: FeaturedCard) -> dict[str, object]:
    return {
        **card.model_dump(mode="json"),
        "external": card.is_external,
        "duration_label": card.duration_label,
    }


def _render_items(console: Console, items: Sequence[FeaturedItem]) -> None:
    if not items:
        console.print("[yellow]No featured items yet.[/yellow]")
        return

    table = Table(title="Featured Items")
    table.add_column("ID", overflow="fold")
    table.add_column("Title", overflow="fold")
    table.add_column("Video")
    table.add_column("Added")

    for item in items:
        table.add_row(
            str(item.id) if item.id else "n/a",
            escape(item.title),
            item.youtube_id,
            item.created_at.isoformat() if item.created_at else "unknown",
        )

    console.print(table)


def _render_cards(console: Console, cards: Sequence[FeaturedCard]) -> None:
    if not cards:
        console.print("[yellow]No featured content yet. Upload videos from the admin dashboard.[/yellow]")
        return

    table = Table(title="Homepage Featured Content")
    table.add_column("Title", overflow="fold")
    table.add_column("Link", overflow="fold")
    table.add_column("Duration")

    for card in cards:
        table.add_row(escape(card.title), card.href, card.duration_label or "-")

    console.print(table)


__all__ = ["register"]
