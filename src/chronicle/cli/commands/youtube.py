"""CLI command for normalizing pasted YouTube references."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape

from chronicle.cli.exit_codes import ExitCode
from chronicle.utils.youtube import canonical_watch_url, parse_video_id


def register(app: typer.Typer, console: Console) -> None:
    """Register the `parse-video-id` command."""

    @app.command("parse-video-id")
    def parse_video_id_command(
        raw: str = typer.Argument(..., help="YouTube URL or bare video ID"),
        json_output: bool = typer.Option(False, "--json", help="Output the result as JSON"),
    ) -> None:
        """Extract the canonical video ID and watch URL from a pasted link."""

        video_id = parse_video_id(raw)
        watch_url = canonical_watch_url(video_id) if video_id else None

        if json_output:
            typer.echo(json.dumps({"input": raw, "video_id": video_id, "watch_url": watch_url}, ensure_ascii=False))
        elif video_id is None:
            console.print(f"[red]Error:[/red] Invalid YouTube URL: {escape(repr(raw))}")
        else:
            console.print(f"Video ID: [bold]{video_id}[/bold]")
            console.print(f"Watch URL: {watch_url}")

        if video_id is None:
            raise typer.Exit(code=ExitCode.INVALID_INPUT)


__all__ = ["register"]
