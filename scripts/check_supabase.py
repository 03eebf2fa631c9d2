"""Quick connectivity check for the Supabase Postgres database and media bucket."""

from __future__ import annotations

from rich.console import Console

from chronicle.config.settings import get_settings
from chronicle.db.connection import connection_from_dsn
from chronicle.models.media import MediaSlot
from chronicle.services.media import HeroMediaService
from chronicle.services.object_store import SupabaseObjectStore


def main() -> None:
    """Run `SELECT 1` against DATABASE_URL and probe the hero slots in the media bucket."""

    console = Console()
    settings = get_settings()
    try:
        with connection_from_dsn(str(settings.database_url)) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                console.print(f"[green]Database reachable[/green], SELECT 1 returned: {cur.fetchone()}")
    except Exception as exc:  # pragma: no cover - diagnostic script
        console.print(f"[red]Database connection failed:[/red] {exc}")

    store = SupabaseObjectStore(settings=settings, console=console)
    try:
        hero = HeroMediaService(store, settings=settings, console=console)
        for slot in MediaSlot:
            variant = hero.resolve_slot(slot)
            console.print(f"{slot.value}: {variant.resolved_url or 'not found'}")
    finally:
        store.close()


if __name__ == "__main__":
    main()
