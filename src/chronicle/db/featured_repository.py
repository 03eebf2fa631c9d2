"""Repository for the `featured_items` table."""

from __future__ import annotations

from typing import Optional

from chronicle.db import ConnectionFactory
from chronicle.db.repositories import BaseRepository
from chronicle.models.featured import FeaturedItem


class FeaturedItemRepository(BaseRepository[FeaturedItem]):
    """Single source of truth for curated homepage items."""

    table_name = "featured_items"
    model_type = FeaturedItem
    insert_fields = ("youtube_id", "title", "description", "thumbnail_url")
    default_order_by = "created_at DESC, id DESC"

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        super().__init__(connection_factory)

    def list_recent(self, limit: Optional[int] = None) -> list[FeaturedItem]:
        return self.fetch_all(limit=limit)

    def prune(self, keep: int) -> int:
        """Delete everything but the ``keep`` newest items and return how many were removed."""

        query = (
            f"DELETE FROM {self.table_name} WHERE id NOT IN ("
            f"SELECT id FROM {self.table_name} ORDER BY {self.default_order_by} LIMIT %(keep)s)"
        )
        return self._execute(query, {"keep": keep})


__all__ = ["FeaturedItemRepository"]
