"""Repository for reading the `videos` table."""

from __future__ import annotations

from chronicle.db import ConnectionFactory
from chronicle.db.repositories import BaseRepository
from chronicle.models.video import Video, VideoStatus, VideoVisibility


class VideoRepository(BaseRepository[Video]):
    """Read-only access to platform videos; uploads are handled by the web application."""

    table_name = "videos"
    model_type = Video
    insert_fields = ()
    default_order_by = "created_at DESC"

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        super().__init__(connection_factory)

    def list_published(self, limit: int) -> list[Video]:
        """Return the newest ready, public videos."""

        return self.fetch_all(
            "status = %(status)s AND visibility = %(visibility)s",
            {"status": VideoStatus.READY.value, "visibility": VideoVisibility.PUBLIC.value},
            limit=limit,
        )


__all__ = ["VideoRepository"]
