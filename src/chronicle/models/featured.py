"""Pydantic models for curated homepage content."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from chronicle.models.base import ChronicleBaseModel
from chronicle.utils.youtube import canonical_watch_url, default_thumbnail_url


class FeaturedItem(ChronicleBaseModel):
    """Domain model representing a row in the ``featured_items`` table.

    Each item points at an externally hosted YouTube video by its canonical identifier. The
    identifier is produced by :func:`chronicle.utils.youtube.parse_video_id` before insert.
    """

    id: Optional[UUID] = None
    youtube_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    thumbnail_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def watch_url(self) -> str:
        return canonical_watch_url(self.youtube_id)

    @property
    def display_thumbnail_url(self) -> str:
        """Uploaded thumbnail, or the one YouTube serves for the video."""

        return self.thumbnail_url or default_thumbnail_url(self.youtube_id)


class FeaturedCard(ChronicleBaseModel):
    """A single card in the homepage featured-content grid."""

    id: str
    title: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    href: str
    duration: Optional[int] = Field(default=None, ge=0)

    @property
    def is_external(self) -> bool:
        return self.href.startswith("http")

    @property
    def duration_label(self) -> Optional[str]:
        if not self.duration:
            return None
        minutes, seconds = divmod(self.duration, 60)
        if seconds:
            return f"{minutes}m {seconds}s"
        return f"{minutes}m"


__all__ = ["FeaturedCard", "FeaturedItem"]
