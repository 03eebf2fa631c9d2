"""Pydantic models describing platform videos."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from chronicle.models.base import ChronicleBaseModel


class VideoStatus(str, Enum):
    """Processing states for a stored video."""

    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"


class VideoVisibility(str, Enum):
    """Audience a video is published to."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


class Video(ChronicleBaseModel):
    """Domain model representing a row in the ``videos`` table.

    Only the columns read by the homepage and featured-content feeds are modelled; any other
    columns returned by ``SELECT *`` are ignored.
    """

    id: Optional[UUID] = None
    title: str
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)
    thumbnail_url: Optional[str] = None
    status: VideoStatus = VideoStatus.PROCESSING
    visibility: VideoVisibility = VideoVisibility.PUBLIC
    youtube_video_id: Optional[str] = None
    youtube_thumbnail_url: Optional[str] = None
    era: Optional[str] = None
    topic: Optional[str] = None
    region: Optional[str] = None
    tags: Optional[List[str]] = None
    language: str = "en"
    series_id: Optional[UUID] = None
    episode_number: Optional[int] = None
    created_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    @property
    def page_path(self) -> str:
        """Site-relative path of the watch page for this video."""

        return f"/video/{self.slug}"


__all__ = ["Video", "VideoStatus", "VideoVisibility"]
