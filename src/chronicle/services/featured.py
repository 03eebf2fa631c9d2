"""Curated homepage content backed by the `featured_items` table."""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass
from typing import List, Optional, Union
from uuid import UUID

from rich.console import Console

from chronicle.config.settings import Settings, get_settings
from chronicle.db.connection import get_connection
from chronicle.db.featured_repository import FeaturedItemRepository
from chronicle.db.video_repository import VideoRepository
from chronicle.models.featured import FeaturedCard, FeaturedItem
from chronicle.models.video import Video
from chronicle.services.object_store import ObjectStore
from chronicle.utils.youtube import parse_video_id

DEFAULT_THUMBNAIL_EXTENSION = "jpg"


class FeaturedContentError(RuntimeError):
    """Base exception raised for featured-content failures."""


class FeaturedItemValidationError(FeaturedContentError):
    """Raised when a featured item is missing its title, description or video reference."""


@dataclass(slots=True)
class ThumbnailUpload:
    """A thumbnail file submitted alongside a featured item."""

    file_name: str
    data: bytes
    content_type: str

    @property
    def extension(self) -> str:
        _, dot, suffix = self.file_name.rpartition(".")
        return suffix.lower() if dot and suffix else DEFAULT_THUMBNAIL_EXTENSION


class FeaturedContentService:
    """Add, list and remove featured items and assemble the homepage card feed."""

    def __init__(
        self,
        store: ObjectStore,
        *,
        featured_repository: Optional[FeaturedItemRepository] = None,
        video_repository: Optional[VideoRepository] = None,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
    ) -> None:
        self._store = store
        self._featured_repo = featured_repository or FeaturedItemRepository(get_connection)
        self._video_repo = video_repository or VideoRepository(get_connection)
        self._settings = settings or get_settings()
        self._console = console or Console()

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def add_item(
        self,
        youtube_url: str,
        title: str,
        description: str,
        *,
        thumbnail: Optional[ThumbnailUpload] = None,
    ) -> FeaturedItem:
        """Validate and store a featured item, then prune the table to the configured size.

        Raises
        ------
        FeaturedItemValidationError
            If the title or description is blank or no video ID can be extracted.
        ObjectStoreError
            If the thumbnail upload fails. Nothing is inserted in that case.
        """

        youtube_id = parse_video_id(youtube_url)
        clean_title = (title or "").strip()
        clean_description = (description or "").strip()
        if youtube_id is None or not clean_title or not clean_description:
            raise FeaturedItemValidationError("Valid YouTube URL, title and description are required.")

        thumbnail_url = self._upload_thumbnail(thumbnail) if thumbnail is not None else None

        item = self._featured_repo.insert(
            FeaturedItem(
                youtube_id=youtube_id,
                title=clean_title,
                description=clean_description,
                thumbnail_url=thumbnail_url,
            )
        )
        pruned = self._featured_repo.prune(self._settings.featured_limit)
        self._console.log(
            f"[green]Featured:[/green] added {item.youtube_id} (id={item.id}, pruned={pruned})"
        )
        return item

    def list_items(self, limit: Optional[int] = None) -> List[FeaturedItem]:
        """Return featured items, newest first."""

        return self._featured_repo.list_recent(limit or self._settings.featured_limit)

    def remove_item(self, item_id: Union[UUID, str]) -> bool:
        removed = self._featured_repo.delete_by_id(item_id)
        if removed:
            self._console.log(f"[green]Featured:[/green] removed item {item_id}")
        else:
            self._console.log(f"[yellow]Featured:[/yellow] item {item_id} not found")
        return removed

    def homepage_cards(self, limit: Optional[int] = None) -> List[FeaturedCard]:
        """Featured items first, then the newest published videos, capped at ``limit``."""

        card_limit = limit or self._settings.homepage_card_limit
        cards = [self._card_from_item(item) for item in self._featured_repo.list_recent(card_limit)]
        remaining = card_limit - len(cards)
        if remaining > 0:
            cards.extend(self._card_from_video(video) for video in self._video_repo.list_published(remaining))
        return cards[:card_limit]

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _upload_thumbnail(self, thumbnail: ThumbnailUpload) -> str:
        name = f"{int(time.time() * 1000)}-{secrets.token_hex(4)}.{thumbnail.extension}"
        folder = self._settings.featured_folder
        path = f"{folder}/{name}" if folder else name
        self._store.upload(path, thumbnail.data, content_type=thumbnail.content_type, overwrite=False)
        return self._store.public_url(path)

    @staticmethod
    def _card_from_item(item: FeaturedItem) -> FeaturedCard:
        return FeaturedCard(
            id=f"featured-{item.id}",
            title=item.title,
            description=item.description,
            thumbnail_url=item.display_thumbnail_url,
            href=item.watch_url,
        )

    @staticmethod
    def _card_from_video(video: Video) -> FeaturedCard:
        return FeaturedCard(
            id=str(video.id),
            title=video.title,
            description=video.description,
            thumbnail_url=video.thumbnail_url or video.youtube_thumbnail_url,
            href=video.page_path,
            duration=video.duration,
        )


__all__ = [
    "FeaturedContentError",
    "FeaturedContentService",
    "FeaturedItemValidationError",
    "ThumbnailUpload",
]
