"""Models describing hero background media slots and their resolved assets."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import Field

from chronicle.models.base import ChronicleBaseModel


class MediaSlot(str, Enum):
    """Logical purposes a hero background asset can serve."""

    IMAGE = "image"
    VIDEO = "video"


class MediaVariant(ChronicleBaseModel):
    """Outcome of probing one logical slot against the object store.

    ``candidate_names`` is ordered most-preferred first. ``resolved_url`` is only set when one
    of the candidates exists, and always belongs to the first candidate that does.
    """

    slot: MediaSlot
    candidate_names: Tuple[str, ...] = Field(min_length=1)
    resolved_url: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_url is not None


class HeroMedia(ChronicleBaseModel):
    """Resolved hero background assets for the homepage."""

    image_url: Optional[str] = None
    video_url: Optional[str] = None

    @property
    def background(self) -> str:
        """Which element to render: ``video``, ``image`` or the ``gradient`` fallback."""

        if self.video_url:
            return "video"
        if self.image_url:
            return "image"
        return "gradient"


__all__ = ["HeroMedia", "MediaSlot", "MediaVariant"]
