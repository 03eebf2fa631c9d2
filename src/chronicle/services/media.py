"""Hero background media: priority-ordered variant resolution and upload/removal flows."""

from __future__ import annotations

import asyncio
from typing import Callable, Dict, Iterable, Optional, Tuple

from rich.console import Console

from chronicle.config.settings import Settings, get_settings
from chronicle.models.media import HeroMedia, MediaSlot, MediaVariant
from chronicle.services.object_store import ObjectStore

HERO_SLOT_CANDIDATES: Dict[MediaSlot, Tuple[str, ...]] = {
    MediaSlot.IMAGE: ("hero.jpg", "hero.png"),
    MediaSlot.VIDEO: ("hero.mp4", "hero.webm"),
}

_SLOT_MIME_PREFIX: Dict[MediaSlot, str] = {
    MediaSlot.IMAGE: "image/",
    MediaSlot.VIDEO: "video/",
}


class MediaError(RuntimeError):
    """Base exception raised for hero media management failures."""


class UnsupportedMediaTypeError(MediaError):
    """Raised when an upload's content type does not fit the target slot."""


def resolve_variant(
    candidates: Iterable[str],
    exists_fn: Callable[[str], bool],
    public_url_fn: Callable[[str], str],
    *,
    console: Optional[Console] = None,
) -> Optional[str]:
    """Return the public URL of the first candidate that exists, or ``None``.

    Candidates are probed one at a time in the given order and probing stops at the first hit.
    A probe that raises counts as a miss for that candidate only.
    """

    for candidate in candidates:
        try:
            found = bool(exists_fn(candidate))
        except Exception as exc:  # noqa: BLE001 - probe errors count as misses
            if console is not None:
                console.log(f"[yellow]Media:[/yellow] probe for {candidate} failed: {exc}")
            found = False
        if found:
            return public_url_fn(candidate)
    return None


def target_file_name(slot: MediaSlot, content_type: str) -> str:
    """Pick the fixed file name an upload of ``content_type`` is stored under."""

    lowered = content_type.lower()
    if not lowered.startswith(_SLOT_MIME_PREFIX[slot]):
        raise UnsupportedMediaTypeError(f"Content type '{content_type}' cannot be used for the hero {slot.value}.")
    if slot is MediaSlot.IMAGE:
        return "hero.png" if "png" in lowered else "hero.jpg"
    return "hero.webm" if "webm" in lowered else "hero.mp4"


class HeroMediaService:
    """Resolve, replace and remove the homepage hero background assets."""

    def __init__(
        self,
        store: ObjectStore,
        *,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_settings()
        self._console = console or Console()
        self._folder = self._settings.hero_folder

    def candidate_paths(self, slot: MediaSlot) -> Tuple[str, ...]:
        """Object paths for ``slot``, most preferred first."""

        return tuple(self._object_path(name) for name in HERO_SLOT_CANDIDATES[slot])

    def resolve_slot(self, slot: MediaSlot) -> MediaVariant:
        candidates = self.candidate_paths(slot)
        resolved_url = resolve_variant(
            candidates,
            self._store.exists,
            self._store.public_url,
            console=self._console,
        )
        return MediaVariant(slot=slot, candidate_names=candidates, resolved_url=resolved_url)

    async def resolve(self) -> HeroMedia:
        """Resolve both slots.

        The slots are independent so they are probed concurrently; each slot still walks its
        candidates strictly in order.
        """

        image, video = await asyncio.gather(
            asyncio.to_thread(self.resolve_slot, MediaSlot.IMAGE),
            asyncio.to_thread(self.resolve_slot, MediaSlot.VIDEO),
        )
        hero = HeroMedia(image_url=image.resolved_url, video_url=video.resolved_url)
        self._console.log(f"[blue]Media:[/blue] hero resolved (background={hero.background})")
        return hero

    def upload(self, slot: MediaSlot, data: bytes, content_type: str) -> str:
        """Store ``data`` as the hero asset for ``slot`` and return its public URL.

        Uploads overwrite whatever is at the target path. A lower-priority variant (for example
        ``hero.png`` while ``hero.jpg`` exists) is stored but does not become the resolved asset
        until the higher-priority one is removed.
        """

        if not data:
            raise MediaError(f"Refusing to upload an empty hero {slot.value}.")

        path = self._object_path(target_file_name(slot, content_type))
        self._store.upload(path, data, content_type=content_type, overwrite=True)
        self._console.log(f"[green]Media:[/green] hero {slot.value} updated ({path})")
        return self._store.public_url(path)

    def remove(self, slot: MediaSlot) -> Tuple[str, ...]:
        """Delete every variant of ``slot`` so no stale lower-priority file resurfaces."""

        paths = self.candidate_paths(slot)
        self._store.remove(list(paths))
        self._console.log(f"[green]Media:[/green] hero {slot.value} removed ({', '.join(paths)})")
        return paths

    def _object_path(self, name: str) -> str:
        return f"{self._folder}/{name}" if self._folder else name


__all__ = [
    "HERO_SLOT_CANDIDATES",
    "HeroMediaService",
    "MediaError",
    "UnsupportedMediaTypeError",
    "resolve_variant",
    "target_file_name",
]
