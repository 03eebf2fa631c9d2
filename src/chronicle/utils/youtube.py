"""Helpers for turning pasted YouTube links and identifiers into canonical video IDs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import parse_qs, urlsplit


class InvalidYouTubeURLError(ValueError):
    """Raised when a provided value does not contain a YouTube video identifier."""


WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"
THUMBNAIL_URL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"

_BARE_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{10,}")
_MARKED_ID_PATTERN = re.compile(r"(?:v=|vi=|v/|vi/|embed/|shorts/|youtu\.be/)([A-Za-z0-9_-]{10,})")
_FORBIDDEN_HOST_CHARS = frozenset(" <>^|%\\[]\x7f" + "".join(chr(code) for code in range(0x20)))


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    """The parts of a URL the extractor inspects."""

    scheme: str
    host: str
    path: str
    query: str


@dataclass(frozen=True, slots=True)
class Unparseable:
    """Marker for input that cannot be read as a URL at all."""

    raw: str


UrlShape = Union[ParsedUrl, Unparseable]


def split_url(value: str) -> UrlShape:
    """Split ``value`` into a :class:`ParsedUrl`, or return :class:`Unparseable`.

    ``urlsplit`` accepts almost anything, so hosts that a browser URL parser would reject
    (empty, containing whitespace, control characters or DEL, bad ports) are rejected here too.
    """

    try:
        parts = urlsplit(value)
        host = parts.hostname or ""
        parts.port  # raises ValueError on an out-of-range or non-numeric port
    except ValueError:
        return Unparseable(value)

    if not host or any(char in _FORBIDDEN_HOST_CHARS for char in host):
        return Unparseable(value)

    return ParsedUrl(scheme=parts.scheme, host=host, path=parts.path, query=parts.query)


def _ensure_scheme(value: str) -> str:
    if value.startswith("http://") or value.startswith("https://"):
        return value
    return f"https://{value}"


def _first_segment_after(path: str, marker: str) -> Optional[str]:
    segment = path[len(marker):].split("/")[0]
    return segment or None


def parse_video_id(raw: Optional[str]) -> Optional[str]:
    """Extract a canonical YouTube video ID from a pasted URL or bare ID.

    Returns ``None`` when nothing resembling an ID can be found. Never raises.
    """

    value = (raw or "").strip()
    if not value:
        return None

    if _BARE_ID_PATTERN.fullmatch(value) and "http" not in value:
        return value

    shape = split_url(_ensure_scheme(value))

    if isinstance(shape, Unparseable):
        loose_match = _BARE_ID_PATTERN.search(value)
        return loose_match.group(0) if loose_match else None

    host = shape.host[4:] if shape.host.startswith("www.") else shape.host

    if host == "youtu.be":
        return _first_segment_after(shape.path, "/") if shape.path.startswith("/") else None

    if host.endswith("youtube.com"):
        if shape.path.startswith("/shorts/"):
            return _first_segment_after(shape.path, "/shorts/")
        if shape.path.startswith("/embed/"):
            return _first_segment_after(shape.path, "/embed/")
        candidates = parse_qs(shape.query, keep_blank_values=True).get("v", [])
        if candidates and candidates[0]:
            return candidates[0]

    marked_match = _MARKED_ID_PATTERN.search(value)
    return marked_match.group(1) if marked_match else None


def require_video_id(raw: Optional[str]) -> str:
    """Return the video ID in ``raw`` or raise :class:`InvalidYouTubeURLError`."""

    video_id = parse_video_id(raw)
    if video_id is None:
        raise InvalidYouTubeURLError(f"Invalid YouTube URL or video ID: {raw!r}")
    return video_id


def canonical_watch_url(video_id: str) -> str:
    """Return the watch URL stored for a video ID."""

    return WATCH_URL_TEMPLATE.format(video_id=video_id)


def default_thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)


__all__ = [
    "InvalidYouTubeURLError",
    "ParsedUrl",
    "Unparseable",
    "UrlShape",
    "canonical_watch_url",
    "default_thumbnail_url",
    "parse_video_id",
    "require_video_id",
    "split_url",
]
