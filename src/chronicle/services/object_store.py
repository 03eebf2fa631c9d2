"""Object-store capability backed by Supabase Storage."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol, Sequence
from urllib.parse import quote

import requests
from rich.console import Console

from chronicle.config.settings import Settings, get_settings

LIST_PAGE_LIMIT = 100


class ObjectStoreError(RuntimeError):
    """Raised when an upload or removal against the object store fails."""


class ObjectStore(Protocol):
    """Operations the media and featured-content services need from a bucket."""

    def exists(self, path: str) -> bool:
        """Return whether an object lives at ``path``. Must return ``False`` instead of raising."""

    def public_url(self, path: str) -> str:
        """Return the public URL serving ``path``."""

    def upload(self, path: str, data: bytes, *, content_type: str, overwrite: bool = False) -> None:
        """Store ``data`` at ``path``; with ``overwrite`` an existing object is replaced."""

    def remove(self, paths: Sequence[str]) -> None:
        """Delete every object in ``paths``. Missing objects are not an error."""


def split_object_path(path: str) -> tuple[str, str]:
    """Split ``branding/hero.jpg`` into ``("branding", "hero.jpg")``."""

    folder, _, name = path.strip("/").rpartition("/")
    return folder, name


class SupabaseObjectStore:
    """:class:`ObjectStore` implementation talking to the Supabase Storage REST API."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        bucket: Optional[str] = None,
        session: Optional[requests.Session] = None,
        console: Optional[Console] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._bucket = bucket or self._settings.media_bucket
        self._base_url = self._settings.storage_base_url
        self._timeout = self._settings.request_timeout_seconds
        self._session = session or requests.Session()
        self._console = console or Console()

        service_key = self._settings.supabase_service_key.get_secret_value()
        self._headers: Dict[str, str] = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
        }

    @property
    def bucket(self) -> str:
        return self._bucket

    # ------------------------------------------------------------------ #
    # ObjectStore API                                                    #
    # ------------------------------------------------------------------ #
    def exists(self, path: str) -> bool:
        folder, name = split_object_path(path)
        if not name:
            return False

        try:
            response = self._session.post(
                f"{self._base_url}/object/list/{self._bucket}",
                headers={**self._headers, "content-type": "application/json"},
                json={"prefix": folder, "limit": LIST_PAGE_LIMIT, "offset": 0, "search": name},
                timeout=self._timeout,
            )
            response.raise_for_status()
            entries = response.json()
        except (requests.RequestException, ValueError) as exc:
            self._console.log(f"[yellow]Storage:[/yellow] existence check failed for {path}: {exc}")
            return False

        if not isinstance(entries, list):
            return False
        return any(isinstance(entry, dict) and entry.get("name") == name for entry in entries)

    def public_url(self, path: str) -> str:
        return f"{self._base_url}/object/public/{self._bucket}/{self._quote(path)}"

    def upload(self, path: str, data: bytes, *, content_type: str, overwrite: bool = False) -> None:
        headers = {
            **self._headers,
            "content-type": content_type,
            "x-upsert": "true" if overwrite else "false",
        }
        try:
            response = self._session.post(
                f"{self._base_url}/object/{self._bucket}/{self._quote(path)}",
                headers=headers,
                data=data,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            self._console.log(f"[red]Storage:[/red] upload of {path} failed: {exc}")
            raise ObjectStoreError(f"Failed to upload '{path}': {exc}") from exc

        self._console.log(f"[blue]Storage:[/blue] uploaded {path} ({len(data)} bytes, overwrite={overwrite})")

    def remove(self, paths: Sequence[str]) -> None:
        targets = [path.strip("/") for path in paths if path.strip("/")]
        if not targets:
            return

        try:
            response = self._session.delete(
                f"{self._base_url}/object/{self._bucket}",
                headers={**self._headers, "content-type": "application/json"},
                json={"prefixes": targets},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            self._console.log(f"[red]Storage:[/red] removal of {', '.join(targets)} failed: {exc}")
            raise ObjectStoreError(f"Failed to remove {targets!r}: {exc}") from exc

        self._console.log(f"[blue]Storage:[/blue] removed {', '.join(targets)}")

    def close(self) -> None:
        self._session.close()

    @staticmethod
    def _quote(path: str) -> str:
        return quote(path.strip("/"), safe="/")


class InMemoryObjectStore:
    """Dictionary-backed :class:`ObjectStore` for tests and offline runs."""

    def __init__(self, base_url: str = "memory://media", objects: Optional[Dict[str, bytes]] = None) -> None:
        self._base_url = base_url.rstrip("/")
        self.objects: Dict[str, bytes] = dict(objects or {})
        self.content_types: Dict[str, str] = {}

    def exists(self, path: str) -> bool:
        return path.strip("/") in self.objects

    def public_url(self, path: str) -> str:
        return f"{self._base_url}/{path.strip('/')}"

    def upload(self, path: str, data: bytes, *, content_type: str, overwrite: bool = False) -> None:
        key = path.strip("/")
        if key in self.objects and not overwrite:
            raise ObjectStoreError(f"Object '{key}' already exists.")
        self.objects[key] = data
        self.content_types[key] = content_type

    def remove(self, paths: Iterable[str]) -> None:
        for path in paths:
            key = path.strip("/")
            self.objects.pop(key, None)
            self.content_types.pop(key, None)

    def close(self) -> None:
        """Nothing to release."""


__all__ = [
    "InMemoryObjectStore",
    "ObjectStore",
    "ObjectStoreError",
    "SupabaseObjectStore",
    "split_object_path",
]
