from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from chronicle.services.object_store import (
    InMemoryObjectStore,
    ObjectStoreError,
    SupabaseObjectStore,
    split_object_path,
)


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def _record(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._record("POST", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._record("DELETE", url, **kwargs)

    def close(self) -> None:
        self.closed = True


def _store(settings, quiet_console, session: FakeSession) -> SupabaseObjectStore:
    return SupabaseObjectStore(settings=settings, session=session, console=quiet_console)


def test_split_object_path() -> None:
    assert split_object_path("branding/hero.jpg") == ("branding", "hero.jpg")
    assert split_object_path("/a/b/c.png") == ("a/b", "c.png")
    assert split_object_path("hero.jpg") == ("", "hero.jpg")


def test_exists_lists_the_parent_folder(settings, quiet_console) -> None:
    session = FakeSession(FakeResponse(payload=[{"name": "hero.jpeg"}, {"name": "hero.jpg"}]))
    store = _store(settings, quiet_console, session)

    assert store.exists("branding/hero.jpg") is True

    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://project.supabase.co/storage/v1/object/list/media"
    assert call["json"] == {"prefix": "branding", "limit": 100, "offset": 0, "search": "hero.jpg"}
    assert call["headers"]["apikey"] == "service-role-key"
    assert call["headers"]["Authorization"] == "Bearer service-role-key"
    assert call["timeout"] == settings.request_timeout_seconds


def test_exists_requires_an_exact_name_match(settings, quiet_console) -> None:
    session = FakeSession(FakeResponse(payload=[{"name": "hero.jpg.bak"}]))

    assert _store(settings, quiet_console, session).exists("branding/hero.jpg") is False


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("offline")),
        FakeSession(FakeResponse(status_code=403, payload={"error": "denied"})),
        FakeSession(FakeResponse(invalid_json=True)),
        FakeSession(FakeResponse(payload={"unexpected": "shape"})),
    ],
)
def test_exists_never_raises(settings, quiet_console, session: FakeSession) -> None:
    assert _store(settings, quiet_console, session).exists("branding/hero.jpg") is False


def test_public_url_does_not_touch_the_network(settings, quiet_console) -> None:
    session = FakeSession()
    store = _store(settings, quiet_console, session)

    assert store.public_url("branding/hero image.png") == (
        "https://project.supabase.co/storage/v1/object/public/media/branding/hero%20image.png"
    )
    assert session.calls == []


def test_upload_sets_upsert_header(settings, quiet_console) -> None:
    session = FakeSession()
    store = _store(settings, quiet_console, session)

    store.upload("branding/hero.mp4", b"bytes", content_type="video/mp4", overwrite=True)

    call = session.calls[0]
    assert call["url"] == "https://project.supabase.co/storage/v1/object/media/branding/hero.mp4"
    assert call["headers"]["x-upsert"] == "true"
    assert call["headers"]["content-type"] == "video/mp4"
    assert call["data"] == b"bytes"


def test_upload_failure_raises(settings, quiet_console) -> None:
    session = FakeSession(FakeResponse(status_code=409))

    with pytest.raises(ObjectStoreError):
        _store(settings, quiet_console, session).upload("featured/a.jpg", b"x", content_type="image/jpeg")
    assert session.calls[0]["headers"]["x-upsert"] == "false"


def test_remove_deletes_all_paths_in_one_request(settings, quiet_console) -> None:
    session = FakeSession()
    store = _store(settings, quiet_console, session)

    store.remove(["branding/hero.jpg", "branding/hero.png"])

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["method"] == "DELETE"
    assert call["url"] == "https://project.supabase.co/storage/v1/object/media"
    assert call["json"] == {"prefixes": ["branding/hero.jpg", "branding/hero.png"]}


def test_remove_with_no_paths_is_a_no_op(settings, quiet_console) -> None:
    session = FakeSession()
    _store(settings, quiet_console, session).remove([])
    assert session.calls == []


def test_remove_failure_raises(settings, quiet_console) -> None:
    session = FakeSession(error=requests.Timeout("slow"))

    with pytest.raises(ObjectStoreError):
        _store(settings, quiet_console, session).remove(["branding/hero.mp4"])


def test_close_releases_the_session(settings, quiet_console) -> None:
    session = FakeSession()
    _store(settings, quiet_console, session).close()
    assert session.closed


def test_in_memory_store_refuses_silent_overwrite() -> None:
    store = InMemoryObjectStore()
    store.upload("featured/a.jpg", b"one", content_type="image/jpeg")

    with pytest.raises(ObjectStoreError):
        store.upload("featured/a.jpg", b"two", content_type="image/jpeg")

    store.upload("featured/a.jpg", b"two", content_type="image/jpeg", overwrite=True)
    assert store.objects["featured/a.jpg"] == b"two"
