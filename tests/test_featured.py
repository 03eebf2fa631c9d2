from __future__ import annotations

from uuid import uuid4

import pytest

from chronicle.models.featured import FeaturedCard
from chronicle.models.video import Video, VideoStatus, VideoVisibility
from chronicle.services.featured import FeaturedContentService, FeaturedItemValidationError, ThumbnailUpload
from chronicle.services.object_store import ObjectStoreError


@pytest.fixture()
def service(store, featured_repository, video_repository, settings, quiet_console) -> FeaturedContentService:
    return FeaturedContentService(
        store,
        featured_repository=featured_repository,
        video_repository=video_repository,
        settings=settings,
        console=quiet_console,
    )


def _video(slug: str, duration=None) -> Video:
    return Video(
        id=uuid4(),
        title=slug.replace("-", " ").title(),
        slug=slug,
        description="An episode",
        duration=duration,
        thumbnail_url=f"https://cdn.example.org/{slug}.jpg",
        status=VideoStatus.READY,
        visibility=VideoVisibility.PUBLIC,
    )


def test_add_item_normalises_the_video_reference(service: FeaturedContentService) -> None:
    item = service.add_item("https://youtu.be/dQw4w9WgXcQ", "  The Fall of Rome ", "A short history")

    assert item.id is not None
    assert item.youtube_id == "dQw4w9WgXcQ"
    assert item.title == "The Fall of Rome"
    assert item.watch_url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert item.thumbnail_url is None
    assert item.display_thumbnail_url == "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"


@pytest.mark.parametrize(
    ("url", "title", "description"),
    [
        ("not a video", "Title", "Description"),
        ("", "Title", "Description"),
        ("dQw4w9WgXcQ", "   ", "Description"),
        ("dQw4w9WgXcQ", "Title", ""),
    ],
)
def test_add_item_requires_all_fields(service: FeaturedContentService, featured_repository, url, title, description) -> None:
    with pytest.raises(FeaturedItemValidationError, match="Valid YouTube URL, title and description are required."):
        service.add_item(url, title, description)
    assert featured_repository.rows == []


def test_add_item_stores_long_video_ids(service: FeaturedContentService, featured_repository) -> None:
    long_id = "a" * 80

    item = service.add_item(f"https://www.youtube.com/watch?v={long_id}", "Title", "Description")

    assert item.youtube_id == long_id
    assert service.add_item(long_id, "Again", "Bare ID").youtube_id == long_id
    assert len(featured_repository.rows) == 2


def test_add_item_uploads_thumbnail_without_overwrite(service: FeaturedContentService, store) -> None:
    thumbnail = ThumbnailUpload(file_name="Cover.PNG", data=b"png", content_type="image/png")

    item = service.add_item("dQw4w9WgXcQ", "Title", "Description", thumbnail=thumbnail)

    (path,) = store.objects.keys()
    assert path.startswith("featured/")
    assert path.endswith(".png")
    assert item.thumbnail_url == f"https://cdn.example.org/media/{path}"
    assert item.display_thumbnail_url == item.thumbnail_url


def test_failed_thumbnail_upload_inserts_nothing(service: FeaturedContentService, featured_repository, store) -> None:
    def failing_upload(*args, **kwargs):
        raise ObjectStoreError("bucket unavailable")

    store.upload = failing_upload
    thumbnail = ThumbnailUpload(file_name="cover.jpg", data=b"jpg", content_type="image/jpeg")

    with pytest.raises(ObjectStoreError):
        service.add_item("dQw4w9WgXcQ", "Title", "Description", thumbnail=thumbnail)
    assert featured_repository.rows == []


def test_thumbnail_extension_defaults_to_jpg() -> None:
    assert ThumbnailUpload(file_name="cover", data=b"", content_type="image/jpeg").extension == "jpg"
    assert ThumbnailUpload(file_name="cover.", data=b"", content_type="image/jpeg").extension == "jpg"
    assert ThumbnailUpload(file_name="a.b.WEBP", data=b"", content_type="image/webp").extension == "webp"


def test_table_is_pruned_to_the_configured_limit(service: FeaturedContentService, featured_repository, settings) -> None:
    for index in range(settings.featured_limit + 3):
        service.add_item(f"video{index:08d}", f"Title {index}", "Description")

    items = service.list_items()
    assert len(featured_repository.rows) == settings.featured_limit
    assert items[0].youtube_id == f"video{settings.featured_limit + 2:08d}"
    assert items[-1].youtube_id == "video00000003"


def test_remove_item(service: FeaturedContentService) -> None:
    item = service.add_item("dQw4w9WgXcQ", "Title", "Description")

    assert service.remove_item(item.id) is True
    assert service.remove_item(item.id) is False
    assert service.list_items() == []


def test_homepage_puts_featured_items_before_published_videos(service: FeaturedContentService, video_repository) -> None:
    video_repository.videos = [_video(f"episode-{index}", duration=125) for index in range(10)]
    older = service.add_item("olderVideo01", "Older", "Description")
    newer = service.add_item("newerVideo01", "Newer", "Description")

    cards = service.homepage_cards()

    assert len(cards) == 6
    assert [card.id for card in cards[:2]] == [f"featured-{newer.id}", f"featured-{older.id}"]
    assert cards[0].href == "https://www.youtube.com/watch?v=newerVideo01"
    assert cards[0].is_external
    assert cards[2].href == "/video/episode-0"
    assert not cards[2].is_external
    assert cards[2].duration_label == "2m 5s"
    assert video_repository.requested_limits == [4]


def test_homepage_skips_video_query_when_featured_items_fill_the_grid(
    service: FeaturedContentService, video_repository
) -> None:
    for index in range(8):
        service.add_item(f"video{index:08d}", f"Title {index}", "Description")

    cards = service.homepage_cards(limit=3)

    assert len(cards) == 3
    assert video_repository.requested_limits == []


@pytest.mark.parametrize(("duration", "label"), [(None, None), (0, None), (60, "1m"), (59, "0m 59s"), (3725, "62m 5s")])
def test_duration_label(duration, label) -> None:
    card = FeaturedCard(id="x", title="t", href="/video/x", duration=duration)
    assert card.duration_label == label
