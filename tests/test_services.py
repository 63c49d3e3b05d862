"""Unit tests for EventService.

These test the record/image sequencing and domain error mapping against
in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timezone

import pytest

from events.domain import EventFields, ImageAsset
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    MediaDeleteError,
    MediaUploadError,
    PersistenceError,
)
from events.services.event_service import EVENT_IMAGE_FOLDER, EventService, merge_fields

MISSING_ID = "1c6f7a52-0d39-4d53-9b69-5b1a3bd0f2d4"
OLD_IMAGE = ImageAsset(url="https://cdn.example.com/old.png", image_id="event/images/old")


class TestListAndGet:
    """Tests for read operations."""

    def test_list_events_returns_everything(self, service, store):
        store.add("First")
        store.add("Second")

        titles = {event.title for event in service.list_events()}

        assert titles == {"First", "Second"}

    def test_list_events_propagates_storage_failure(self, service, store):
        store.fail = True

        with pytest.raises(PersistenceError):
            service.list_events()

    def test_get_event_invalid_id_raises_error(self, service):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, service):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError) as excinfo:
            service.get_event(MISSING_ID)
        assert excinfo.value.event_id == MISSING_ID


class TestCreateEvent:
    """Tests for create_event."""

    def test_without_file_leaves_image_unset(self, service, calls):
        event = service.create_event(EventFields(title="Launch", status="draft"))

        assert event.image is None
        assert event.image_url is None and event.image_id is None
        assert calls == [("insert_event", "Launch")]

    def test_uploads_once_before_persisting(self, service, calls, image_file):
        service.create_event(EventFields(title="Launch"), image_file)

        assert calls == [("upload", EVENT_IMAGE_FOLDER), ("insert_event", "Launch")]

    def test_upload_failure_persists_nothing(self, service, store, media, calls, image_file):
        media.fail_upload = True

        with pytest.raises(MediaUploadError):
            service.create_event(EventFields(title="Launch"), image_file)

        assert store.events == {}
        assert calls == [("upload", EVENT_IMAGE_FOLDER)]

    def test_launch_example(self, service, media, image_file):
        media.next_asset = ImageAsset(url="https://cdn/x", image_id="abc123")

        event = service.create_event(EventFields(title="Launch", status="draft"), image_file)

        assert (event.title, event.status) == ("Launch", "draft")
        assert (event.image_url, event.image_id) == ("https://cdn/x", "abc123")

    def test_round_trip_through_get(self, service, media, image_file):
        start = datetime(2026, 11, 1, 9, 0, tzinfo=timezone.utc)
        end = datetime(2026, 11, 1, 17, 0, tzinfo=timezone.utc)
        fields = EventFields(
            title="Launch",
            status="published",
            description="Product launch",
            date_start=start,
            date_end=end,
        )

        created = service.create_event(fields, image_file)
        fetched = service.get_event(str(created.id))

        assert EventFields(
            title=fetched.title,
            status=fetched.status,
            description=fetched.description,
            date_start=fetched.date_start,
            date_end=fetched.date_end,
        ) == fields
        assert fetched.image == created.image
        assert fetched.image_id is not None

    def test_uses_configured_folder(self, store, media, calls, image_file):
        service = EventService(store=store, media=media, image_folder="tenant-a/events")

        service.create_event(EventFields(title="Launch"), image_file)

        assert calls[0] == ("upload", "tenant-a/events")

    def test_storage_failure_after_upload_propagates(self, service, store, image_file):
        store.fail = True

        with pytest.raises(PersistenceError):
            service.create_event(EventFields(title="Launch"), image_file)


class TestUpdateEvent:
    """Tests for update_event."""

    def test_not_found_raises_error(self, service):
        with pytest.raises(EventNotFoundError):
            service.update_event(MISSING_ID, EventFields(title="New"))

    def test_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.update_event("42", EventFields(title="New"))

    def test_supplied_fields_overwrite(self, service, store):
        existing = store.add("Old", status="draft", description="Before")

        updated = service.update_event(
            str(existing.id), EventFields(title="New", description="After")
        )

        assert updated.title == "New"
        assert updated.description == "After"
        assert updated.status == "draft"

    def test_empty_fields_is_a_no_op(self, service, store):
        existing = store.add(
            "Old",
            status="draft",
            description="Before",
            date_start=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )

        updated = service.update_event(str(existing.id), EventFields())

        for name in ("title", "status", "description", "date_start", "date_end", "image"):
            assert getattr(updated, name) == getattr(existing, name)

    def test_falsy_values_count_as_absent(self, service, store):
        existing = store.add("Old", status="draft", description="Before")

        updated = service.update_event(
            str(existing.id), EventFields(title="", status="", description="")
        )

        assert (updated.title, updated.status, updated.description) == ("Old", "draft", "Before")

    def test_deletes_old_image_before_uploading_new(self, service, store, calls, image_file):
        existing = store.add("Old", image=OLD_IMAGE)

        updated = service.update_event(str(existing.id), EventFields(), image_file)

        media_calls = [call for call in calls if call[0] in ("delete", "upload", "save_event")]
        assert media_calls == [
            ("delete", OLD_IMAGE.image_id),
            ("upload", EVENT_IMAGE_FOLDER),
            ("save_event", existing.id),
        ]
        assert updated.image is not None
        assert updated.image != OLD_IMAGE

    def test_without_previous_image_only_uploads(self, service, store, calls, image_file):
        existing = store.add("Old")

        updated = service.update_event(str(existing.id), EventFields(), image_file)

        assert not any(call[0] == "delete" for call in calls)
        assert updated.image_id is not None

    def test_without_file_keeps_image(self, service, store, calls):
        existing = store.add("Old", image=OLD_IMAGE)

        updated = service.update_event(str(existing.id), EventFields(title="New"))

        assert updated.image == OLD_IMAGE
        assert not any(call[0] in ("delete", "upload") for call in calls)

    def test_delete_failure_aborts_before_upload(self, service, store, media, calls, image_file):
        existing = store.add("Old", image=OLD_IMAGE)
        media.fail_delete = True

        with pytest.raises(MediaDeleteError):
            service.update_event(str(existing.id), EventFields(title="New"), image_file)

        assert not any(call[0] in ("upload", "save_event") for call in calls)
        assert store.events[existing.id] == existing

    def test_upload_failure_after_delete_persists_nothing(
        self, service, store, media, calls, image_file
    ):
        existing = store.add("Old", image=OLD_IMAGE)
        media.fail_upload = True

        with pytest.raises(MediaUploadError):
            service.update_event(str(existing.id), EventFields(title="New"), image_file)

        assert ("delete", OLD_IMAGE.image_id) in calls
        assert not any(call[0] == "save_event" for call in calls)
        assert store.events[existing.id] == existing


class TestDeleteEvent:
    """Tests for delete_event."""

    def test_removes_record_and_returns_id(self, service, store):
        existing = store.add("Old")

        deleted_id = service.delete_event(str(existing.id))

        assert deleted_id == existing.id
        assert existing.id not in store.events

    def test_missing_id_never_reaches_store_delete(self, service, calls):
        with pytest.raises(EventNotFoundError):
            service.delete_event(MISSING_ID)

        assert not any(call[0] == "delete_event" for call in calls)

    def test_invalid_id_raises_error(self, service, calls):
        with pytest.raises(InvalidEventIdError):
            service.delete_event("not-a-uuid")

        assert calls == []

    def test_leaves_remote_image_in_place(self, service, store, calls):
        existing = store.add("Old", image=OLD_IMAGE)

        service.delete_event(str(existing.id))

        assert not any(call[0] == "delete" for call in calls)


class TestMergeFields:
    """Tests for the update merge rule."""

    def test_zero_and_false_are_treated_as_absent(self, store):
        existing = store.add("Old", status="draft")

        merged = merge_fields(existing, EventFields(title=0, status=False))

        assert (merged.title, merged.status) == ("Old", "draft")
