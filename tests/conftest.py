"""Pytest configuration and shared fixtures."""

import io

import pytest
from rest_framework.test import APIClient

from events.services.event_service import EventService
from tests.fakes import FakeMediaStore, InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def store(calls) -> InMemoryEventStore:
    return InMemoryEventStore(calls)


@pytest.fixture
def media(calls) -> FakeMediaStore:
    return FakeMediaStore(calls)


@pytest.fixture
def service(store, media) -> EventService:
    return EventService(store=store, media=media)


@pytest.fixture
def image_file() -> io.BytesIO:
    upload = io.BytesIO(b"\x89PNG\r\n\x1a\nfake")
    upload.name = "logo.png"
    return upload
