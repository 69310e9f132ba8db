"""Shared fixtures for the Items API tests."""

import pytest

from helpers import RecordingLogger, StubRepository
from items_api.app.core.context import Context
from items_api.app.services.item_service import ItemService, ServiceDependencies


@pytest.fixture
def ctx() -> Context:
    return Context(request_id="test-request")


@pytest.fixture
def log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def repo() -> StubRepository:
    return StubRepository()


@pytest.fixture
def service(log: RecordingLogger, repo: StubRepository) -> ItemService:
    return ItemService(ServiceDependencies(log=log, repository=repo))
