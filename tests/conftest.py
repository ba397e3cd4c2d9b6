"""Pytest fixtures for rolectl tests."""

from __future__ import annotations

import pytest

from rolectl.application.role_manager import RoleManager
from rolectl.infrastructure.persistence.memory.unit_of_work import create_uow_factory

from tests.fakes import (
    FakeUnitOfWork,
    RecordingCacheInvalidator,
    RecordingNotificationSink,
    make_uow_factory,
)


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    return make_uow_factory(fake_uow)


@pytest.fixture
def notifications() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def cache_invalidator() -> RecordingCacheInvalidator:
    return RecordingCacheInvalidator()


@pytest.fixture
def role_manager(
    notifications: RecordingNotificationSink,
    cache_invalidator: RecordingCacheInvalidator,
) -> RoleManager:
    """RoleManager over the in-memory store, without permission validation."""
    return RoleManager(
        unit_of_work_factory=create_uow_factory(),
        notification_sink=notifications,
        cache_invalidator=cache_invalidator,
    )
