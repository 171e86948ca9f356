# tests/conftest.py
"""
Shared fixtures: fake table storage, repositories wired on top of it,
and mocked collaborators for the bot.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from botbuilder.core import BotTelemetryClient

from communicator.models.sent_notification import TABLE_NAME
from communicator.repositories.sent_notification_repository import SentNotificationRepository
from communicator.repositories.team_data_repository import TeamDataRepository
from tests.fakes import FakeTableServiceClient, RecordingAdapter


@pytest.fixture
def table_service():
    service = FakeTableServiceClient()
    service.tables[TABLE_NAME] = {}
    return service


@pytest.fixture
def sent_notification_repository(table_service):
    return SentNotificationRepository(table_service)


@pytest.fixture
def team_data_repository(table_service):
    return TeamDataRepository(table_service, ensure_table_exists=True)


@pytest.fixture
def teams_data_capture():
    capture = MagicMock()
    capture.on_bot_added = AsyncMock()
    capture.on_bot_removed = AsyncMock()
    capture.on_team_information_updated = AsyncMock()
    return capture


@pytest.fixture
def telemetry_client():
    return MagicMock(spec=BotTelemetryClient)


@pytest.fixture
def adapter():
    return RecordingAdapter()
