# tests/test_api.py
from unittest.mock import AsyncMock, MagicMock

import pytest
from botbuilder.schema import InvokeResponse
from fastapi import FastAPI
from fastapi.testclient import TestClient

from communicator.api.health import router as health_router
from communicator.api.messages import router as messages_router

ACTIVITY = {
    "type": "message",
    "id": "activity-1",
    "channelId": "msteams",
    "serviceUrl": "https://smba.trafficmanager.net/amer/",
    "from": {"id": "29:user-id", "aadObjectId": "U1"},
    "recipient": {"id": "28:bot-id"},
    "conversation": {"id": "a:conversation"},
    "text": "hello",
}


@pytest.fixture
def bot_adapter():
    adapter = MagicMock()
    adapter.process_activity = AsyncMock(return_value=None)
    return adapter


@pytest.fixture
def client(bot_adapter, sent_notification_repository):
    app = FastAPI()
    app.include_router(messages_router)
    app.include_router(health_router)
    app.state.adapter = bot_adapter
    app.state.bot = MagicMock()
    app.state.sent_notification_repository = sent_notification_repository
    return TestClient(app)


def test_messages_forwards_activity_to_adapter(client, bot_adapter):
    res = client.post("/api/messages", json=ACTIVITY, headers={"Authorization": "Bearer token"})

    assert res.status_code == 201
    activity, auth_header, logic = bot_adapter.process_activity.await_args.args
    assert activity.text == "hello"
    assert activity.from_property.aad_object_id == "U1"
    assert auth_header == "Bearer token"
    assert logic is client.app.state.bot.on_turn


def test_messages_returns_invoke_response(client, bot_adapter):
    bot_adapter.process_activity.return_value = InvokeResponse(status=200, body={"ok": True})

    res = client.post("/api/messages", json=dict(ACTIVITY, type="invoke"))

    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_messages_rejects_non_json(client, bot_adapter):
    res = client.post("/api/messages", content="hello", headers={"Content-Type": "text/plain"})

    assert res.status_code == 415
    bot_adapter.process_activity.assert_not_awaited()


def test_messages_unauthorized(client, bot_adapter):
    bot_adapter.process_activity.side_effect = PermissionError("Unauthorized Access. Request is not authorized")

    res = client.post("/api/messages", json=ACTIVITY)

    assert res.status_code == 401


def test_health(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "table": "SentNotificationData"}
