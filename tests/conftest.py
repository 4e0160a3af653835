"""Shared request payloads, shaped like what the platform sends."""

from datetime import datetime, timezone
from typing import Any

import pytest

APP_ID = "amzn1.ask.skill.0000-test"
TS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def timestamp(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime(TS_FORMAT)


def make_intent_payload(**request_overrides: Any) -> dict[str, Any]:
    request = {
        "type": "IntentRequest",
        "requestId": "amzn1.echo-api.request.1",
        "timestamp": timestamp(datetime.now(timezone.utc)),
        "locale": "en-US",
        "intent": {
            "name": "PlayStationIntent",
            "slots": {
                "Station": {"name": "Station", "value": "jazz"},
                "Volume": {"name": "Volume"},
            },
        },
    }
    request.update(request_overrides)
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.1",
            "application": {"applicationId": APP_ID},
            "attributes": {"visits": 3},
            "user": {"userId": "amzn1.ask.account.session-user", "accessToken": "session-token"},
        },
        "context": {
            "System": {
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "api-token",
                "device": {"deviceId": "amzn1.ask.device.1"},
                "application": {"applicationId": APP_ID},
                "user": {
                    "userId": "amzn1.ask.account.context-user",
                    "permissions": {"consentToken": "consent"},
                },
            }
        },
        "request": request,
    }


def make_audio_event_payload() -> dict[str, Any]:
    """AudioPlayer events arrive without a session; identity lives in the context."""
    return {
        "version": "1.0",
        "context": {
            "System": {
                "application": {"applicationId": APP_ID},
                "user": {"userId": "amzn1.ask.account.context-user", "accessToken": "context-token"},
            }
        },
        "request": {
            "type": "AudioPlayer.PlaybackStarted",
            "requestId": "amzn1.echo-api.request.2",
            "timestamp": timestamp(datetime.now(timezone.utc)),
            "locale": "en-GB",
            "token": "track-1",
            "offsetInMilliseconds": 0,
        },
    }


@pytest.fixture
def intent_payload() -> dict[str, Any]:
    return make_intent_payload()


@pytest.fixture
def audio_event_payload() -> dict[str, Any]:
    return make_audio_event_payload()
