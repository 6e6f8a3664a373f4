import json
from pathlib import Path
import sys
from typing import Any, Callable, Dict, List

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from logaflow_mcp.config import Config
from logaflow_mcp.gateway import FeedbackGateway


API_URL = "https://api.test/v1"
API_KEY = "test-key"


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def make_feedback(**overrides: Any) -> Dict[str, Any]:
    feedback = {
        "id": "fb-1",
        "url": "https://app.example.com/checkout",
        "type": "bug",
        "title": "Checkout crashes",
        "author": {
            "id": "u-1",
            "name": "Ada",
            "email": "ada@example.com",
            "avatar": "https://cdn.example.com/ada.png",
            "customFields": {"plan": "pro"},
        },
        "comment": "The page crashes after pressing pay",
        "assetKey": None,
        "isPrivate": False,
        "projectId": "p1",
        "sessionKey": "sess-1",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": None,
    }
    feedback.update(overrides)
    return feedback


class RecordingTransport:
    """MockTransport wrapper that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def json_bodies(self) -> List[Any]:
        return [json.loads(request.content) for request in self.requests]


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture
def config() -> Config:
    return Config(logaflow_api_key=API_KEY, logaflow_api_url=API_URL)


@pytest.fixture
def build_gateway(config):
    def _build(handler):
        recorder = RecordingTransport(handler)
        return FeedbackGateway(config, transport=recorder.transport), recorder

    return _build
