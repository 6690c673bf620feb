import json

import httpx
import pytest

from aitask.config import Settings
from aitask.llm.errors import TransportError


class DummyReporter:
    """Records status reports instead of logging them."""

    def __init__(self):
        self.records: list[tuple[str, str, str]] = []

    def report(self, agent, operation, phase):
        self.records.append((agent, operation, phase.value))


class ScriptedTransport:
    """ChatTransport stub: pops one scripted outcome per call.

    An outcome is either a string (returned) or an exception (raised).
    """

    def __init__(self, *outcomes):
        self._outcomes = list(outcomes)
        self.calls: list[list] = []

    async def complete(self, messages):
        self.calls.append(list(messages))
        if not self._outcomes:
            raise AssertionError("ScriptedTransport called more times than scripted")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def completion_body(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def settings():
    return Settings(
        api_key="sk-test",
        organization_id="org-test",
        model="gpt-3.5-turbo",
        base_url="https://api.openai.com/v1",
        timeout_s=5.0,
    )


@pytest.fixture
def reporter():
    return DummyReporter()


@pytest.fixture
def scripted_transport():
    """Fixture: factory for ScriptedTransport."""

    return ScriptedTransport


@pytest.fixture
def transport_error():
    def _factory(message="connection reset"):
        return TransportError(message)

    return _factory


@pytest.fixture
def mock_http():
    """Fixture: factory building an httpx.AsyncClient on a MockTransport.

    `handler` receives each httpx.Request and returns an httpx.Response (or
    raises). Every request is recorded on the returned list, with its JSON
    body decoded.
    """

    def _factory(handler):
        seen: list[dict] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            seen.append(
                {
                    "method": request.method,
                    "url": str(request.url),
                    "headers": request.headers,
                    "json": json.loads(request.content or b"null"),
                }
            )
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_handle))
        return client, seen

    return _factory


@pytest.fixture
def chat_body():
    """Fixture: build a chat.completion response body with the given content."""

    return completion_body
