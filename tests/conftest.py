"""
Shared fixtures: a stubbed Cerebras endpoint behind httpx.MockTransport.
"""

import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from bodha.main import create_app
from bodha.settings import Settings


def completion(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "llama3.1-8b",
        "choices": [
            {"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}},
        ],
    }


class StubUpstream:
    """Records every payload it receives and answers with a canned reply."""

    def __init__(self, reply: str = "R", status: int = 200, body=None, delay: float = 0.0):
        self.reply = reply
        self.status = status
        self.body = body
        self.delay = delay
        self.requests = []
        self.headers = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        self.headers.append(request.headers)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.status != 200:
            return httpx.Response(self.status, text=self.body or "")
        if self.body is not None:
            return httpx.Response(200, content=self.body)
        return httpx.Response(200, json=completion(self.reply))


@pytest.fixture
def settings():
    return Settings(api_key="test-key")


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def app(settings, upstream):
    return create_app(settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def transcript(app):
    return app.state.chat.transcript
