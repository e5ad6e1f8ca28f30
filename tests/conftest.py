"""Pytest configuration and shared fixtures.

Usage Guide:
- `recorder` captures every outbound request and replays queued responses
- `settings` is an isolated Settings instance (no .env, no credentials)
- `connection` / `bitbucket` are wired to the recorder's MockTransport
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from bitbucket_rest_api.api import Connection
from bitbucket_rest_api.client import Bitbucket
from bitbucket_rest_api.config import Settings


# -----------------------------------------------------------------------------
# Recording Transport
# -----------------------------------------------------------------------------
class RequestRecorder:
    """Collects requests sent through an httpx.MockTransport.

    Responses are served from a queue; when it is empty the default
    response (200 with an empty JSON object) is returned.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def queue_json(self, payload: Any, status_code: int = 200) -> None:
        self._responses.append(httpx.Response(status_code, json=payload))

    def queue_text(self, text: str, status_code: int = 200) -> None:
        self._responses.append(
            httpx.Response(status_code, text=text, headers={"content-type": "text/plain"})
        )

    def queue_empty(self, status_code: int = 204) -> None:
        self._responses.append(httpx.Response(status_code))

    def queue_error(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self._responses.append(_raise)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        response = self._responses.pop(0)
        if callable(response):
            return response(request)
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def recorder() -> RequestRecorder:
    """Fresh request recorder for each test."""
    return RequestRecorder()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        bitbucket_endpoint="https://api.bitbucket.org",
        bitbucket_api_version="1.0",
        bitbucket_username="",
        bitbucket_password="",
        bitbucket_token="",
        default_user=None,
        default_repo=None,
    )


@pytest.fixture
async def connection(recorder: RequestRecorder) -> AsyncIterator[Connection]:
    """Connection routed through the recorder."""
    conn = Connection("https://api.bitbucket.org", transport=recorder.transport)
    yield conn
    await conn.close()


@pytest.fixture
async def bitbucket(settings: Settings, recorder: RequestRecorder) -> AsyncIterator[Bitbucket]:
    """Top-level client routed through the recorder."""
    client = Bitbucket(settings, transport=recorder.transport)
    yield client
    await client.close()
