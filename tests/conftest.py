"""Shared pytest fixtures for the gale test suite.

Guidelines
----------
* No internet access in any test; HTTP goes through ``httpx.MockTransport``.
* Files are only written below ``tmp_path``.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from gale import cli
from gale.core.github import GitHubClient

Handler = Callable[[httpx.Request], httpx.Response]


def _release_node() -> dict[str, Any]:
    """One release as the GraphQL API returns it: unnamed, 3 assets reported, 1 returned."""
    return {
        "id": "R_1",
        "name": None,
        "tagName": "v4.5.0",
        "publishedAt": "2025-01-01T00:00:00Z",
        "isPrerelease": False,
        "isDraft": False,
        "url": "https://github.com/Typeflu/gale/releases/tag/v4.5.0",
        "description": "notes",
        "releaseAssets": {
            "totalCount": 3,
            "nodes": [
                {
                    "id": "RA_1",
                    "name": "gale.zip",
                    "size": 1024,
                    "downloadUrl": "https://example.com/gale.zip",
                    "contentType": "application/zip",
                }
            ],
        },
    }


@pytest.fixture
def release_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a successful releases query response body."""

    def build(
        total_count: int = 1, nodes: list[dict[str, Any]] | None = None
    ) -> dict[str, Any]:
        if nodes is None:
            nodes = [_release_node()]
        return {
            "data": {"repository": {"releases": {"totalCount": total_count, "nodes": nodes}}}
        }

    return build


@pytest.fixture
def mock_client() -> Callable[..., GitHubClient]:
    """Factory for a GitHubClient whose requests go to *handler*."""

    def build(handler: Handler, token: str = "secret", timeout: float = 30.0) -> GitHubClient:
        return GitHubClient(
            token=token, timeout=timeout, transport=httpx.MockTransport(handler)
        )

    return build


@pytest.fixture
def use_handler(monkeypatch: pytest.MonkeyPatch) -> Callable[[Handler], list[httpx.Request]]:
    """Route the CLI's GitHubClient through a mock handler; returns seen requests."""

    def install(handler: Handler) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        def factory(**kwargs: Any) -> GitHubClient:
            return GitHubClient(transport=httpx.MockTransport(recording), **kwargs)

        monkeypatch.setattr(cli, "GitHubClient", factory)
        return seen

    return install


class _TrickleStream(httpx.SyncByteStream):
    def __init__(self, data: bytes, chunk_size: int, delay: float) -> None:
        self._data = data
        self._chunk_size = chunk_size
        self._delay = delay

    def __iter__(self):
        for start in range(0, len(self._data), self._chunk_size):
            time.sleep(self._delay)
            yield self._data[start : start + self._chunk_size]


@pytest.fixture
def trickle_response() -> Callable[..., httpx.Response]:
    """Factory for a 200 response whose body arrives in delayed chunks."""

    def build(data: bytes, chunk_size: int = 64, delay: float = 0.0) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"Content-Type": "application/json"},
            stream=_TrickleStream(data, chunk_size, delay),
        )

    return build
