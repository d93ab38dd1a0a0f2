"""Shared fixtures for tests; HTTP is served by httpx.MockTransport, no network."""

from __future__ import annotations

import json

import httpx
import pytest

from providers.community_client import CommunityClient

SAMPLE_BODY = {
    "metricData": {
        "metrics": ["CapRealUSD"],
        "series": [
            {
                "time": "2021-04-22T00:00:00.000Z",
                "values": ["357839722701.057414591381506310739636"],
            },
            {
                "time": "2021-04-23T00:00:00.000Z",
                "values": ["358112004810.5"],
            },
        ],
    }
}


@pytest.fixture
def sample_body() -> bytes:
    return json.dumps(SAMPLE_BODY).encode()


@pytest.fixture
def captured() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(captured, sample_body):
    """Build a CommunityClient whose transport answers with a canned response."""

    def _make(
        status_code: int = 200,
        content: bytes | None = None,
        api_key: str = "",
    ) -> CommunityClient:
        body = sample_body if content is None else content

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(status_code, content=body)

        return CommunityClient(api_key=api_key, transport=httpx.MockTransport(handler))

    return _make
