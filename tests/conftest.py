from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

RATE_HEADERS = {
    "X-Rate-Limit-Limit": "123",
    "X-Rate-Limit-Remaining": "456",
    "X-Rate-Reset": "789",
}

GENDERS_BODY = [
    {"name": "Alice", "gender": "female", "probability": 0.9, "count": 12345},
    {"name": "John", "gender": "male", "probability": 0.9, "count": 87890},
]


def _json_response(
    body: object,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    hdrs = dict(RATE_HEADERS) if headers is None else headers
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode(),
        headers={"content-type": "application/json", **hdrs},
    )


@pytest.fixture
def rate_headers() -> dict[str, str]:
    return dict(RATE_HEADERS)


@pytest.fixture
def genders_body() -> list[dict]:
    return [dict(g) for g in GENDERS_BODY]


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Factory for JSON responses carrying valid rate-limit headers by default."""
    return _json_response


@pytest.fixture
def genders_transport() -> httpx.MockTransport:
    return httpx.MockTransport(lambda req: _json_response(GENDERS_BODY))


@pytest.fixture
def empty_transport() -> httpx.MockTransport:
    return httpx.MockTransport(lambda req: _json_response([]))
