"""Correlation ID for log lines emitted during one ``execute`` call."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

request_id_var: ContextVar[str] = ContextVar("genderize_request_id", default="")


def generate_request_id() -> str:
    """Return a new 32-character hex correlation ID."""
    return uuid.uuid4().hex


def get_request_id() -> str:
    return request_id_var.get()


@contextmanager
def bind_request_id(request_id: str | None = None) -> Iterator[str]:
    """Bind a correlation ID (a fresh one by default) for the duration of the block."""
    request_id = request_id or generate_request_id()
    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)
