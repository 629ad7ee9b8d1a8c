"""Records decoded from genderize.io responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping

import httpx
import pydantic
from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

from genderize.exceptions import (
    DecodeError,
    EmptyHeaderError,
    EmptyLimitHeaderError,
    EmptyRemainingHeaderError,
    EmptyResetHeaderError,
    MalformedHeaderError,
    MalformedLimitHeaderError,
    MalformedRemainingHeaderError,
    MalformedResetHeaderError,
)

HDR_RATE_LIMIT_LIMIT = "X-Rate-Limit-Limit"
HDR_RATE_LIMIT_REMAINING = "X-Rate-Limit-Remaining"
HDR_RATE_RESET = "X-Rate-Reset"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Gender(BaseModel):
    """One result row: a name and the service's guess for it."""

    model_config = ConfigDict(frozen=True)

    name: str
    gender: str = ""
    # Nominally within [0, 1] and non-negative; not enforced so one odd row
    # does not fail the whole batch
    probability: float = 0.0
    count: int = 0

    @field_validator("gender", mode="before")
    @classmethod
    def _null_gender(cls, value: object) -> object:
        # Unknown names come back as ``"gender": null``
        return "" if value is None else value


_GENDER_LIST = TypeAdapter(list[Gender])
_GENDER_LIST_OR_ONE = TypeAdapter(list[Gender] | Gender)


def decode_genders(body: bytes | str, *, allow_single: bool = False) -> list[Gender]:
    """Decode a response body into gender records.

    With *allow_single*, a bare record object (the single-name response
    shape) is accepted and returned as a one-element list.

    Raises :class:`DecodeError` when the body is not valid JSON or not an
    array of records.
    """
    try:
        if allow_single:
            decoded = _GENDER_LIST_OR_ONE.validate_json(body)
            return decoded if isinstance(decoded, list) else [decoded]
        return _GENDER_LIST.validate_json(body)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"cannot decode response body: {exc}") from exc


def _header(headers: Mapping[str, str], name: str) -> str:
    if isinstance(headers, httpx.Headers):
        # First value wins for repeated headers; .get() would join them
        values = headers.get_list(name)
        return values[0] if values else ""
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value or ""


def _parse_int(
    headers: Mapping[str, str],
    name: str,
    empty: type[EmptyHeaderError],
    malformed: type[MalformedHeaderError],
) -> int:
    raw = _header(headers, name)
    if not raw:
        raise empty()
    if not _INTEGER_RE.fullmatch(raw):
        raise malformed(raw)
    return int(raw)


@dataclass(frozen=True)
class RateLimitInfo:
    """Quota snapshot reported by the service on every response."""

    limit: int
    remaining: int
    reset: timedelta

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimitInfo:
        """Parse the ``X-Rate-*`` headers.

        Each header is checked in turn (limit, remaining, reset); the first
        absent or non-integer one raises its matching ``Empty*`` or
        ``Malformed*`` error.
        """
        limit = _parse_int(
            headers,
            HDR_RATE_LIMIT_LIMIT,
            EmptyLimitHeaderError,
            MalformedLimitHeaderError,
        )
        remaining = _parse_int(
            headers,
            HDR_RATE_LIMIT_REMAINING,
            EmptyRemainingHeaderError,
            MalformedRemainingHeaderError,
        )
        reset = _parse_int(
            headers,
            HDR_RATE_RESET,
            EmptyResetHeaderError,
            MalformedResetHeaderError,
        )
        return cls(limit=limit, remaining=remaining, reset=timedelta(seconds=reset))
