"""genderize: typed Python client for the genderize.io name-to-gender API.

The library logs only at DEBUG level through the standard ``logging`` module.
Applications wanting its JSON or text output call
:func:`genderize.logging_config.setup_logging` once at startup.
"""

from __future__ import annotations

from genderize.client import AsyncGenderizeClient, GenderizeClient
from genderize.collection import Collection
from genderize.exceptions import (
    CollectionAbort,
    DecodeError,
    EmptyHeaderError,
    EmptyLimitHeaderError,
    EmptyRemainingHeaderError,
    EmptyResetHeaderError,
    GenderizeError,
    HeaderError,
    MalformedHeaderError,
    MalformedLimitHeaderError,
    MalformedRemainingHeaderError,
    MalformedResetHeaderError,
    NothingFoundError,
    RequestTimeoutError,
    ServiceError,
    TransportError,
)
from genderize.models import (
    HDR_RATE_LIMIT_LIMIT,
    HDR_RATE_LIMIT_REMAINING,
    HDR_RATE_RESET,
    Gender,
    RateLimitInfo,
)
from genderize.request import NameEntry, Request

__all__ = [
    "AsyncGenderizeClient",
    "GenderizeClient",
    "Collection",
    "Gender",
    "RateLimitInfo",
    "Request",
    "NameEntry",
    "HDR_RATE_LIMIT_LIMIT",
    "HDR_RATE_LIMIT_REMAINING",
    "HDR_RATE_RESET",
    "GenderizeError",
    "HeaderError",
    "EmptyHeaderError",
    "EmptyLimitHeaderError",
    "EmptyRemainingHeaderError",
    "EmptyResetHeaderError",
    "MalformedHeaderError",
    "MalformedLimitHeaderError",
    "MalformedRemainingHeaderError",
    "MalformedResetHeaderError",
    "TransportError",
    "RequestTimeoutError",
    "DecodeError",
    "ServiceError",
    "NothingFoundError",
    "CollectionAbort",
]
