"""Async and sync HTTP clients for the genderize.io API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from genderize.collection import Collection
from genderize.config import settings
from genderize.exceptions import RequestTimeoutError, ServiceError, TransportError
from genderize.models import RateLimitInfo, decode_genders
from genderize.request import Request
from genderize.request_context import bind_request_id

logger = logging.getLogger(__name__)


def _parse_detail(response: httpx.Response) -> str:
    """Extract the ``error`` field from a JSON error body."""
    try:
        body = response.json()
        return body.get("error", response.text)
    except Exception:
        return response.text


def _client_kwargs(timeout: float | None, transport: Any) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "timeout": settings.genderize_timeout if timeout is None else timeout,
    }
    if transport is not None:
        kwargs["transport"] = transport
    return kwargs


def _request_timeout(request: Request) -> Any:
    if request.deadline is None:
        return httpx.USE_CLIENT_DEFAULT
    return request.deadline


def _wrap_transport_error(exc: httpx.TransportError) -> TransportError:
    if isinstance(exc, httpx.TimeoutException):
        return RequestTimeoutError(str(exc) or "request timed out")
    return TransportError(str(exc) or type(exc).__name__)


def _build_collection(response: httpx.Response, *, allow_single: bool = False) -> Collection:
    """Turn a raw response into a :class:`Collection`.

    Rate-limit headers are checked first; a header error aborts the call
    before the body is looked at.
    """
    rate_limit = RateLimitInfo.from_headers(response.headers)
    if response.status_code >= 400:
        raise ServiceError(response.status_code, _parse_detail(response))
    genders = decode_genders(response.content, allow_single=allow_single)
    logger.debug(
        "Decoded %d records, %d/%d requests remaining",
        len(genders),
        rate_limit.remaining,
        rate_limit.limit,
    )
    return Collection(genders, rate_limit)


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncGenderizeClient:
    """Async client for genderize.io (backed by ``httpx.AsyncClient``)."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.genderize_base_url
        self.api_key = settings.genderize_api_key if api_key is None else api_key
        self._client = httpx.AsyncClient(**_client_kwargs(timeout, transport))
        self.last_rate_limit: RateLimitInfo | None = None

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncGenderizeClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # -- public methods ------------------------------------------------------

    def info(self) -> RateLimitInfo | None:
        """Rate-limit snapshot from the last successful call, if any."""
        return self.last_rate_limit

    async def execute(self, request: Request) -> Collection:
        """Send *request* and decode the response.

        ``last_rate_limit`` is only updated when the whole call succeeds.
        Task cancellation propagates unchanged.
        """
        return await self._execute(request)

    async def _execute(self, request: Request, *, allow_single: bool = False) -> Collection:
        with bind_request_id():
            logger.debug("Looking up %d names at %s", len(request.names), self.base_url)
            try:
                response = await self._client.get(
                    self.base_url,
                    params=request.params(self.api_key),
                    timeout=_request_timeout(request),
                )
            except httpx.TransportError as exc:
                raise _wrap_transport_error(exc) from exc
            collection = _build_collection(response, allow_single=allow_single)
            self.last_rate_limit = collection.rate_limit
            return collection

    async def check(
        self,
        *names: str,
        country_id: str | None = None,
        language_id: str | None = None,
    ) -> Collection:
        request = Request().name(*names, country_id=country_id, language_id=language_id)
        return await self._execute(request, allow_single=True)


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class GenderizeClient:
    """Synchronous client for genderize.io (backed by ``httpx.Client``).

    Not synchronized: concurrent ``execute`` calls race on
    ``last_rate_limit`` and the last one to finish wins.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.genderize_base_url
        self.api_key = settings.genderize_api_key if api_key is None else api_key
        self._client = httpx.Client(**_client_kwargs(timeout, transport))
        self.last_rate_limit: RateLimitInfo | None = None

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> GenderizeClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # -- public methods ------------------------------------------------------

    def info(self) -> RateLimitInfo | None:
        """Rate-limit snapshot from the last successful call, if any."""
        return self.last_rate_limit

    def execute(self, request: Request) -> Collection:
        """Send *request* and decode the response.

        Raises:
            TransportError: the transport failed (``RequestTimeoutError`` when
                the deadline passed).
            HeaderError: a rate-limit header was missing or malformed.
            ServiceError: the service answered with a 4xx/5xx status.
            DecodeError: the body was not a JSON array of records.

        ``last_rate_limit`` is only updated when the whole call succeeds.
        """
        return self._execute(request)

    def _execute(self, request: Request, *, allow_single: bool = False) -> Collection:
        with bind_request_id():
            logger.debug("Looking up %d names at %s", len(request.names), self.base_url)
            try:
                response = self._client.get(
                    self.base_url,
                    params=request.params(self.api_key),
                    timeout=_request_timeout(request),
                )
            except httpx.TransportError as exc:
                raise _wrap_transport_error(exc) from exc
            collection = _build_collection(response, allow_single=allow_single)
            self.last_rate_limit = collection.rate_limit
            return collection

    def check(
        self,
        *names: str,
        country_id: str | None = None,
        language_id: str | None = None,
    ) -> Collection:
        """Like ``execute(Request().name(*names, ...))``, but also accepts the
        single-object body the service returns for a lone name.
        """
        request = Request().name(*names, country_id=country_id, language_id=language_id)
        return self._execute(request, allow_single=True)
