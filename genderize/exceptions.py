"""Exception hierarchy for the genderize client."""

from __future__ import annotations


class GenderizeError(Exception):
    """Base exception for all genderize client errors."""


# ---------------------------------------------------------------------------
# Rate-limit headers
# ---------------------------------------------------------------------------


class HeaderError(GenderizeError):
    """A rate-limit header could not be read from the response."""

    def __init__(self, header: str, message: str) -> None:
        self.header = header
        super().__init__(message)


class EmptyHeaderError(HeaderError):
    """Raised when a rate-limit header is absent or empty."""

    header_name: str = ""

    def __init__(self) -> None:
        super().__init__(self.header_name, f"empty {self.header_name} header")


class MalformedHeaderError(HeaderError):
    """Raised when a rate-limit header is not a base-10 integer."""

    header_name: str = ""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            self.header_name, f"wrong {self.header_name} header: {value!r}"
        )


class EmptyLimitHeaderError(EmptyHeaderError):
    header_name = "X-Rate-Limit-Limit"


class EmptyRemainingHeaderError(EmptyHeaderError):
    header_name = "X-Rate-Limit-Remaining"


class EmptyResetHeaderError(EmptyHeaderError):
    header_name = "X-Rate-Reset"


class MalformedLimitHeaderError(MalformedHeaderError):
    header_name = "X-Rate-Limit-Limit"


class MalformedRemainingHeaderError(MalformedHeaderError):
    header_name = "X-Rate-Limit-Remaining"


class MalformedResetHeaderError(MalformedHeaderError):
    header_name = "X-Rate-Reset"


# ---------------------------------------------------------------------------
# Network and payload
# ---------------------------------------------------------------------------


class TransportError(GenderizeError):
    """Raised when the HTTP transport fails before a response is received."""


class RequestTimeoutError(TransportError):
    """Raised when the request deadline passes before the call completes."""


class DecodeError(GenderizeError):
    """Raised when the response body is not a JSON array of gender records."""


class ServiceError(GenderizeError):
    """Raised on 4xx/5xx responses from the service."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


# ---------------------------------------------------------------------------
# Collection lookups
# ---------------------------------------------------------------------------


class NothingFoundError(GenderizeError, LookupError):
    """Raised when a collection lookup matches no record."""

    def __init__(self, message: str = "nothing found") -> None:
        super().__init__(message)


class CollectionAbort(RuntimeError):
    """Raised by the ``*_or_abort`` accessors.

    Not a :class:`GenderizeError` subclass, so ``except GenderizeError``
    does not catch it.
    The underlying error is available as :attr:`error` and ``__cause__``.
    """

    def __init__(self, error: GenderizeError) -> None:
        self.error = error
        super().__init__(str(error))
