"""Builder for a batched name lookup."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NameEntry:
    name: str
    country_id: str | None = None
    language_id: str | None = None


class Request:
    """Mutable accumulator of names to look up in one call.

    Methods return the request itself so calls can be chained::

        req = Request(timeout=5).name("Alice", "John").name("Kim", country_id="KR")

    Names are not validated here; an empty request is still sent and the
    service's own error response is surfaced.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._entries: list[NameEntry] = []
        self._api_key = ""
        self._timeout = timeout

    def name(
        self,
        *names: str,
        country_id: str | None = None,
        language_id: str | None = None,
    ) -> Request:
        """Append *names*, each carrying the given country/language hints."""
        for name in names:
            self._entries.append(NameEntry(name, country_id, language_id))
        return self

    def api_key(self, key: str) -> Request:
        """Override the client's API key for this call. ``""`` clears the override."""
        self._api_key = key
        return self

    def timeout(self, seconds: float | None) -> Request:
        self._timeout = seconds
        return self

    @property
    def names(self) -> tuple[NameEntry, ...]:
        return tuple(self._entries)

    @property
    def deadline(self) -> float | None:
        """Per-call timeout in seconds, or *None* to use the client default."""
        return self._timeout

    def params(self, default_api_key: str = "") -> list[tuple[str, str]]:
        """Build the query parameters for this request.

        ``country_id[]`` and ``language_id[]`` are index-aligned with
        ``name[]``: once any entry carries a hint, every entry gets a slot
        for it, empty where it has none. ``apikey`` is omitted entirely when
        no key is set.
        """
        params: list[tuple[str, str]] = [("name[]", e.name) for e in self._entries]
        if any(e.country_id for e in self._entries):
            params.extend(("country_id[]", e.country_id or "") for e in self._entries)
        if any(e.language_id for e in self._entries):
            params.extend(("language_id[]", e.language_id or "") for e in self._entries)
        api_key = self._api_key or default_api_key
        if api_key:
            params.append(("apikey", api_key))
        return params

    def __repr__(self) -> str:
        names = ", ".join(e.name for e in self._entries)
        return f"Request([{names}], timeout={self._timeout})"
