"""Result set returned by a single lookup call."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Iterable, Iterator

from genderize.exceptions import CollectionAbort, NothingFoundError
from genderize.models import Gender, RateLimitInfo


def _unwrap(result: Gender | NothingFoundError) -> Gender:
    if isinstance(result, NothingFoundError):
        raise result
    return result


def _unwrap_or_abort(result: Gender | NothingFoundError) -> Gender:
    if isinstance(result, NothingFoundError):
        raise CollectionAbort(result) from result
    return result


class Collection:
    """Gender records in the order the service returned them, plus the
    rate-limit snapshot of the response that carried them.

    The order is not guaranteed to match the order of names in the request.
    A collection is read-only once built.

    Each accessor comes in two flavours. ``find``/``first`` raise
    :class:`NothingFoundError` for callers that treat absence as routine;
    ``find_or_abort``/``first_or_abort``/``each_or_abort`` raise
    :class:`CollectionAbort` for callers that treat it as a broken invariant.
    """

    def __init__(self, genders: Iterable[Gender], rate_limit: RateLimitInfo) -> None:
        self._genders: tuple[Gender, ...] = tuple(genders)
        self._rate_limit = rate_limit

    def __len__(self) -> int:
        return len(self._genders)

    def __iter__(self) -> Iterator[Gender]:
        return iter(self._genders)

    def __repr__(self) -> str:
        names = ", ".join(g.name for g in self._genders)
        return f"Collection([{names}], {self._rate_limit!r})"

    # -- lookups -------------------------------------------------------------

    def _lookup(self, name: str) -> Gender | NothingFoundError:
        for gender in self._genders:
            if gender.name == name:
                return gender
        return NothingFoundError(f"nothing found for name {name!r}")

    def _head(self) -> Gender | NothingFoundError:
        if not self._genders:
            return NothingFoundError("collection is empty")
        return self._genders[0]

    def length(self) -> int:
        return len(self._genders)

    def find(self, name: str) -> Gender:
        """Return the first record whose name equals *name* (case-sensitive)."""
        return _unwrap(self._lookup(name))

    def find_or_abort(self, name: str) -> Gender:
        return _unwrap_or_abort(self._lookup(name))

    def first(self) -> Gender:
        return _unwrap(self._head())

    def first_or_abort(self) -> Gender:
        return _unwrap_or_abort(self._head())

    def each(self, visitor: Callable[[Gender], object]) -> None:
        """Call *visitor* once per record. An empty collection is a no-op."""
        for gender in self._genders:
            visitor(gender)

    def each_or_abort(self, visitor: Callable[[Gender], object]) -> None:
        """Like :meth:`each`, but abort before visiting if the collection is empty."""
        _unwrap_or_abort(self._head())
        self.each(visitor)

    # -- rate limit ----------------------------------------------------------

    @property
    def rate_limit(self) -> RateLimitInfo:
        return self._rate_limit

    def limit(self) -> int:
        return self._rate_limit.limit

    def limit_remaining(self) -> int:
        return self._rate_limit.remaining

    def limit_reset(self) -> timedelta:
        return self._rate_limit.reset
