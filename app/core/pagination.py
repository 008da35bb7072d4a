"""Paging primitives for list endpoints.

The pieces compose as a small pipeline:

    raw query values -> QueryParameters.normalize() -> paginate_source()
        -> PagedResult(items, metadata)

Nothing in here touches HTTP or the database. A ``CollectionSource`` is
whatever can count and slice a filtered, canonically ordered collection;
repositories implement it against SQL, ``SequenceSource`` in memory.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, Field

from app.core.config import settings

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
P_contra = TypeVar("P_contra", contravariant=True)


def _positive_int(raw: Any) -> Optional[int]:
    """Return ``raw`` as an int > 0, or None when missing, malformed or not positive."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        return None
    return value if value > 0 else None


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class QueryParameters:
    """Effective page number and page size of one request.

    Build instances with :meth:`normalize` when the values come from a
    client; bad values are recovered to defaults, never rejected.
    """

    page_number: int = 1
    page_size: int = field(default_factory=lambda: settings.default_page_size)

    def __post_init__(self) -> None:
        if self.page_number < 1 or self.page_size < 1:
            raise ValueError("page_number and page_size must be >= 1")

    @classmethod
    def normalize(
        cls,
        page_number: Any = None,
        page_size: Any = None,
        *,
        default_page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
        **filters: Any,
    ):
        """Build parameters from raw client input.

        - missing / malformed / non-positive page number -> 1
        - missing / malformed / non-positive page size -> default page size
        - page size above the maximum -> the maximum
        """
        max_size = max_page_size or settings.max_page_size
        default_size = min(default_page_size or settings.default_page_size, max_size)

        number = _positive_int(page_number) or 1
        size = _positive_int(page_size) or default_size
        return cls(page_number=number, page_size=min(size, max_size), **filters)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class PageMetadata(BaseModel):
    """Describes the whole filtered collection a page was cut from.

    Field order is the serialized key order of the ``X-Pagination`` header.
    """

    current_page: int = Field(alias="CurrentPage")
    page_size: int = Field(alias="PageSize")
    total_count: int = Field(alias="TotalCount")
    total_pages: int = Field(alias="TotalPages")

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def compute(cls, total_count: int, params: QueryParameters) -> "PageMetadata":
        return cls(
            current_page=params.page_number,
            page_size=params.page_size,
            total_count=total_count,
            total_pages=math.ceil(total_count / params.page_size),
        )

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus the metadata of the collection it belongs to."""

    items: tuple[T, ...]
    metadata: PageMetadata

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


# ---------------------------------------------------------------------------
# Collection sources
# ---------------------------------------------------------------------------

class CollectionSource(Protocol[T_co, P_contra]):
    """A filterable collection with a fixed canonical order.

    ``count`` and ``slice`` must see the same snapshot of the data,
    otherwise ``items`` and ``metadata`` of a page can disagree.
    """

    async def count(self, predicate: P_contra) -> int:
        ...

    async def slice(self, predicate: P_contra, offset: int, limit: int) -> Sequence[T_co]:
        ...


@runtime_checkable
class PageSource(Protocol[T_co, P_contra]):
    """A collection source that reads the total and one page in a single query.

    Sources backed by storage whose separate reads may see different data
    (e.g. autocommit SELECTs) implement this so a page always agrees with
    its metadata.
    """

    async def fetch_page(
        self, predicate: P_contra, offset: int, limit: int
    ) -> tuple[int, Sequence[T_co]]:
        ...


class SequenceSource(Generic[T]):
    """In-memory collection source.

    The items are copied on construction, so every call works on the same
    snapshot. ``predicate`` is a callable (or None for "everything").
    """

    def __init__(self, items: Iterable[T], sort_key: Callable[[T], Any]):
        self._items = list(items)
        self._sort_key = sort_key

    def _select(self, predicate: Optional[Callable[[T], bool]]) -> list[T]:
        selected = self._items if predicate is None else [i for i in self._items if predicate(i)]
        return sorted(selected, key=self._sort_key)

    async def count(self, predicate: Optional[Callable[[T], bool]]) -> int:
        return len(self._select(predicate))

    async def slice(
        self, predicate: Optional[Callable[[T], bool]], offset: int, limit: int
    ) -> list[T]:
        return self._select(predicate)[offset:offset + limit]


# ---------------------------------------------------------------------------
# Paginator
# ---------------------------------------------------------------------------

def paginate(items: Sequence[T], params: QueryParameters) -> PagedResult[T]:
    """Cut one page out of an already filtered and ordered sequence."""
    metadata = PageMetadata.compute(len(items), params)
    start = params.offset
    return PagedResult(items=tuple(items[start:start + params.page_size]), metadata=metadata)


async def paginate_source(
    source: CollectionSource[T, Any],
    predicate: Any,
    params: QueryParameters,
) -> PagedResult[T]:
    """Count and slice ``source`` for the requested page.

    A ``PageSource`` is asked for the total and the rows together; other
    sources are counted, then sliced. A page past the end is an empty page,
    not an error. Errors raised by the source propagate unchanged.
    """
    if isinstance(source, PageSource):
        total, items = await source.fetch_page(predicate, params.offset, params.page_size)
        return PagedResult(items=tuple(items), metadata=PageMetadata.compute(total, params))

    total = await source.count(predicate)
    metadata = PageMetadata.compute(total, params)

    # Nothing to fetch past the last row
    if params.offset >= total:
        return PagedResult(items=(), metadata=metadata)

    items = await source.slice(predicate, params.offset, params.page_size)
    return PagedResult(items=tuple(items), metadata=metadata)
