"""Response helpers for paged collections.

The body of a paged response is a plain JSON array; the page metadata
travels out-of-band in the ``X-Pagination`` header.
"""


from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import Request, Response
from pydantic import BaseModel

from app.core.formatters import render_collection
from app.core.pagination import PagedResult, PageMetadata

T = TypeVar("T")

PAGINATION_HEADER = "X-Pagination"


def serialize_metadata(metadata: PageMetadata) -> str:
    """Compact JSON object: CurrentPage, PageSize, TotalCount, TotalPages (in that order)."""
    return metadata.model_dump_json(by_alias=True)


def build_envelope(result: PagedResult[T]) -> tuple[list[T], dict[str, str]]:
    """Split a page into (body items, out-of-band headers)."""
    return list(result.items), {PAGINATION_HEADER: serialize_metadata(result.metadata)}


def paged_response(
    request: Request,
    result: PagedResult[Any],
    to_out: Callable[[Any], BaseModel],
    model: type[BaseModel],
) -> Response:
    """Render one page: mapped items as the body, metadata as a header.

    The header is present even when the page is empty.
    """
    items, headers = build_envelope(result)
    return render_collection(request, [to_out(item) for item in items], model, headers=headers)
