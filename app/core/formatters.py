"""Output formatters for collection endpoints (JSON or CSV, chosen by Accept)."""

from __future__ import annotations

import csv
import io
from collections.abc import Mapping, Sequence

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.exceptions import NotAcceptableError

JSON_MEDIA_TYPE = "application/json"
CSV_MEDIA_TYPE = "text/csv"

_JSON_RANGES = {"*/*", "application/*", JSON_MEDIA_TYPE}
_CSV_RANGES = {"text/*", CSV_MEDIA_TYPE}


def negotiate(accept: str | None) -> str:
    """Pick the output media type for an Accept header.

    Media ranges are tried in the order the client listed them; quality
    values are ignored. No Accept header means JSON.
    """
    if not accept or not accept.strip():
        return JSON_MEDIA_TYPE

    for part in accept.split(","):
        media_range = part.split(";", 1)[0].strip().lower()
        if media_range in _JSON_RANGES:
            return JSON_MEDIA_TYPE
        if media_range in _CSV_RANGES:
            return CSV_MEDIA_TYPE

    raise NotAcceptableError(accept)


def _csv_columns(model: type[BaseModel]) -> list[str]:
    alias_generator = model.model_config.get("alias_generator")
    return [
        info.alias or (alias_generator(name) if callable(alias_generator) else name)
        for name, info in model.model_fields.items()
    ]


def to_csv(items: Sequence[BaseModel], model: type[BaseModel]) -> str:
    """Render items as CSV with one camelCase header row."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=_csv_columns(model), lineterminator="\n")
    writer.writeheader()
    for item in items:
        writer.writerow(item.model_dump(by_alias=True, mode="json"))
    return buffer.getvalue()


def render_collection(
    request: Request,
    items: Sequence[BaseModel],
    model: type[BaseModel],
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Serialize a list of transfer models in the format the client accepts."""
    media_type = negotiate(request.headers.get("accept"))
    if media_type == CSV_MEDIA_TYPE:
        return Response(
            content=to_csv(items, model),
            media_type=CSV_MEDIA_TYPE,
            headers=dict(headers or {}),
        )
    return JSONResponse(
        content=[item.model_dump(by_alias=True, mode="json") for item in items],
        headers=dict(headers or {}),
    )
