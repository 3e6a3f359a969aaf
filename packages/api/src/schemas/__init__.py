# This project was developed with assistance from AI tools.
"""Schemas shared across routes: list pagination and Problem Details errors."""

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """Offset window over a filtered list; ``has_more`` is true when rows remain past it."""

    total: int
    offset: int
    limit: int
    has_more: bool


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response (RFC 7807 Problem Details)."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    request_id: str = Field(
        default="",
        description="Echo of the X-Request-ID header, or a generated ID for log lookup.",
    )
