# This project was developed with assistance from AI tools.
"""Demo seeding results."""

from typing import Literal

from pydantic import BaseModel


class SeedSummary(BaseModel):
    products: int
    banks: int


class SeedResponse(BaseModel):
    """Outcome of a seed request.

    ``already_seeded`` carries the existing manifest's timestamp and hash and
    no counts; nothing was written.
    """

    status: Literal["seeded", "already_seeded"]
    seeded_at: str
    config_hash: str
    products: int | None = None
    banks: int | None = None


class SeedStatusResponse(BaseModel):
    seeded: bool
    seeded_at: str | None = None
    config_hash: str | None = None
    summary: SeedSummary | None = None
