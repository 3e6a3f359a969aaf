# This project was developed with assistance from AI tools.
"""Demo catalog seeding, admin role only."""

from db import get_db
from db.enums import UserRole
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..middleware.auth import require_roles
from ..schemas.admin import SeedResponse, SeedStatusResponse
from ..services.seed.seeder import get_seed_status, seed_demo_data

router = APIRouter(dependencies=[Depends(require_roles(UserRole.ADMIN))])


@router.post("/seed", response_model=SeedResponse)
async def seed_data(
    force: bool = Query(default=False, description="Wipe products and chat history first"),
    session: AsyncSession = Depends(get_db),
) -> SeedResponse:
    """Load the fixture catalog. A second call is a no-op unless ``force`` is set.

    Simulated for demonstration purposes -- not real financial data.
    """
    return SeedResponse(**await seed_demo_data(session, force=force))


@router.get("/seed/status", response_model=SeedStatusResponse)
async def seed_status(session: AsyncSession = Depends(get_db)) -> SeedStatusResponse:
    return SeedStatusResponse(**await get_seed_status(session))
