# This project was developed with assistance from AI tools.
"""Load the fixture catalog into the database.

A ``DemoDataManifest`` row marks a completed seed; while one exists, seeding
is skipped unless forced. A forced seed wipes chat history along with the
catalog, since stored turns reference product IDs that are about to change.

Simulated for demonstration purposes -- not real financial data.
"""

import json
import logging
from datetime import UTC, datetime

from db import ChatMessage, DemoDataManifest, Product
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .fixtures import PRODUCTS, compute_config_hash

logger = logging.getLogger(__name__)

# Children before parents: bulk deletes bypass ORM cascades
_WIPE_ORDER = (ChatMessage, Product, DemoDataManifest)


async def _latest_manifest(session: AsyncSession) -> DemoDataManifest | None:
    result = await session.execute(
        select(DemoDataManifest).order_by(DemoDataManifest.id.desc()).limit(1)
    )
    return result.scalar_one_or_none()


def fixture_summary() -> dict[str, int]:
    return {
        "products": len(PRODUCTS),
        "banks": len({p["bank"] for p in PRODUCTS}),
    }


async def seed_demo_data(session: AsyncSession, force: bool = False) -> dict:
    """Insert every fixture product and a manifest in one commit.

    Returns:
        ``status="seeded"`` with product and bank counts, or
        ``status="already_seeded"`` with the existing manifest's details.
    """
    existing = await _latest_manifest(session)
    if existing is not None and not force:
        logger.info("Seed skipped: catalog already seeded at %s", existing.seeded_at)
        return {
            "status": "already_seeded",
            "seeded_at": existing.seeded_at.isoformat(),
            "config_hash": existing.config_hash,
        }

    if force:
        for model in _WIPE_ORDER:
            await session.execute(delete(model))
        logger.info("Force seed: cleared chat history, products, and manifest")

    config_hash = compute_config_hash()
    summary = fixture_summary()
    for fields in PRODUCTS:
        session.add(Product(**fields))
    session.add(DemoDataManifest(config_hash=config_hash, summary=json.dumps(summary)))
    await session.commit()

    logger.info("Seeded %d products from %d banks", summary["products"], summary["banks"])
    return {
        "status": "seeded",
        "seeded_at": datetime.now(UTC).isoformat(),
        "config_hash": config_hash,
        **summary,
    }


async def get_seed_status(session: AsyncSession) -> dict:
    manifest = await _latest_manifest(session)
    if manifest is None:
        return {"seeded": False}
    return {
        "seeded": True,
        "seeded_at": manifest.seeded_at.isoformat(),
        "config_hash": manifest.config_hash,
        "summary": json.loads(manifest.summary) if manifest.summary else None,
    }
