# This project was developed with assistance from AI tools.
"""Product catalog queries.

Filters follow borrower-side semantics: ``min_income`` and
``min_credit_score`` describe the borrower, so a product matches when its own
minimum is at or below the given value.
"""

import logging

from db import Product
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.products import ProductFilters

logger = logging.getLogger(__name__)


def _apply_filters(stmt, filters: ProductFilters):
    """Apply optional WHERE clauses for each set filter."""
    if filters.bank is not None:
        stmt = stmt.where(Product.bank == filters.bank)
    if filters.type is not None:
        stmt = stmt.where(Product.type == filters.type)
    if filters.apr_min is not None:
        stmt = stmt.where(Product.rate_apr >= filters.apr_min)
    if filters.apr_max is not None:
        stmt = stmt.where(Product.rate_apr <= filters.apr_max)
    if filters.min_income is not None:
        stmt = stmt.where(Product.min_income <= filters.min_income)
    if filters.min_credit_score is not None:
        stmt = stmt.where(Product.min_credit_score <= filters.min_credit_score)
    return stmt


async def list_products(
    session: AsyncSession,
    filters: ProductFilters,
) -> tuple[list[Product], int]:
    """Return one page of matching products, cheapest APR first, and the total."""
    count_stmt = _apply_filters(select(func.count(Product.id)), filters)
    total = (await session.execute(count_stmt)).scalar() or 0

    stmt = (
        _apply_filters(select(Product), filters)
        .order_by(Product.rate_apr.asc())
        .offset(filters.offset)
        .limit(filters.limit)
    )
    result = await session.execute(stmt)
    products = list(result.scalars().all())

    return products, total


async def get_product(session: AsyncSession, product_id: str) -> Product | None:
    """Return a single product, or None (mapped to 404 by the route)."""
    result = await session.execute(select(Product).where(Product.id == product_id))
    return result.scalar_one_or_none()


async def get_top_products(session: AsyncSession, limit: int = 5) -> list[Product]:
    """Return the best-matching products; unscored products sort last."""
    stmt = select(Product).order_by(Product.match_score.desc().nulls_last()).limit(limit)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_banks(session: AsyncSession) -> list[str]:
    """Return distinct lending institutions in alphabetical order."""
    stmt = select(Product.bank).distinct().order_by(Product.bank.asc())
    result = await session.execute(stmt)
    return list(result.scalars().all())
