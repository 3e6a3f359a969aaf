# This project was developed with assistance from AI tools.
"""Product catalog routes -- no authentication required."""

from db import get_db
from db.enums import LoanType
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import Pagination
from ..schemas.products import (
    BankListResponse,
    ProductDetail,
    ProductFilters,
    ProductListResponse,
    ProductResponse,
    TopProductsResponse,
)
from ..services import products as product_service

router = APIRouter()


@router.get("", response_model=ProductListResponse)
async def list_products(
    session: AsyncSession = Depends(get_db),
    bank: str | None = None,
    type: LoanType | None = None,
    apr_min: float | None = Query(default=None, gt=0),
    apr_max: float | None = Query(default=None, gt=0),
    min_income: int | None = Query(default=None, ge=0),
    min_credit_score: int | None = Query(default=None, ge=300, le=900),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=10, ge=1, le=100),
) -> ProductListResponse:
    """List products matching the filters, lowest APR first."""
    filters = ProductFilters(
        bank=bank,
        type=type,
        apr_min=apr_min,
        apr_max=apr_max,
        min_income=min_income,
        min_credit_score=min_credit_score,
        offset=offset,
        limit=limit,
    )
    products, total = await product_service.list_products(session, filters)

    return ProductListResponse(
        data=[ProductResponse.model_validate(p) for p in products],
        pagination=Pagination(
            total=total,
            offset=offset,
            limit=limit,
            has_more=(offset + limit < total),
        ),
    )


@router.get("/top", response_model=TopProductsResponse)
async def top_products(
    session: AsyncSession = Depends(get_db),
    limit: int = Query(default=5, ge=1, le=20),
) -> TopProductsResponse:
    """Best-matching products by match score."""
    products = await product_service.get_top_products(session, limit=limit)
    return TopProductsResponse(data=[ProductResponse.model_validate(p) for p in products])


@router.get("/banks", response_model=BankListResponse)
async def banks(session: AsyncSession = Depends(get_db)) -> BankListResponse:
    """Distinct lending institutions, for the filter dropdown."""
    return BankListResponse(data=await product_service.list_banks(session))


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(
    product_id: str,
    session: AsyncSession = Depends(get_db),
) -> ProductDetail:
    """Get a single product with its FAQ and terms."""
    product = await product_service.get_product(session, product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return ProductDetail.model_validate(product)
