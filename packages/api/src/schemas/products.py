# This project was developed with assistance from AI tools.
"""Loan product catalog schemas."""

from datetime import datetime

from db.enums import DisbursalSpeed, DocsLevel, LoanType
from pydantic import BaseModel, ConfigDict, Field

from . import Pagination


class FaqEntry(BaseModel):
    """One stored question/answer pair for a product."""

    q: str
    a: str


class ProductResponse(BaseModel):
    """Product as listed in catalog responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    bank: str
    type: LoanType
    rate_apr: float
    min_income: int
    min_credit_score: int
    tenure_min_months: int
    tenure_max_months: int
    processing_fee_pct: float | None = None
    prepayment_allowed: bool | None = None
    disbursal_speed: DisbursalSpeed | None = None
    docs_level: DocsLevel | None = None
    summary: str | None = None
    match_score: int | None = None


class ProductDetail(ProductResponse):
    """Single product with FAQ and free-form terms."""

    faq: list[FaqEntry] = []
    terms: dict = {}
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductListResponse(BaseModel):
    """Paginated list of products."""

    data: list[ProductResponse]
    pagination: Pagination


class BankListResponse(BaseModel):
    """Distinct lending institutions in the catalog."""

    data: list[str]


class ProductFilters(BaseModel):
    """Catalog filter criteria. Unset fields do not constrain the query."""

    bank: str | None = None
    type: LoanType | None = None
    apr_min: float | None = Field(default=None, gt=0)
    apr_max: float | None = Field(default=None, gt=0)
    min_income: int | None = Field(default=None, ge=0)
    min_credit_score: int | None = Field(default=None, ge=300, le=900)
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=10, ge=1, le=100)


class TopProductsResponse(BaseModel):
    """Best-matching products, highest match score first."""

    data: list[ProductResponse]
