# This project was developed with assistance from AI tools.
"""
Loan Advisor -- domain models

Loan product catalog, per-user product chat messages, and the demo data
seeding manifest.
"""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import ChatRole, DisbursalSpeed, DocsLevel, LoanType


def _new_id() -> str:
    return str(uuid.uuid4())


class Product(Base):
    """Loan product offered by a lending institution."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    bank = Column(String(255), nullable=False, index=True)
    type = Column(
        Enum(LoanType, name="loan_type", native_enum=False),
        nullable=False,
        index=True,
    )
    rate_apr = Column(Float, nullable=False)
    min_income = Column(Integer, nullable=False)
    min_credit_score = Column(Integer, nullable=False)
    tenure_min_months = Column(Integer, nullable=False, default=6)
    tenure_max_months = Column(Integer, nullable=False, default=60)
    processing_fee_pct = Column(Float, nullable=True)
    prepayment_allowed = Column(Boolean, nullable=True)
    disbursal_speed = Column(
        Enum(DisbursalSpeed, name="disbursal_speed", native_enum=False),
        nullable=True,
    )
    docs_level = Column(
        Enum(DocsLevel, name="docs_level", native_enum=False),
        nullable=True,
    )
    summary = Column(Text, nullable=True)
    faq = Column(JSON, nullable=False, default=list)
    terms = Column(JSON, nullable=False, default=dict)
    match_score = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    chat_messages = relationship(
        "ChatMessage", back_populates="product", cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', bank='{self.bank}')>"


class ChatMessage(Base):
    """One turn of a user's conversation about a product."""

    __tablename__ = "chat_messages"
    __table_args__ = (
        Index("ix_chat_messages_product_user_created", "product_id", "user_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    product_id = Column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False,
    )
    user_id = Column(String(255), nullable=False)
    role = Column(Enum(ChatRole, name="chat_role", native_enum=False), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    product = relationship("Product", back_populates="chat_messages")

    def __repr__(self):
        return f"<ChatMessage(product_id={self.product_id}, role='{self.role}')>"


class DemoDataManifest(Base):
    """Tracks demo data seeding for idempotency."""

    __tablename__ = "demo_data_manifest"

    id = Column(Integer, primary_key=True, autoincrement=True)
    seeded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    config_hash = Column(String(64), nullable=False)
    summary = Column(Text, nullable=True)

    def __repr__(self):
        return f"<DemoDataManifest(id={self.id}, seeded_at='{self.seeded_at}')>"
