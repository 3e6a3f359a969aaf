# This project was developed with assistance from AI tools.
"""add product catalog and chat messages

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2025-12-08 15:56:50.000000

"""

import sqlalchemy as sa
from alembic import op

revision = "3f1c2a9d7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("bank", sa.String(255), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("rate_apr", sa.Float(), nullable=False),
        sa.Column("min_income", sa.Integer(), nullable=False),
        sa.Column("min_credit_score", sa.Integer(), nullable=False),
        sa.Column("tenure_min_months", sa.Integer(), nullable=False, server_default="6"),
        sa.Column("tenure_max_months", sa.Integer(), nullable=False, server_default="60"),
        sa.Column("processing_fee_pct", sa.Float(), nullable=True),
        sa.Column("prepayment_allowed", sa.Boolean(), nullable=True),
        sa.Column("disbursal_speed", sa.String(20), nullable=True),
        sa.Column("docs_level", sa.String(20), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("faq", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("terms", sa.JSON(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("match_score", sa.Integer(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_bank", "products", ["bank"])
    op.create_index("ix_products_type", "products", ["type"])

    op.create_table(
        "chat_messages",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("product_id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_chat_messages_product_user_created",
        "chat_messages",
        ["product_id", "user_id", "created_at"],
    )

    op.create_table(
        "demo_data_manifest",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "seeded_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column("config_hash", sa.String(64), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("demo_data_manifest")
    op.drop_index("ix_chat_messages_product_user_created", table_name="chat_messages")
    op.drop_table("chat_messages")
    op.drop_index("ix_products_type", table_name="products")
    op.drop_index("ix_products_bank", table_name="products")
    op.drop_table("products")
