"""Create catalog tables

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "brands",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), default=True),
        sa.Column("is_deleted", sa.Boolean(), default=False),
        comment="브랜드 테이블",
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "parent_id",
            sa.Integer(),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("is_active", sa.Boolean(), default=True),
        sa.Column("is_deleted", sa.Boolean(), default=False),
        comment="카테고리 테이블",
    )
    op.create_index("ix_categories_parent_id", "categories", ["parent_id"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(80), nullable=True),
        comment="태그 테이블",
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        # 기본 정보
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("sku", sa.String(50), nullable=False, unique=True),
        sa.Column("short_description", sa.String(500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("tags", sa.String(500), nullable=True, comment="쉼표로 구분된 태그 문자열"),
        sa.Column("meta_keywords", sa.String(500), nullable=True),
        # 분류
        sa.Column("brand_id", sa.Integer(), sa.ForeignKey("brands.id"), nullable=True),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
        # 가격/재고
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        sa.Column("original_price", sa.Numeric(18, 2), nullable=True, comment="할인 전 가격"),
        sa.Column("stock", sa.Integer(), default=0),
        sa.Column("allow_backorder", sa.Boolean(), default=False),
        sa.Column("allow_preorder", sa.Boolean(), default=False),
        # 원산지/인증 (열거형은 정수로 저장)
        sa.Column("origin", sa.String(100), nullable=True),
        sa.Column("japanese_region", sa.Integer(), nullable=True),
        sa.Column("authenticity_level", sa.Integer(), default=3),
        sa.Column("age_restriction", sa.Integer(), default=0),
        # 무게
        sa.Column("weight", sa.Numeric(10, 2), nullable=True),
        sa.Column("weight_unit", sa.Integer(), default=1),
        # 상태/플래그
        sa.Column("status", sa.Integer(), default=1),
        sa.Column("condition", sa.Integer(), default=1),
        sa.Column("is_featured", sa.Boolean(), default=False),
        sa.Column("is_new", sa.Boolean(), default=False),
        sa.Column("is_bestseller", sa.Boolean(), default=False),
        sa.Column("is_limited_edition", sa.Boolean(), default=False),
        sa.Column("is_gift_wrapping_available", sa.Boolean(), default=False),
        # 판매 기간
        sa.Column("available_from", sa.DateTime(), nullable=True),
        sa.Column("available_until", sa.DateTime(), nullable=True),
        # 통계
        sa.Column("rating", sa.Numeric(3, 2), default=0),
        sa.Column("view_count", sa.Integer(), default=0),
        sa.Column("sold_count", sa.Integer(), default=0),
        sa.Column("display_order", sa.Integer(), default=0),
        # 가시성
        sa.Column("is_active", sa.Boolean(), default=True),
        sa.Column("is_deleted", sa.Boolean(), default=False),
        # 메타데이터
        sa.Column("created_at", sa.DateTime(), default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
        comment="상품 테이블",
    )

    # 검색 인덱스
    op.create_index("ix_products_visibility", "products", ["status", "is_active", "is_deleted"])
    op.create_index("ix_products_category_id", "products", ["category_id"])
    op.create_index("ix_products_brand_id", "products", ["brand_id"])

    op.create_table(
        "product_tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "tag_id",
            sa.Integer(),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint("product_id", "tag_id", name="uq_product_tags_product_tag"),
        comment="상품-태그 연결 테이블",
    )
    op.create_index("ix_product_tags_product_id", "product_tags", ["product_id"])
    op.create_index("ix_product_tags_tag_id", "product_tags", ["tag_id"])


def downgrade() -> None:
    op.drop_index("ix_product_tags_tag_id", table_name="product_tags")
    op.drop_index("ix_product_tags_product_id", table_name="product_tags")
    op.drop_table("product_tags")
    op.drop_index("ix_products_brand_id", table_name="products")
    op.drop_index("ix_products_category_id", table_name="products")
    op.drop_index("ix_products_visibility", table_name="products")
    op.drop_table("products")
    op.drop_table("tags")
    op.drop_index("ix_categories_parent_id", table_name="categories")
    op.drop_table("categories")
    op.drop_table("brands")
