"""
카탈로그 모델
검색 엔진이 읽는 상품/브랜드/카테고리/태그 테이블 (읽기 전용 프로젝션)
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Type

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    TypeDecorator,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_search.database import Base
from catalog_search.models.enums import (
    AgeRestriction,
    AuthenticityLevel,
    JapaneseRegion,
    ProductCondition,
    ProductStatus,
    WeightUnit,
)


class IntEnumType(TypeDecorator):
    """IntEnum을 정수 컬럼으로 저장"""

    impl = Integer
    cache_ok = True

    def __init__(self, enum_class: Type, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.enum_class = enum_class

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self.enum_class(value)


class Brand(Base):
    """브랜드 모델"""

    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False)

    products = relationship("Product", back_populates="brand")

    __table_args__ = (
        {"comment": "브랜드 테이블"},
    )

    def __repr__(self) -> str:
        return f"<Brand(id={self.id}, name={self.name})>"


class Category(Base):
    """카테고리 모델 (parent_id로 계층 구성)"""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    parent_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False)

    products = relationship("Product", back_populates="category")

    __table_args__ = (
        {"comment": "카테고리 테이블"},
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"


class Tag(Base):
    """정규화된 태그 모델"""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    slug: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)

    __table_args__ = (
        {"comment": "태그 테이블"},
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"


class ProductTag(Base):
    """상품-태그 연결 테이블"""

    __tablename__ = "product_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("product_id", "tag_id", name="uq_product_tags_product_tag"),
        {"comment": "상품-태그 연결 테이블"},
    )


class Product(Base):
    """상품 모델"""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # 기본 정보
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    short_description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="쉼표로 구분된 태그 문자열",
    )
    meta_keywords: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # 분류
    brand_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("brands.id"),
        nullable=True,
    )
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
    )

    # 가격/재고
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    original_price: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(18, 2),
        nullable=True,
        comment="할인 전 가격",
    )
    stock: Mapped[int] = mapped_column(Integer, default=0)
    allow_backorder: Mapped[bool] = mapped_column(Boolean, default=False)
    allow_preorder: Mapped[bool] = mapped_column(Boolean, default=False)

    # 원산지/인증
    origin: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    japanese_region: Mapped[Optional[JapaneseRegion]] = mapped_column(
        IntEnumType(JapaneseRegion),
        nullable=True,
    )
    authenticity_level: Mapped[AuthenticityLevel] = mapped_column(
        IntEnumType(AuthenticityLevel),
        default=AuthenticityLevel.VERIFIED,
    )
    age_restriction: Mapped[AgeRestriction] = mapped_column(
        IntEnumType(AgeRestriction),
        default=AgeRestriction.NONE,
    )

    # 무게
    weight: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    weight_unit: Mapped[WeightUnit] = mapped_column(
        IntEnumType(WeightUnit),
        default=WeightUnit.GRAM,
    )

    # 상태/플래그
    status: Mapped[ProductStatus] = mapped_column(
        IntEnumType(ProductStatus),
        default=ProductStatus.ACTIVE,
    )
    condition: Mapped[ProductCondition] = mapped_column(
        IntEnumType(ProductCondition),
        default=ProductCondition.NEW,
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    is_new: Mapped[bool] = mapped_column(Boolean, default=False)
    is_bestseller: Mapped[bool] = mapped_column(Boolean, default=False)
    is_limited_edition: Mapped[bool] = mapped_column(Boolean, default=False)
    is_gift_wrapping_available: Mapped[bool] = mapped_column(Boolean, default=False)

    # 판매 기간
    available_from: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    available_until: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    # 통계
    rating: Mapped[Decimal] = mapped_column(Numeric(3, 2), default=0)
    view_count: Mapped[int] = mapped_column(Integer, default=0)
    sold_count: Mapped[int] = mapped_column(Integer, default=0)
    display_order: Mapped[int] = mapped_column(Integer, default=0)

    # 가시성 (소프트 삭제 포함)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False)

    # 메타데이터
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # 관계
    brand = relationship("Brand", back_populates="products")
    category = relationship("Category", back_populates="products")
    tag_links: Mapped[List[ProductTag]] = relationship(
        "ProductTag",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("ix_products_visibility", "status", "is_active", "is_deleted"),
        Index("ix_products_category_id", "category_id"),
        Index("ix_products_brand_id", "brand_id"),
        {"comment": "상품 테이블"},
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"
