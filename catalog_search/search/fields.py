"""
필드 카탈로그
텍스트 검색, 정렬, 필터에 참여하는 상품 필드 정의
"""
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.models.catalog import Brand, Category, Product
from catalog_search.models.enums import ProductStatus


def lowered(column) -> ColumnElement:
    """NULL을 빈 문자열로 바꾼 소문자 컬럼"""
    return func.lower(func.coalesce(column, ""))


# 텍스트 검색 대상 필드 (브랜드/카테고리명은 조인으로 제공)
SEARCHABLE_FIELDS: Dict[str, ColumnElement] = {
    "name": Product.name,
    "description": Product.description,
    "short_description": Product.short_description,
    "sku": Product.sku,
    "tags": Product.tags,
    "meta_keywords": Product.meta_keywords,
    "brand_name": Brand.name,
    "category_name": Category.name,
}

# 정렬 가능한 단일 컬럼
SORTABLE_FIELDS: Dict[str, ColumnElement] = {
    "name": Product.name,
    "price": Product.price,
    "rating": Product.rating,
    "created": Product.created_at,
    "updated": Product.updated_at,
    "sold": Product.sold_count,
    "views": Product.view_count,
    "stock": Product.stock,
}

# 정확히 일치하는 필터: FilterSpec 필드명 -> 컬럼
EQUALITY_FILTERS: Dict[str, ColumnElement] = {
    "brand_id": Product.brand_id,
    "status": Product.status,
    "condition": Product.condition,
    "japanese_region": Product.japanese_region,
    "authenticity_level": Product.authenticity_level,
    "age_restriction": Product.age_restriction,
    "weight_unit": Product.weight_unit,
    "is_featured": Product.is_featured,
    "is_new": Product.is_new,
    "is_bestseller": Product.is_bestseller,
    "is_limited_edition": Product.is_limited_edition,
    "is_gift_wrapping_available": Product.is_gift_wrapping_available,
    "allow_backorder": Product.allow_backorder,
    "allow_preorder": Product.allow_preorder,
}

# 범위 필터: (컬럼, 최소값 필드, 최대값 필드), 양끝 포함
RANGE_FILTERS: List[Tuple[ColumnElement, Optional[str], Optional[str]]] = [
    (Product.price, "min_price", "max_price"),
    (Product.rating, "min_rating", None),
    (Product.stock, "min_stock", "max_stock"),
    (Product.weight, "min_weight", "max_weight"),
    (Product.created_at, "created_from", "created_to"),
    (Product.available_from, "available_from", None),
    (Product.available_until, None, "available_until"),
]


def searchable_columns() -> List[ColumnElement]:
    """텍스트 검색 대상 컬럼 목록 (소문자화)"""
    return [lowered(column) for column in SEARCHABLE_FIELDS.values()]


def visibility_clause() -> ColumnElement[bool]:
    """모든 검색에 무조건 적용되는 노출 조건"""
    return (
        (Product.is_active.is_(True))
        & (Product.is_deleted.is_(False))
        & (Product.status == ProductStatus.ACTIVE)
    )


def on_sale_clause() -> ColumnElement[bool]:
    """할인 중: 정가가 있고 판매가보다 큼"""
    return Product.original_price.is_not(None) & (Product.original_price > Product.price)
