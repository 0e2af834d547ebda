"""
정렬/랭킹 엔진
정렬 키 + 방향을 ORDER BY 절로 변환. 관련도 정렬은 다단계 점수 사용
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from sqlalchemy import Float, case, cast, or_
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.models.catalog import Product
from catalog_search.search.fields import (
    SEARCHABLE_FIELDS,
    SORTABLE_FIELDS,
    lowered,
    on_sale_clause,
)
from catalog_search.search.text_search import normalize_query


class SortKey(str, Enum):
    """정렬 키"""

    NAME = "name"
    PRICE = "price"
    RATING = "rating"
    CREATED = "created"
    UPDATED = "updated"
    SOLD = "sold"
    VIEWS = "views"
    STOCK = "stock"
    POPULARITY = "popularity"
    DISCOUNT = "discount"
    RELEVANCE = "relevance"
    DISPLAY = "display"  # 인식할 수 없거나 없는 키

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortKey":
        """문자열을 정렬 키로 변환 (알 수 없으면 DISPLAY)"""
        if not value:
            return cls.DISPLAY
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.DISPLAY


def is_descending(sort_order: Optional[str]) -> bool:
    """정렬 방향 (asc가 아니면 내림차순)"""
    return (sort_order or "desc").strip().lower() != "asc"


@dataclass(frozen=True)
class SortPlan:
    """
    정렬 계획

    order_by: ORDER BY 절 (마지막은 항상 상품 ID 오름차순)
    restrictions: 정렬에 필요한 추가 조건 (할인 정렬은 할인 상품만)
    """

    key: SortKey
    order_by: List[ColumnElement] = field(default_factory=list)
    restrictions: List[ColumnElement[bool]] = field(default_factory=list)


def relevance_score(normalized_query: str) -> ColumnElement:
    """
    관련도 점수 (높을수록 우선)

    6: 상품명 완전 일치
    5: 상품명이 검색어로 시작
    4: 메타 키워드에 포함
    3: 상품명에 포함
    2: 설명/요약 설명에 포함
    1: 태그, SKU, 브랜드명, 카테고리명에 포함
    0: 그 외 (개별 검색어 조건으로만 일치)
    """
    q = normalized_query
    name = lowered(Product.name)

    def contains(*field_names: str) -> ColumnElement[bool]:
        return or_(
            *(lowered(SEARCHABLE_FIELDS[f]).contains(q, autoescape=True) for f in field_names)
        )

    return case(
        (name == q, 6),
        (name.startswith(q, autoescape=True), 5),
        (contains("meta_keywords"), 4),
        (name.contains(q, autoescape=True), 3),
        (contains("description", "short_description"), 2),
        (contains("tags", "sku", "brand_name", "category_name"), 1),
        else_=0,
    )


def discount_ratio() -> ColumnElement:
    """할인율 (정가 대비 할인액)"""
    return cast(Product.original_price - Product.price, Float) / cast(Product.original_price, Float)


def _column_order(column: ColumnElement, descending: bool) -> ColumnElement:
    return column.desc() if descending else column.asc()


def _popularity(descending: bool, query: str) -> SortPlan:
    # 방향 무시
    return SortPlan(
        key=SortKey.POPULARITY,
        order_by=[
            Product.view_count.desc(),
            Product.sold_count.desc(),
            Product.rating.desc(),
        ],
    )


def _discount(descending: bool, query: str) -> SortPlan:
    return SortPlan(
        key=SortKey.DISCOUNT,
        order_by=[discount_ratio().desc()],
        restrictions=[on_sale_clause()],
    )


def _relevance(descending: bool, query: str) -> SortPlan:
    if not query:
        return SortPlan(key=SortKey.RELEVANCE, order_by=[Product.created_at.desc()])
    return SortPlan(
        key=SortKey.RELEVANCE,
        order_by=[
            relevance_score(query).desc(),
            Product.rating.desc(),
            Product.sold_count.desc(),
        ],
    )


def _display(descending: bool, query: str) -> SortPlan:
    return SortPlan(
        key=SortKey.DISPLAY,
        order_by=[Product.display_order.asc(), Product.created_at.desc()],
    )


def _by_column(key: SortKey) -> Callable[[bool, str], SortPlan]:
    column = SORTABLE_FIELDS[key.value]

    def build(descending: bool, query: str) -> SortPlan:
        return SortPlan(key=key, order_by=[_column_order(column, descending)])

    return build


_BUILDERS: Dict[SortKey, Callable[[bool, str], SortPlan]] = {
    SortKey.POPULARITY: _popularity,
    SortKey.DISCOUNT: _discount,
    SortKey.RELEVANCE: _relevance,
    SortKey.DISPLAY: _display,
}
for _key in SortKey:
    if _key.value in SORTABLE_FIELDS:
        _BUILDERS[_key] = _by_column(_key)


def build_sort_plan(
    sort_by: Optional[str],
    sort_order: Optional[str],
    search: Optional[str] = None,
) -> SortPlan:
    """
    정렬 계획 생성 (요청당 한 번)

    Args:
        sort_by: 정렬 키 문자열
        sort_order: asc | desc
        search: 원본 검색어 (관련도 정렬에 사용)
    """
    key = SortKey.parse(sort_by)
    plan = _BUILDERS[key](is_descending(sort_order), normalize_query(search))

    # 페이지 간 중복/누락 방지를 위한 최종 기준
    return SortPlan(
        key=plan.key,
        order_by=[*plan.order_by, Product.id.asc()],
        restrictions=plan.restrictions,
    )
