"""
조건 조합기
FilterSpec의 각 필터를 서로 독립적인 WHERE 조건으로 변환
"""
from typing import List, Optional, Sequence

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.models.catalog import Product
from catalog_search.models.filter import FilterSpec
from catalog_search.search.fields import (
    EQUALITY_FILTERS,
    RANGE_FILTERS,
    lowered,
    on_sale_clause,
    visibility_clause,
)


def category_clause(
    spec: FilterSpec,
    family_ids: Optional[Sequence[int]] = None,
) -> Optional[ColumnElement[bool]]:
    """
    카테고리 조건

    Args:
        spec: 검색 필터
        family_ids: 하위 카테고리 확장 시 (카테고리 + 직계 자식) ID 목록

    Returns:
        조건 또는 None (카테고리 필터 없음)
    """
    if spec.category_id is None:
        return None
    if spec.include_subcategories and family_ids is not None:
        return Product.category_id.in_(list(family_ids))
    return Product.category_id == spec.category_id


def equality_clauses(spec: FilterSpec) -> List[ColumnElement[bool]]:
    """정확히 일치 조건 (False 값도 조건으로 적용)"""
    clauses = []
    for field_name, column in EQUALITY_FILTERS.items():
        value = getattr(spec, field_name)
        if value is not None:
            clauses.append(column == value)
    return clauses


def range_clauses(spec: FilterSpec) -> List[ColumnElement[bool]]:
    """범위 조건 (있는 쪽 경계만, 양끝 포함)"""
    clauses = []
    for column, min_field, max_field in RANGE_FILTERS:
        lower = getattr(spec, min_field) if min_field else None
        upper = getattr(spec, max_field) if max_field else None
        if lower is not None:
            clauses.append(column >= lower)
        if upper is not None:
            clauses.append(column <= upper)
    return clauses


def one_way_clauses(spec: FilterSpec) -> List[ColumnElement[bool]]:
    """True일 때만 좁히는 플래그 조건"""
    clauses = []
    if spec.in_stock_only:
        clauses.append((Product.stock > 0) | Product.allow_backorder.is_(True))
    if spec.on_sale_only or spec.has_discount:
        clauses.append(on_sale_clause())
    if spec.featured_only:
        clauses.append(Product.is_featured.is_(True))
    if spec.new_only:
        clauses.append(Product.is_new.is_(True))
    return clauses


def origin_clause(spec: FilterSpec) -> Optional[ColumnElement[bool]]:
    """원산지 부분 일치 (대소문자 무시)"""
    if not spec.origin or not spec.origin.strip():
        return None
    return lowered(Product.origin).contains(spec.origin.strip().lower(), autoescape=True)


def compose_filters(
    spec: FilterSpec,
    category_family_ids: Optional[Sequence[int]] = None,
) -> List[ColumnElement[bool]]:
    """
    기본 노출 조건 + 필터별 조건 목록 생성

    텍스트/태그 조건은 각 모듈에서 따로 추가함.
    반환된 목록은 AND로 결합됨
    """
    clauses: List[ColumnElement[bool]] = [visibility_clause()]

    category = category_clause(spec, category_family_ids)
    if category is not None:
        clauses.append(category)

    clauses.extend(equality_clauses(spec))
    clauses.extend(range_clauses(spec))
    clauses.extend(one_way_clauses(spec))

    origin = origin_clause(spec)
    if origin is not None:
        clauses.append(origin)

    return clauses


def combine(clauses: Sequence[ColumnElement[bool]]) -> ColumnElement[bool]:
    """조건 목록을 하나의 AND 조건으로 결합"""
    if not clauses:
        return true()
    return and_(*clauses)
