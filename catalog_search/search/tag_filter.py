"""
태그 필터 모듈
태그 문자열 부분 검색, 태그 이름(ALL/ANY), 태그 ID(ALL/ANY) 조건
"""
import logging
from typing import List, Sequence

from sqlalchemy import and_, distinct, exists, func, or_, select
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.models.catalog import Product, ProductTag
from catalog_search.models.enums import TagMatchMode
from catalog_search.models.filter import FilterSpec
from catalog_search.search.fields import lowered

logger = logging.getLogger(__name__)


def _combine_by_mode(
    clauses: Sequence[ColumnElement[bool]],
    mode: TagMatchMode,
) -> ColumnElement[bool]:
    if mode == TagMatchMode.ALL:
        return and_(*clauses)
    return or_(*clauses)


def tags_search_clause(tags_search: str) -> ColumnElement[bool]:
    """태그 문자열 부분 일치"""
    return lowered(Product.tags).contains(tags_search.strip().lower(), autoescape=True)


def tag_names_clause(
    tag_names: Sequence[str],
    mode: TagMatchMode,
) -> ColumnElement[bool]:
    """태그 이름별 포함 조건을 매칭 방식에 따라 결합"""
    per_name = [
        lowered(Product.tags).contains(name.strip().lower(), autoescape=True)
        for name in tag_names
    ]
    return _combine_by_mode(per_name, mode)


def tag_ids_clause(
    tag_ids: Sequence[int],
    mode: TagMatchMode,
) -> ColumnElement[bool]:
    """
    product_tags 조인 테이블 기반 태그 ID 조건

    ANY: 하나 이상 연결됨
    ALL: 요청된 모든 (중복 제거된) 태그가 연결됨
    """
    unique_ids = sorted(set(tag_ids))

    if mode == TagMatchMode.ANY:
        return exists().where(
            ProductTag.product_id == Product.id,
            ProductTag.tag_id.in_(unique_ids),
        )

    matched = (
        select(func.count(distinct(ProductTag.tag_id)))
        .where(
            ProductTag.product_id == Product.id,
            ProductTag.tag_id.in_(unique_ids),
        )
        .scalar_subquery()
    )
    return matched == len(unique_ids)


def build_tag_clauses(
    spec: FilterSpec,
    tag_join_enabled: bool = True,
) -> List[ColumnElement[bool]]:
    """
    태그 관련 조건 목록 생성 (각각 AND로 결합됨)

    Args:
        spec: 검색 필터
        tag_join_enabled: False면 태그 ID 필터는 적용하지 않음
    """
    clauses: List[ColumnElement[bool]] = []

    if spec.tags_search and spec.tags_search.strip():
        clauses.append(tags_search_clause(spec.tags_search))

    names = [name for name in spec.tag_names if name and name.strip()]
    if names:
        clauses.append(tag_names_clause(names, spec.tag_match_mode))

    if spec.tag_ids:
        if tag_join_enabled:
            clauses.append(tag_ids_clause(spec.tag_ids, spec.tag_match_mode))
        else:
            logger.debug(f"태그 조인 비활성화: tag_ids 필터 무시 ({spec.tag_ids})")

    return clauses
