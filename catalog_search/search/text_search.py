"""
텍스트 검색 모듈
자유 검색어를 "정확한 구문" 또는 "개별 검색어 모두 포함" 조건으로 변환

예) "japanese snack"
    - 어떤 필드든 "japanese snack"을 그대로 포함하거나
    - "japanese"와 "snack"이 각각 어딘가에 포함 (다른 필드여도 됨)
"""
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.search.fields import searchable_columns


def normalize_query(query: Optional[str]) -> str:
    """검색어 정규화 (앞뒤 공백 제거, 소문자화)"""
    if not query:
        return ""
    return query.strip().lower()


def split_terms(normalized: str, min_length: int = 2) -> List[str]:
    """공백 기준 분리 후 짧은 토큰 제거 및 중복 제거 (순서 유지)"""
    terms: List[str] = []
    for token in normalized.split():
        if len(token) < min_length or token in terms:
            continue
        terms.append(token)
    return terms


def contains_anywhere(term: str) -> ColumnElement[bool]:
    """검색 대상 필드 중 하나라도 term을 포함"""
    return or_(
        *(column.contains(term, autoescape=True) for column in searchable_columns())
    )


def build_text_clause(
    query: Optional[str],
    min_term_length: int = 2,
) -> Optional[ColumnElement[bool]]:
    """
    자유 검색어 조건 생성

    Args:
        query: 원본 검색어
        min_term_length: 개별 검색어 최소 길이

    Returns:
        조건 또는 None (빈 검색어/공백만 있는 경우 텍스트 필터 없음)
    """
    normalized = normalize_query(query)
    if not normalized:
        return None

    exact_phrase = contains_anywhere(normalized)

    terms = split_terms(normalized, min_term_length)
    if len(terms) <= 1:
        return exact_phrase

    individual_terms = and_(*(contains_anywhere(term) for term in terms))
    return or_(exact_phrase, individual_terms)
