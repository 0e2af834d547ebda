"""
검색어 추천
상품명/브랜드명/카테고리명 중 입력값을 포함하는 이름 제안
"""
import logging
from typing import List, Optional

from catalog_search.config import Settings, get_settings
from catalog_search.search.repository import ProductSearchStore, SuggestionSource

logger = logging.getLogger(__name__)


class SearchSuggestionService:
    """검색어 추천 서비스"""

    def __init__(
        self,
        store: ProductSearchStore,
        settings: Optional[Settings] = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_settings()

    async def suggest(
        self,
        partial_input: Optional[str],
        max_suggestions: Optional[int] = None,
    ) -> List[str]:
        """
        검색어 추천 목록

        상품명에서 최대 절반, 브랜드명/카테고리명에서 각각 최대 1/4을 가져와
        대소문자 무시 중복 제거 후 max_suggestions개까지 반환

        Args:
            partial_input: 입력 중인 검색어
            max_suggestions: 최대 개수 (기본값: 설정)
        """
        limit = max_suggestions or self._settings.search_suggestion_limit
        term = (partial_input or "").strip().lower()

        if len(term) < self._settings.search_suggestion_min_length:
            return []

        quotas = [
            (SuggestionSource.PRODUCT, max(limit // 2, 1)),
            (SuggestionSource.BRAND, max(limit // 4, 1)),
            (SuggestionSource.CATEGORY, max(limit // 4, 1)),
        ]

        candidates: List[str] = []
        for source, quota in quotas:
            candidates.extend(await self._store.distinct_names(source, term, quota))

        seen = set()
        suggestions: List[str] = []
        for name in candidates:
            key = name.lower()
            if key in seen:
                continue
            seen.add(key)
            suggestions.append(name)
            if len(suggestions) >= limit:
                break

        logger.debug(f"검색어 추천: {term!r} -> {len(suggestions)}개")
        return suggestions
