"""
검색어 추천 유닛 테스트 (저장소 없이)
"""
from typing import Dict, List

import pytest

from catalog_search.config import Settings
from catalog_search.search.repository import SuggestionSource
from catalog_search.search.suggestions import SearchSuggestionService


class FakeStore:
    """출처별 고정 이름을 돌려주는 저장소"""

    def __init__(self, names: Dict[SuggestionSource, List[str]]) -> None:
        self.names = names
        self.calls = []

    async def distinct_names(self, source, term, limit):
        self.calls.append((source, term, limit))
        return self.names.get(source, [])[:limit]


@pytest.fixture
def service_settings():
    return Settings(_env_file=None)


class TestSearchSuggestionService:
    """검색어 추천 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("partial", [None, "", " ", "p", " p "])
    async def test_short_input_returns_nothing(self, service_settings, partial):
        """최소 길이 미만이면 저장소를 조회하지 않음"""
        store = FakeStore({})
        service = SearchSuggestionService(store, service_settings)

        assert await service.suggest(partial) == []
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_quota_per_source(self, service_settings):
        """상품명 절반, 브랜드/카테고리 각 1/4"""
        store = FakeStore({})
        service = SearchSuggestionService(store, service_settings)

        await service.suggest("Tea", max_suggestions=8)

        assert store.calls == [
            (SuggestionSource.PRODUCT, "tea", 4),
            (SuggestionSource.BRAND, "tea", 2),
            (SuggestionSource.CATEGORY, "tea", 2),
        ]

    @pytest.mark.asyncio
    async def test_dedupes_case_insensitively(self, service_settings):
        store = FakeStore(
            {
                SuggestionSource.PRODUCT: ["Green Tea", "Tea"],
                SuggestionSource.BRAND: ["TEA"],
                SuggestionSource.CATEGORY: ["tea", "Teaware"],
            }
        )
        service = SearchSuggestionService(store, service_settings)

        assert await service.suggest("tea") == ["Green Tea", "Tea", "Teaware"]

    @pytest.mark.asyncio
    async def test_caps_total(self, service_settings):
        store = FakeStore(
            {
                SuggestionSource.PRODUCT: ["Tea 1", "Tea 2"],
                SuggestionSource.BRAND: ["Tea Brand"],
                SuggestionSource.CATEGORY: ["Tea Category"],
            }
        )
        service = SearchSuggestionService(store, service_settings)

        # 출처별 최소 1개씩 조회 후 상한 적용
        assert await service.suggest("tea", max_suggestions=2) == ["Tea 1", "Tea Brand"]
