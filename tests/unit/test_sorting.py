"""
정렬 계획 유닛 테스트
"""
import pytest

from catalog_search.search.sorting import SortKey, build_sort_plan, is_descending


class TestSortKeyParse:
    """정렬 키 파싱 테스트"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("price", SortKey.PRICE),
            ("  Relevance ", SortKey.RELEVANCE),
            ("popularity", SortKey.POPULARITY),
            ("discount", SortKey.DISCOUNT),
            ("created", SortKey.CREATED),
        ],
    )
    def test_known_keys(self, value, expected):
        assert SortKey.parse(value) == expected

    @pytest.mark.parametrize("value", [None, "", "bogus", "price_desc"])
    def test_unknown_key_falls_back_to_display(self, value):
        """알 수 없는 키는 진열 순서"""
        assert SortKey.parse(value) == SortKey.DISPLAY


class TestSortOrder:
    """정렬 방향 테스트"""

    @pytest.mark.parametrize(
        "order,expected",
        [("asc", False), ("ASC", False), ("desc", True), (None, True), ("sideways", True)],
    )
    def test_is_descending(self, order, expected):
        assert is_descending(order) is expected


class TestBuildSortPlan:
    """정렬 계획 생성 테스트"""

    @pytest.mark.parametrize(
        "sort_by", ["name", "price", "popularity", "discount", "relevance", "bogus"]
    )
    def test_id_is_final_tiebreaker(self, sort_by):
        """모든 정렬은 상품 ID 오름차순으로 끝남"""
        plan = build_sort_plan(sort_by, "desc", "matcha")
        assert str(plan.order_by[-1]) == "products.id ASC"

    def test_column_sort_respects_direction(self):
        plan = build_sort_plan("price", "asc")
        assert str(plan.order_by[0]) == "products.price ASC"

        plan = build_sort_plan("price", "desc")
        assert str(plan.order_by[0]) == "products.price DESC"

    def test_popularity_ignores_direction(self):
        """인기순은 방향과 무관하게 내림차순"""
        asc_plan = build_sort_plan("popularity", "asc")
        desc_plan = build_sort_plan("popularity", "desc")
        assert [str(c) for c in asc_plan.order_by] == [str(c) for c in desc_plan.order_by]
        assert str(asc_plan.order_by[0]) == "products.view_count DESC"

    def test_discount_restricts_to_on_sale(self):
        """할인순은 할인 상품 조건 추가"""
        plan = build_sort_plan("discount", "asc")
        assert plan.key == SortKey.DISCOUNT
        assert len(plan.restrictions) == 1

    def test_other_sorts_have_no_restrictions(self):
        assert build_sort_plan("price", "asc").restrictions == []

    def test_relevance_without_query_uses_newest(self):
        """검색어 없는 관련도 정렬은 최신순"""
        plan = build_sort_plan("relevance", "desc", "   ")
        assert str(plan.order_by[0]) == "products.created_at DESC"

    def test_relevance_with_query_has_score(self):
        plan = build_sort_plan("relevance", "desc", "Matcha")
        assert len(plan.order_by) == 4
        assert "CASE" in str(plan.order_by[0])
        # 같은 점수는 평점, 판매량 순
        assert str(plan.order_by[1]) == "products.rating DESC"
        assert str(plan.order_by[2]) == "products.sold_count DESC"

    def test_display_sort(self):
        plan = build_sort_plan(None, None)
        assert plan.key == SortKey.DISPLAY
        assert str(plan.order_by[0]) == "products.display_order ASC"
