"""
상품 검색 엔진
필터 조합 -> 텍스트 검색 -> 태그 -> 전체 수 -> 정렬 -> 페이지 순으로 쿼리 계획을 만들고 실행
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.config import Settings, get_settings
from catalog_search.models.filter import FilterSpec
from catalog_search.models.result import ResultPage
from catalog_search.search.errors import DataAccessError
from catalog_search.search.pager import Page
from catalog_search.search.predicates import compose_filters
from catalog_search.search.repository import ProductSearchStore, SqlProductSearchStore
from catalog_search.search.sorting import SortPlan, build_sort_plan
from catalog_search.search.tag_filter import build_tag_clauses
from catalog_search.search.text_search import build_text_clause

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryPlan:
    """실행 전 쿼리 계획"""

    criteria: List[ColumnElement[bool]]
    sort: SortPlan
    page: Page


class ProductSearchEngine:
    """상품 검색 엔진 (호출 간 상태 없음)"""

    def __init__(
        self,
        store: ProductSearchStore,
        settings: Optional[Settings] = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_settings()

    async def build_plan(self, spec: FilterSpec) -> QueryPlan:
        """
        쿼리 계획 생성

        하위 카테고리 확장이 요청되면 카테고리 ID 조회를 위해 저장소를 한 번 호출함

        Raises:
            InvalidFilterSpecError: page 또는 page_size가 1 미만
        """
        page = Page(number=spec.page, size=spec.page_size)

        family_ids = None
        if spec.category_id is not None and spec.include_subcategories:
            family_ids = await self._store.category_family_ids(spec.category_id)

        criteria = compose_filters(spec, family_ids)

        text_clause = build_text_clause(spec.search, self._settings.search_min_term_length)
        if text_clause is not None:
            criteria.append(text_clause)

        criteria.extend(build_tag_clauses(spec, self._settings.search_tag_join_enabled))

        sort = build_sort_plan(spec.sort_by, spec.sort_order, spec.search)
        criteria.extend(sort.restrictions)

        return QueryPlan(criteria=criteria, sort=sort, page=page)

    async def execute(self, plan: QueryPlan) -> ResultPage:
        """계획 실행: 전체 수 1회 + 페이지 조회 1회"""
        total_count = await self._store.count(plan.criteria)

        items: List[int] = []
        if total_count > plan.page.offset:
            items = await self._store.fetch_ids(
                plan.criteria,
                plan.sort.order_by,
                plan.page.offset,
                plan.page.limit,
            )

        return ResultPage(
            items=items,
            total_count=total_count,
            page=plan.page.number,
            page_size=plan.page.size,
        )

    async def search(self, spec: FilterSpec) -> ResultPage:
        """
        상품 검색

        Args:
            spec: 검증된 검색 필터

        Returns:
            ResultPage (일치 항목이 없어도 에러가 아님)

        Raises:
            InvalidFilterSpecError: 잘못된 페이지 파라미터
            DataAccessError: 저장소 호출 실패 (재시도 없음)
        """
        # 페이지 검증은 저장소 호출 전에
        Page(number=spec.page, size=spec.page_size)

        try:
            plan = await self.build_plan(spec)
            result = await self.execute(plan)
        except DataAccessError:
            logger.error(f"상품 검색 실패: search={spec.search!r}, sort={spec.sort_by!r}")
            raise
        except asyncio.CancelledError:
            logger.warning(f"상품 검색 취소됨: search={spec.search!r}")
            raise

        logger.info(
            f"상품 검색 완료: search={spec.search!r}, "
            f"filters={spec.applied_filters_count()}, sort={plan.sort.key.value}, "
            f"total={result.total_count}"
        )
        return result


def get_search_engine(
    session: AsyncSession,
    settings: Optional[Settings] = None,
) -> ProductSearchEngine:
    """세션 기반 검색 엔진 생성"""
    return ProductSearchEngine(SqlProductSearchStore(session), settings)
