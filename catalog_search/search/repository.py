"""
상품 검색 저장소
검색 엔진이 사용하는 데이터 접근 인터페이스와 SQLAlchemy 구현
"""
import logging
from enum import Enum
from typing import List, Protocol, Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from catalog_search.models.catalog import Brand, Category, Product
from catalog_search.search.errors import DataAccessError
from catalog_search.search.fields import lowered, visibility_clause

logger = logging.getLogger(__name__)


class SuggestionSource(str, Enum):
    """검색어 추천 출처"""

    PRODUCT = "product"
    BRAND = "brand"
    CATEGORY = "category"


class ProductSearchStore(Protocol):
    """검색 엔진이 요구하는 데이터 접근 기능"""

    async def count(self, criteria: Sequence[ColumnElement[bool]]) -> int:
        """조건에 맞는 상품 수"""
        ...

    async def fetch_ids(
        self,
        criteria: Sequence[ColumnElement[bool]],
        ordering: Sequence[ColumnElement],
        offset: int,
        limit: int,
    ) -> List[int]:
        """조건에 맞는 상품 ID (정렬 + 페이지 적용)"""
        ...

    async def category_family_ids(self, category_id: int) -> List[int]:
        """카테고리 자신과 직계 하위 카테고리 ID"""
        ...

    async def distinct_names(
        self,
        source: SuggestionSource,
        term: str,
        limit: int,
    ) -> List[str]:
        """term을 포함하는 이름 목록 (중복 제거)"""
        ...


class SqlProductSearchStore:
    """SQLAlchemy AsyncSession 기반 저장소"""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _base_query(*columns) -> Select:
        """브랜드/카테고리명을 검색 필드로 쓰기 위한 조인"""
        return (
            select(*columns)
            .select_from(Product)
            .outerjoin(Brand, Product.brand_id == Brand.id)
            .outerjoin(Category, Product.category_id == Category.id)
        )

    async def _execute(self, stmt, operation: str):
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"상품 검색 쿼리 실패 ({operation}): {e}")
            raise DataAccessError(f"{operation} 실패: {e}") from e

    async def count(self, criteria: Sequence[ColumnElement[bool]]) -> int:
        stmt = self._base_query(func.count(Product.id)).where(*criteria)
        result = await self._execute(stmt, "count")
        return int(result.scalar_one())

    async def fetch_ids(
        self,
        criteria: Sequence[ColumnElement[bool]],
        ordering: Sequence[ColumnElement],
        offset: int,
        limit: int,
    ) -> List[int]:
        stmt = (
            self._base_query(Product.id)
            .where(*criteria)
            .order_by(*ordering)
            .offset(offset)
            .limit(limit)
        )
        result = await self._execute(stmt, "fetch_ids")
        return list(result.scalars().all())

    async def category_family_ids(self, category_id: int) -> List[int]:
        stmt = select(Category.id).where(
            or_(Category.id == category_id, Category.parent_id == category_id)
        )
        result = await self._execute(stmt, "category_family_ids")
        return list(result.scalars().all())

    async def distinct_names(
        self,
        source: SuggestionSource,
        term: str,
        limit: int,
    ) -> List[str]:
        if source == SuggestionSource.PRODUCT:
            column = Product.name
            conditions = [visibility_clause()]
        elif source == SuggestionSource.BRAND:
            column = Brand.name
            conditions = [Brand.is_active.is_(True), Brand.is_deleted.is_(False)]
        else:
            column = Category.name
            conditions = [Category.is_active.is_(True), Category.is_deleted.is_(False)]

        stmt = (
            select(column)
            .where(*conditions, lowered(column).contains(term, autoescape=True))
            .distinct()
            .order_by(column)
            .limit(limit)
        )
        result = await self._execute(stmt, f"distinct_names:{source.value}")
        return list(result.scalars().all())
