"""
검색 필터 모델 정의
상위 요청 검증 레이어를 통과한 상품 검색/필터/정렬/페이지 파라미터
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from catalog_search.models.enums import (
    AgeRestriction,
    AuthenticityLevel,
    JapaneseRegion,
    ProductCondition,
    ProductStatus,
    TagMatchMode,
    WeightUnit,
)


class FilterSpec(BaseModel):
    """
    상품 검색 필터

    모든 필터는 선택값이며, 페이지 범위는 검색 엔진이 확인함
    (min > max 같은 모순된 조합은 검증하지 않고 빈 결과가 됨)
    """

    # 분류
    category_id: Optional[int] = Field(None, description="카테고리 ID")
    include_subcategories: bool = Field(default=False, description="직계 하위 카테고리 포함")
    brand_id: Optional[int] = Field(None, description="브랜드 ID")

    # 가격/평점/재고
    min_price: Optional[Decimal] = Field(None, description="최소 가격")
    max_price: Optional[Decimal] = Field(None, description="최대 가격")
    min_rating: Optional[Decimal] = Field(None, description="최소 평점")
    in_stock_only: Optional[bool] = Field(None, description="재고 있는 상품만 (백오더 포함)")
    min_stock: Optional[int] = Field(None, description="최소 재고")
    max_stock: Optional[int] = Field(None, description="최대 재고")
    on_sale_only: Optional[bool] = Field(None, description="할인 상품만")
    has_discount: Optional[bool] = Field(None, description="할인가 존재 상품만")
    featured_only: Optional[bool] = Field(None, description="추천 상품만 (좁히기 전용)")
    new_only: Optional[bool] = Field(None, description="신상품만 (좁히기 전용)")

    # 정확히 일치하는 플래그 (False도 조건으로 적용)
    is_featured: Optional[bool] = None
    is_new: Optional[bool] = None
    is_bestseller: Optional[bool] = None
    is_limited_edition: Optional[bool] = None
    is_gift_wrapping_available: Optional[bool] = None
    allow_backorder: Optional[bool] = None
    allow_preorder: Optional[bool] = None

    # 상태/원산지
    status: Optional[ProductStatus] = None
    condition: Optional[ProductCondition] = None
    origin: Optional[str] = Field(None, description="원산지 (부분 일치)")
    japanese_region: Optional[JapaneseRegion] = None
    authenticity_level: Optional[AuthenticityLevel] = None
    age_restriction: Optional[AgeRestriction] = None

    # 무게
    min_weight: Optional[Decimal] = None
    max_weight: Optional[Decimal] = None
    weight_unit: Optional[WeightUnit] = None

    # 기간
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None
    available_from: Optional[datetime] = None
    available_until: Optional[datetime] = None

    # 텍스트/태그 검색
    search: Optional[str] = Field(None, description="자유 검색어")
    tags_search: Optional[str] = Field(None, description="태그 문자열 부분 검색")
    tag_names: List[str] = Field(default_factory=list, description="태그 이름 목록")
    tag_ids: List[int] = Field(default_factory=list, description="태그 ID 목록")
    tag_match_mode: TagMatchMode = Field(default=TagMatchMode.ANY, description="태그 매칭 방식")

    # 정렬/페이지
    sort_by: Optional[str] = Field(default="created", description="정렬 키")
    sort_order: Optional[str] = Field(default="desc", description="asc | desc")
    page: int = Field(default=1, description="페이지 번호 (1부터)")
    page_size: int = Field(default=20, description="페이지 크기")

    model_config = {
        "json_schema_extra": {
            "example": {
                "search": "japanese snack",
                "category_id": 3,
                "min_price": 50000,
                "max_price": 300000,
                "tag_names": ["New Arrival", "Best Seller"],
                "tag_match_mode": "ALL",
                "sort_by": "relevance",
                "page": 1,
                "page_size": 20,
            }
        }
    }

    @property
    def has_search(self) -> bool:
        """공백이 아닌 검색어 존재 여부"""
        return bool(self.search and self.search.strip())

    def applied_filters_count(self) -> int:
        """적용된 필터 수 (응답 메타데이터/로그용)"""
        count = 0

        if self.has_search:
            count += 1
        if self.tags_search and self.tags_search.strip():
            count += 1
        if self.tag_names:
            count += 1
        if self.tag_ids:
            count += 1
        if self.origin and self.origin.strip():
            count += 1

        # 좁히기 전용 플래그는 True일 때만 필터로 취급
        one_way_flags = [
            self.in_stock_only,
            self.on_sale_only,
            self.has_discount,
            self.featured_only,
            self.new_only,
        ]
        count += sum(1 for flag in one_way_flags if flag)

        optional_values = [
            self.category_id,
            self.brand_id,
            self.min_price,
            self.max_price,
            self.min_rating,
            self.min_stock,
            self.max_stock,
            self.is_featured,
            self.is_new,
            self.is_bestseller,
            self.is_limited_edition,
            self.is_gift_wrapping_available,
            self.allow_backorder,
            self.allow_preorder,
            self.status,
            self.condition,
            self.japanese_region,
            self.authenticity_level,
            self.age_restriction,
            self.min_weight,
            self.max_weight,
            self.weight_unit,
            self.created_from,
            self.created_to,
            self.available_from,
            self.available_until,
        ]
        count += sum(1 for value in optional_values if value is not None)

        return count
