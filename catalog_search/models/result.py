"""
검색 결과 모델
"""
import math
from typing import List

from pydantic import BaseModel, Field


class ResultPage(BaseModel):
    """상품 검색 결과 페이지"""

    items: List[int] = Field(default_factory=list, description="정렬된 상품 ID 목록")
    total_count: int = Field(..., ge=0, description="페이지와 무관한 전체 일치 수")
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0
