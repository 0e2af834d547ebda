"""
페이지 처리
"""
from dataclasses import dataclass

from catalog_search.search.errors import InvalidFilterSpecError


@dataclass(frozen=True)
class Page:
    """페이지 위치 (1부터 시작)"""

    number: int
    size: int

    def __post_init__(self) -> None:
        # 보정하지 않고 거부
        if self.number < 1:
            raise InvalidFilterSpecError(f"page는 1 이상이어야 합니다: {self.number}")
        if self.size < 1:
            raise InvalidFilterSpecError(f"page_size는 1 이상이어야 합니다: {self.size}")

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size
