"""
검색 엔진 예외
"""


class ProductSearchError(Exception):
    """상품 검색 에러"""

    pass


class InvalidFilterSpecError(ProductSearchError, ValueError):
    """해석할 수 없는 필터 (잘못된 페이지 파라미터)"""

    pass


class DataAccessError(ProductSearchError):
    """저장소 호출 실패"""

    pass
