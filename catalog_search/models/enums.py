"""
카탈로그 열거형 정의
DB에는 정수값으로 저장됨
"""
from enum import Enum, IntEnum


class ProductStatus(IntEnum):
    """상품 상태"""

    DRAFT = 0
    ACTIVE = 1  # 판매중
    INACTIVE = 2
    OUT_OF_STOCK = 3
    DISCONTINUED = 4
    COMING_SOON = 5


class ProductCondition(IntEnum):
    """상품 컨디션"""

    NEW = 1
    LIKE_NEW = 2
    USED = 3
    REFURBISHED = 4
    DAMAGED = 5


class WeightUnit(IntEnum):
    """무게 단위"""

    GRAM = 1
    KILOGRAM = 2
    POUND = 3
    OUNCE = 4


class AuthenticityLevel(IntEnum):
    """정품 인증 수준"""

    UNKNOWN = 0
    NOT_VERIFIED = 1
    BASIC = 2
    VERIFIED = 3
    PREMIUM = 4
    CERTIFIED = 5
    DIRECT_IMPORT = 6
    AUTHORIZED = 7


class AgeRestriction(IntEnum):
    """연령 제한"""

    NONE = 0
    UNDER_3 = 1
    TEEN = 13
    ADULT = 18
    ADULT_PLUS = 21


class JapaneseRegion(IntEnum):
    """일본 내 원산지 지역"""

    TOKYO = 1
    OSAKA = 2
    KYOTO = 3
    HOKKAIDO = 4
    OKINAWA = 5
    HIROSHIMA = 6
    FUKUOKA = 7
    NAGOYA = 8
    KOBE = 9
    YOKOHAMA = 10
    KANTO = 20
    KANSAI = 21
    CHUBU = 22
    TOHOKU = 23
    CHUGOKU = 24
    SHIKOKU = 25
    KYUSHU = 26
    OTHER = 99


class TagMatchMode(str, Enum):
    """태그 매칭 방식"""

    ALL = "ALL"  # 모든 태그 포함
    ANY = "ANY"  # 하나 이상 포함
