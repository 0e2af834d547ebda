"""
pytest 공통 fixture
인메모리 SQLite(aiosqlite) 카탈로그
"""
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict

import pytest
import pytest_asyncio

from catalog_search.config import Settings
from catalog_search.database import Base, build_engine, make_session_factory
from catalog_search.models.catalog import Brand, Category, Product, ProductTag, Tag
from catalog_search.models.enums import (
    AgeRestriction,
    AuthenticityLevel,
    JapaneseRegion,
    ProductCondition,
    ProductStatus,
    WeightUnit,
)

BASE_TIME = datetime(2025, 1, 1, 9, 0, 0)


@pytest.fixture
def settings() -> Settings:
    """.env를 읽지 않는 기본 설정"""
    return Settings(_env_file=None)


@pytest_asyncio.fixture
async def engine():
    """인메모리 비동기 엔진"""
    engine = build_engine("sqlite+aiosqlite://", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """테스트용 세션"""
    async with make_session_factory(engine)() as session:
        yield session


def _product(sku: str, name: str, day: int, **kwargs) -> Product:
    defaults = {
        "stock": 10,
        "rating": Decimal("3.00"),
        "view_count": 0,
        "sold_count": 0,
        "display_order": 0,
    }
    defaults.update(kwargs)
    return Product(
        sku=sku,
        name=name,
        created_at=BASE_TIME + timedelta(days=day),
        updated_at=BASE_TIME + timedelta(days=day),
        **defaults,
    )


@pytest_asyncio.fixture
async def catalog(session) -> Dict[str, int]:
    """
    샘플 카탈로그

    노출 상품 9개 (pocky_choco ~ bargain_pen),
    비노출 상품 3개 (비활성, 삭제, 임시저장)

    Returns:
        키 -> 상품 ID
    """
    glico = Brand(name="Glico")
    ito_en = Brand(name="Ito En")
    sony = Brand(name="Sony")
    old_glico = Brand(name="Glico Old", is_deleted=True)
    session.add_all([glico, ito_en, sony, old_glico])

    food = Category(name="Food")
    electronics = Category(name="Electronics")
    session.add_all([food, electronics])
    await session.flush()

    snacks = Category(name="Snacks", parent_id=food.id)
    tea = Category(name="Tea", parent_id=food.id)
    session.add_all([snacks, tea])
    await session.flush()

    # Food의 손자 카테고리
    crackers = Category(name="Crackers", parent_id=snacks.id)
    session.add(crackers)

    new_arrival = Tag(name="New Arrival", slug="new-arrival")
    best_seller = Tag(name="Best Seller", slug="best-seller")
    gift = Tag(name="Gift", slug="gift")
    session.add_all([new_arrival, best_seller, gift])
    await session.flush()

    products = {
        "pocky_choco": _product(
            "GLC-001", "Pocky Chocolate", 1,
            brand_id=glico.id, category_id=snacks.id,
            price=Decimal("300"), original_price=Decimal("400"),
            tags="snack,chocolate,new-arrival",
            description="Classic japanese biscuit stick",
            origin="Osaka, Japan", japanese_region=JapaneseRegion.OSAKA,
            rating=Decimal("4.50"), sold_count=500, view_count=1000,
            is_featured=True,
        ),
        "pocky_berry": _product(
            "GLC-002", "Pocky Strawberry", 2,
            brand_id=glico.id, category_id=snacks.id,
            price=Decimal("300"), stock=0, allow_backorder=True,
            tags="snack,strawberry",
            rating=Decimal("4.00"), sold_count=300, view_count=800,
        ),
        "matcha": _product(
            "TEA-001", "Matcha", 3,
            brand_id=ito_en.id, category_id=tea.id,
            price=Decimal("1500"), original_price=Decimal("2000"), stock=5,
            tags="tea,green", meta_keywords="matcha green tea",
            rating=Decimal("4.80"), sold_count=50, view_count=100,
            weight=Decimal("100"), weight_unit=WeightUnit.GRAM,
            is_new=True,
        ),
        "matcha_set": _product(
            "TEA-002", "Premium Matcha Set", 4,
            brand_id=ito_en.id, category_id=tea.id,
            price=Decimal("5000"), original_price=Decimal("10000"), stock=3,
            tags="tea,gift",
            rating=Decimal("4.90"), sold_count=20, view_count=50,
            is_featured=True, is_limited_edition=True,
            weight=Decimal("500"), weight_unit=WeightUnit.GRAM,
            available_from=datetime(2025, 2, 1), available_until=datetime(2025, 3, 1),
        ),
        "latte_powder": _product(
            "TEA-003", "Green Tea Latte Powder", 5,
            brand_id=ito_en.id, category_id=tea.id,
            price=Decimal("800"), stock=20,
            tags="tea,latte",
            description="Made with real matcha from Kyoto",
            rating=Decimal("3.50"), sold_count=10, view_count=30,
            weight=Decimal("250"), weight_unit=WeightUnit.GRAM,
        ),
        "snack_box": _product(
            "SNK-100", "Japanese Snack Box", 6,
            category_id=snacks.id,
            price=Decimal("3000"), stock=7,
            tags="snack,japanese,gift",
            rating=Decimal("4.20"), sold_count=100, view_count=400,
            available_from=datetime(2025, 1, 15), available_until=datetime(2025, 6, 30),
        ),
        "rice_cracker": _product(
            "SNK-200", "Rice Cracker", 7,
            category_id=crackers.id,
            price=Decimal("500"), stock=15,
            short_description="Japanese rice cracker",
            description="Crunchy snack made in Niigata",
            rating=Decimal("3.90"), sold_count=60, view_count=90,
            age_restriction=AgeRestriction.TEEN,
        ),
        "headphones": _product(
            "SNY-001", "Wireless Headphones", 8,
            brand_id=sony.id, category_id=electronics.id,
            price=Decimal("20000"), original_price=Decimal("25000"), stock=2,
            tags="audio,gift",
            rating=Decimal("4.60"), sold_count=200, view_count=2000,
            display_order=1,
            weight=Decimal("0.30"), weight_unit=WeightUnit.KILOGRAM,
            authenticity_level=AuthenticityLevel.CERTIFIED,
        ),
        # 정가가 판매가보다 낮음: 할인 상품 아님
        "bargain_pen": _product(
            "PEN-001", "Bargain Pen", 9,
            category_id=electronics.id,
            price=Decimal("150"), original_price=Decimal("100"), stock=0,
            rating=Decimal("2.00"), sold_count=5, view_count=10,
            condition=ProductCondition.LIKE_NEW,
        ),
        # 비노출
        "pocky_matcha": _product(
            "GLC-003", "Pocky Matcha", 10,
            brand_id=glico.id, category_id=snacks.id,
            price=Decimal("300"), is_active=False,
        ),
        "pocky_almond": _product(
            "GLC-004", "Pocky Almond", 11,
            brand_id=glico.id, category_id=snacks.id,
            price=Decimal("300"), is_deleted=True,
        ),
        "pocky_banana": _product(
            "GLC-005", "Pocky Banana", 12,
            brand_id=glico.id, category_id=snacks.id,
            price=Decimal("300"), status=ProductStatus.DRAFT,
        ),
    }
    session.add_all(products.values())
    await session.flush()

    links = {
        "pocky_choco": [new_arrival, best_seller],
        "pocky_berry": [new_arrival],
        "matcha": [gift],
        "matcha_set": [best_seller, gift],
        "snack_box": [gift],
        "headphones": [gift],
    }
    for key, tags in links.items():
        for tag in tags:
            session.add(ProductTag(product_id=products[key].id, tag_id=tag.id))

    await session.commit()

    ids = {key: product.id for key, product in products.items()}
    ids.update(
        {
            "tag_new_arrival": new_arrival.id,
            "tag_best_seller": best_seller.id,
            "tag_gift": gift.id,
            "category_food": food.id,
            "category_snacks": snacks.id,
            "category_tea": tea.id,
            "category_crackers": crackers.id,
            "brand_glico": glico.id,
        }
    )
    return ids


@pytest.fixture
def visible_ids(catalog) -> set:
    """노출 상품 ID 집합"""
    keys = [
        "pocky_choco",
        "pocky_berry",
        "matcha",
        "matcha_set",
        "latte_powder",
        "snack_box",
        "rice_cracker",
        "headphones",
        "bargain_pen",
    ]
    return {catalog[key] for key in keys}
