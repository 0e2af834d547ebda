# Pydantic Models
from catalog_search.models.enums import (
    AgeRestriction,
    AuthenticityLevel,
    JapaneseRegion,
    ProductCondition,
    ProductStatus,
    TagMatchMode,
    WeightUnit,
)
from catalog_search.models.filter import FilterSpec
from catalog_search.models.result import ResultPage

__all__ = [
    # Enums
    "AgeRestriction",
    "AuthenticityLevel",
    "JapaneseRegion",
    "ProductCondition",
    "ProductStatus",
    "TagMatchMode",
    "WeightUnit",
    # Request/Response models
    "FilterSpec",
    "ResultPage",
]
