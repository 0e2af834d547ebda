from catalog_search.search.engine import ProductSearchEngine, QueryPlan, get_search_engine
from catalog_search.search.errors import (
    DataAccessError,
    InvalidFilterSpecError,
    ProductSearchError,
)
from catalog_search.search.repository import (
    ProductSearchStore,
    SqlProductSearchStore,
    SuggestionSource,
)
from catalog_search.search.sorting import SortKey, SortPlan, build_sort_plan
from catalog_search.search.suggestions import SearchSuggestionService

__all__ = [
    "ProductSearchEngine",
    "QueryPlan",
    "get_search_engine",
    "DataAccessError",
    "InvalidFilterSpecError",
    "ProductSearchError",
    "ProductSearchStore",
    "SqlProductSearchStore",
    "SuggestionSource",
    "SortKey",
    "SortPlan",
    "build_sort_plan",
    "SearchSuggestionService",
]
