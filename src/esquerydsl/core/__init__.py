"""核心模块导出."""

from esquerydsl.core.constants import BoolClauses, QueryStringCharacters, SortDirection
from esquerydsl.core.models import (
    Aggregation,
    QueryDoc,
    QueryItem,
    RangeBounds,
    wrap_query_items,
)
from esquerydsl.core.query_types import (
    AGGREGATION_TYPES,
    QUERY_TYPE_TOKENS,
    QueryType,
    query_type_token,
    resolve_query_type,
)
from esquerydsl.core.utils import canonicalize, sanitize_query_field

__all__ = [
    "BoolClauses",
    "QueryStringCharacters",
    "SortDirection",
    "QueryType",
    "QUERY_TYPE_TOKENS",
    "AGGREGATION_TYPES",
    "query_type_token",
    "resolve_query_type",
    "RangeBounds",
    "QueryItem",
    "Aggregation",
    "QueryDoc",
    "wrap_query_items",
    "sanitize_query_field",
    "canonicalize",
]
