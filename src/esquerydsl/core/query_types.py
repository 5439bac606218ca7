"""查询类型定义模块."""

from enum import IntEnum
from typing import Any

from esquerydsl.exceptions import UnsupportedQueryTypeError


class QueryType(IntEnum):
    """支持的 Query DSL 查询类型.

    序号固定，与 DSL 关键字一一对应，见 ``QUERY_TYPE_TOKENS``.
    """

    MATCH = 0
    TERM = 1
    TERMS = 2
    CARDINALITY = 3
    MAX = 4
    WILDCARD = 5
    RANGE = 6
    EXISTS = 7
    QUERY_STRING = 8
    NESTED = 9
    REGEXP = 10

    @property
    def token(self) -> str:
        """DSL 关键字，如 ``QueryType.QUERY_STRING.token == "query_string"``."""
        return QUERY_TYPE_TOKENS[self]


QUERY_TYPE_TOKENS: dict[QueryType, str] = {
    QueryType.MATCH: "match",
    QueryType.TERM: "term",
    QueryType.TERMS: "terms",
    QueryType.CARDINALITY: "cardinality",
    QueryType.MAX: "max",
    QueryType.WILDCARD: "wildcard",
    QueryType.RANGE: "range",
    QueryType.EXISTS: "exists",
    QueryType.QUERY_STRING: "query_string",
    QueryType.NESTED: "nested",
    QueryType.REGEXP: "regexp",
}

# 每个成员都必须有关键字
_missing_tokens = set(QueryType) - set(QUERY_TYPE_TOKENS)
if _missing_tokens:
    raise RuntimeError(f"QueryType members without token: {sorted(_missing_tokens)}")

# 可用于聚合的类型（桶聚合 + 指标聚合）
AGGREGATION_TYPES = frozenset({QueryType.TERMS, QueryType.CARDINALITY, QueryType.MAX})


def resolve_query_type(value: Any) -> QueryType:
    """
    将 QueryType 或整数序号解析为 QueryType.

    Args:
        value: QueryType 成员或整数序号

    Returns:
        对应的 QueryType

    Raises:
        UnsupportedQueryTypeError: 序号超出已知类型范围（包括等于类型数量的序号）
    """
    if isinstance(value, QueryType):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedQueryTypeError(value)
    try:
        return QueryType(value)
    except ValueError:
        raise UnsupportedQueryTypeError(value) from None


def query_type_token(value: Any) -> str:
    """
    获取查询类型对应的 DSL 关键字.

    示例:
        >>> query_type_token(QueryType.MATCH)
        'match'
        >>> query_type_token(8)
        'query_string'

    Raises:
        UnsupportedQueryTypeError: 类型无效时抛出
    """
    return QUERY_TYPE_TOKENS[resolve_query_type(value)]
