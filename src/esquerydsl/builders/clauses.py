"""查询子句构建模块.

负责把 QueryItem 转换为叶子查询，并把 QueryDoc 的子句列表组装为 bool 查询.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from esquerydsl.core.constants import BoolClauses
from esquerydsl.core.models import QueryDoc, QueryItem
from esquerydsl.core.query_types import QueryType, resolve_query_type
from esquerydsl.core.utils import canonicalize, sanitize_query_field
from esquerydsl.exceptions import InvalidValueShapeError
from esquerydsl.typing import DslDict


def serialize_leaf(item: QueryItem, analyze_wildcard: bool = True) -> DslDict:
    """
    将单个 QueryItem 转换为 DSL 子句.

    - 默认: ``{type: {field: value}}``
    - wildcard: 字符串值转小写并开启 case_insensitive，非字符串值按默认处理
    - query_string: 对值做保留字符转义
    - nested: 忽略 field，直接输出嵌套文档的 bool 查询

    Args:
        item: 查询子句
        analyze_wildcard: query_string 查询的 analyze_wildcard 参数

    Returns:
        DSL 子句字典

    Raises:
        UnsupportedQueryTypeError: item.type 无效时抛出
        InvalidValueShapeError: query_string 的值不是字符串时抛出
    """
    query_type = resolve_query_type(item.type)

    if query_type == QueryType.NESTED:
        if not isinstance(item.value, QueryDoc):
            raise InvalidValueShapeError("nested query requires a QueryDoc value")
        return wrap_bool(item.value, analyze_wildcard=analyze_wildcard)

    if query_type == QueryType.QUERY_STRING:
        return _serialize_query_string(item, analyze_wildcard)

    if query_type == QueryType.WILDCARD and isinstance(item.value, str):
        return {
            query_type.token: {
                item.field: {
                    "case_insensitive": True,
                    "value": item.value.lower(),
                }
            }
        }

    return {query_type.token: {item.field: canonicalize(item.value)}}


def _serialize_query_string(item: QueryItem, analyze_wildcard: bool) -> DslDict:
    if not isinstance(item.value, str):
        raise InvalidValueShapeError(
            f"query_string requires a text value, got {type(item.value).__name__}"
        )
    return {
        QueryType.QUERY_STRING.token: {
            "analyze_wildcard": analyze_wildcard,
            "fields": [item.field],
            "query": sanitize_query_field(item.value),
        }
    }


def _serialize_list(
    items: Sequence[QueryItem], analyze_wildcard: bool
) -> list[DslDict]:
    return [serialize_leaf(item, analyze_wildcard=analyze_wildcard) for item in items]


def wrap_bool(doc: QueryDoc, analyze_wildcard: bool = True) -> DslDict:
    """
    将 QueryDoc 的子句列表组装为 bool 查询.

    构建如下结构（空列表不输出，minimum_should_match 为 0 时不输出）:
        {
            "bool": {
                "must": [...],
                "must_not": [...],
                "should": [...],
                "filter": [...],
                "minimum_should_match": 1
            }
        }

    Args:
        doc: 查询文档
        analyze_wildcard: 透传给 query_string 子句

    Returns:
        bool 查询字典
    """
    clauses: dict[str, Any] = {}
    for key, items in (
        (BoolClauses.MUST, doc.and_),
        (BoolClauses.MUST_NOT, doc.not_),
        (BoolClauses.SHOULD, doc.or_),
        (BoolClauses.FILTER, doc.filter),
    ):
        if items:
            clauses[key] = _serialize_list(items, analyze_wildcard)

    if doc.minimum_should_match:
        clauses[BoolClauses.MINIMUM_SHOULD_MATCH] = doc.minimum_should_match

    return {"bool": clauses}
