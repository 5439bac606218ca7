"""聚合构建模块."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from esquerydsl.core.models import Aggregation, QueryDoc
from esquerydsl.core.query_types import query_type_token
from esquerydsl.core.utils import canonicalize
from esquerydsl.exceptions import InvalidAggregationError
from esquerydsl.typing import DslDict

logger = logging.getLogger(__name__)


def _bucket_body(agg: Aggregation) -> DslDict:
    body: dict[str, Any] = {"field": agg.field}
    if agg.order is not None:
        body["order"] = canonicalize(agg.order)
    if agg.size is not None:
        body["size"] = agg.size
    return body


def build_terms_aggregations(aggs: Sequence[Aggregation]) -> DslDict | None:
    """
    构建逐层嵌套的桶聚合.

    列表中第 N 个聚合嵌套在第 N-1 个聚合的 aggregations 中，
    从最后一个聚合开始向前折叠:
        {
            "first": {
                "aggregations": {"second": {"terms": {"field": "b"}}},
                "terms": {"field": "a", "size": 100}
            }
        }

    Args:
        aggs: 有序的桶聚合列表

    Returns:
        聚合字典，列表为空时返回 None

    Raises:
        UnsupportedQueryTypeError: 聚合类型无效时抛出
    """
    nested: dict[str, Any] | None = None
    for agg in reversed(aggs):
        token = query_type_token(agg.type)
        body: dict[str, Any] = {token: _bucket_body(agg)}
        if nested is not None:
            body["aggregations"] = nested
        nested = {agg.name: canonicalize(body)}
    return nested


def build_aggregations(doc: QueryDoc) -> DslDict | None:
    """
    构建查询文档的聚合部分.

    必须至少有一个桶聚合，cardinality 聚合才会输出；
    cardinality 聚合作为最外层桶聚合的同级节点，不会嵌入桶聚合链中。

    Args:
        doc: 查询文档

    Returns:
        聚合字典，没有桶聚合时返回 None

    Raises:
        UnsupportedQueryTypeError: 聚合类型无效时抛出
        InvalidAggregationError: 同级聚合名称重复时抛出
    """
    aggregations = build_terms_aggregations(doc.terms_aggregations)
    if aggregations is None:
        if doc.cardinality_aggregations:
            logger.warning(
                f"忽略 {len(doc.cardinality_aggregations)} 个 cardinality 聚合: "
                f"没有 terms 聚合, index={doc.index}"
            )
        return None

    for agg in doc.cardinality_aggregations:
        if agg.name in aggregations:
            raise InvalidAggregationError(f"Duplicate aggregation name: {agg.name!r}")
        aggregations[agg.name] = {query_type_token(agg.type): {"field": agg.field}}

    return canonicalize(aggregations)
