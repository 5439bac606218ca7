"""查询文档数据模型定义模块.

提供构建查询请求所需的值类型:
    - RangeBounds: range 查询的边界
    - QueryItem: 单个查询子句（叶子或嵌套的 bool 查询）
    - Aggregation: 聚合配置
    - QueryDoc: 完整的查询请求文档
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any, Union

from esquerydsl.core.constants import SortDirection
from esquerydsl.core.query_types import (
    AGGREGATION_TYPES,
    QueryType,
    resolve_query_type,
)
from esquerydsl.exceptions import (
    InvalidAggregationError,
    InvalidValueShapeError,
    UnsupportedQueryTypeError,
)

# datetime 是 date 的子类
_SCALAR_TYPES = (str, int, float, bool, Decimal, date)


@dataclasses.dataclass(frozen=True)
class RangeBounds:
    """range 查询边界.

    只输出设置过的字段，至少需要一个边界。

    Attributes:
        gt: 大于
        gte: 大于等于
        lt: 小于
        lte: 小于等于
        format: 日期格式，如 "yyyy-MM-dd"
        time_zone: 时区，如 "+08:00"

    Examples:
        >>> RangeBounds(gte="2015-01-01").to_es_format()
        {'gte': '2015-01-01'}
    """

    gt: Any = None
    gte: Any = None
    lt: Any = None
    lte: Any = None
    format: str | None = None  # noqa: A003
    time_zone: str | None = None

    def __post_init__(self) -> None:
        bounds = (self.gt, self.gte, self.lt, self.lte)
        if all(bound is None for bound in bounds):
            raise InvalidValueShapeError("RangeBounds requires at least one bound")
        for bound in bounds:
            if bound is not None and not _is_scalar(bound):
                raise InvalidValueShapeError(
                    f"Range bound must be a scalar, got {type(bound).__name__}"
                )

    def to_es_format(self) -> dict[str, Any]:
        """转换为 Elasticsearch range 查询的字段体."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


# 查询值的合法形态
QueryValue = Union[
    str, int, float, bool, Decimal, date, Mapping, RangeBounds, list, tuple, "QueryDoc"
]


def _is_scalar(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, _SCALAR_TYPES)


def _is_json_value(value: Any) -> bool:
    """标量、合法值的列表或键为字符串的字典（逐层检查）."""
    if _is_scalar(value):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_json_value(v) for v in value)
    if isinstance(value, Mapping):
        return all(
            isinstance(k, str) and _is_json_value(v) for k, v in value.items()
        )
    return False


def _is_structured(value: Any) -> bool:
    if isinstance(value, RangeBounds):
        return True
    return isinstance(value, Mapping) and _is_json_value(value)


def _is_multi(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(_is_scalar(v) for v in value)


@dataclasses.dataclass(frozen=True)
class QueryItem:
    """查询子句.

    例如 match 查询: ``QueryItem(field="title", value="Search", type=QueryType.MATCH)``
    会生成 ``{"match": {"title": "Search"}}``。

    各类型接受的值形态:
        - NESTED: QueryDoc（field 被忽略）
        - QUERY_STRING: 字符串
        - RANGE: 字典或 RangeBounds
        - TERMS: 标量或标量列表
        - 其他类型: 标量或字典

    type 无效时构造不会失败，编码时抛出 UnsupportedQueryTypeError。

    Attributes:
        field: 文档字段名
        value: 查询值
        type: 查询类型
    """

    field: str
    value: QueryValue
    type: QueryType | int = QueryType.MATCH  # noqa: A003

    # value 可能是列表或字典，不支持哈希
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """按查询类型校验值形态."""
        try:
            query_type = resolve_query_type(self.type)
        except UnsupportedQueryTypeError:
            return
        _validate_value_shape(query_type, self.value)


def _validate_value_shape(query_type: QueryType, value: Any) -> None:
    if query_type == QueryType.NESTED:
        if not isinstance(value, QueryDoc):
            raise InvalidValueShapeError(
                f"nested query requires a QueryDoc value, got {type(value).__name__}"
            )
        return

    if isinstance(value, QueryDoc):
        raise InvalidValueShapeError(
            f"{query_type.token} query does not accept a QueryDoc value"
        )

    if query_type == QueryType.QUERY_STRING:
        legal = isinstance(value, str)
    elif query_type == QueryType.RANGE:
        legal = _is_structured(value)
    elif query_type == QueryType.TERMS:
        legal = _is_scalar(value) or _is_multi(value)
    else:
        legal = _is_scalar(value) or _is_structured(value)

    if not legal:
        raise InvalidValueShapeError(
            f"{query_type.token} query does not accept value {value!r}"
        )


def _validate_order(order: Mapping[str, str] | None) -> None:
    if order is None:
        return
    if not isinstance(order, Mapping):
        raise InvalidAggregationError(f"Aggregation order must be a mapping: {order!r}")
    for key, direction in order.items():
        if direction not in SortDirection.CHOICES:
            raise InvalidAggregationError(
                f"Invalid order direction for '{key}': {direction!r}, "
                f"must be one of {SortDirection.CHOICES}"
            )


@dataclasses.dataclass(frozen=True)
class Aggregation:
    """
    聚合配置.

    Attributes:
        type: 聚合类型，只能是 TERMS、CARDINALITY、MAX
        name: 聚合名称，同级内唯一
        field: 聚合字段
        size: 返回桶数量（可选）
        order: 桶排序，如 {"_count": "desc"}（可选）
    """

    type: QueryType | int  # noqa: A003
    name: str
    field: str
    size: int | None = None
    order: Mapping[str, str] | None = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """
        校验聚合配置.

        说明:
            ES 聚合名称不能包含以下字符：
            - 双引号 ("): JSON 解析问题
            - 点号 (.): ES 使用点号作为字段路径分隔符
            - 空格 ( ): 避免 URL 编码问题
        """
        if not self.name or not isinstance(self.name, str):
            raise InvalidAggregationError("Aggregation name cannot be empty")
        for char in ('"', ".", " "):
            if char in self.name:
                raise InvalidAggregationError(
                    f"Aggregation name cannot contain {char!r}: {self.name!r}"
                )
        size = self.size
        if size is not None and (
            isinstance(size, bool) or not isinstance(size, int) or size < 0
        ):
            raise InvalidAggregationError(f"Aggregation size must be >= 0, got {size!r}")
        _validate_order(self.order)

        try:
            agg_type = resolve_query_type(self.type)
        except UnsupportedQueryTypeError:
            return
        if agg_type not in AGGREGATION_TYPES:
            raise InvalidAggregationError(
                f"{agg_type.token} is not an aggregation type"
            )


@dataclasses.dataclass
class QueryDoc:
    """
    查询请求文档.

    嵌套在 QueryItem 中时只使用子句列表和 minimum_should_match，
    分页、排序、聚合等字段会被忽略。

    Attributes:
        index: 索引名称（仅用于批量查询的请求头）
        size: 返回文档数量，0 也会输出
        from_: 起始偏移
        sort: 排序列表，如 [{"id": "asc"}]
        search_after: 游标值列表
        and_: must 子句
        or_: should 子句
        not_: must_not 子句
        filter: filter 子句
        page_size: 保留字段，不参与编码
        track_total_hits: 是否精确统计总命中数
        minimum_should_match: should 子句至少匹配数量，0 表示不设置
        terms_aggregations: 按顺序逐层嵌套的桶聚合
        cardinality_aggregations: 挂在最外层桶聚合旁的指标聚合
        source: 返回字段列表
    """

    index: str = ""
    size: int = 0
    from_: int = 0
    sort: list[Mapping[str, str]] = dataclasses.field(default_factory=list)
    search_after: list[Any] = dataclasses.field(default_factory=list)
    and_: list[QueryItem] = dataclasses.field(default_factory=list)
    or_: list[QueryItem] = dataclasses.field(default_factory=list)
    not_: list[QueryItem] = dataclasses.field(default_factory=list)
    filter: list[QueryItem] = dataclasses.field(default_factory=list)  # noqa: A003
    page_size: int = 0
    track_total_hits: bool = False
    minimum_should_match: int = 0
    terms_aggregations: list[Aggregation] = dataclasses.field(default_factory=list)
    cardinality_aggregations: list[Aggregation] = dataclasses.field(
        default_factory=list
    )
    source: list[str] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("size", "from_", "minimum_should_match"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidValueShapeError(f"{name} must be an int >= 0, got {value!r}")

        for entry in self.sort:
            if not isinstance(entry, Mapping):
                raise InvalidValueShapeError(f"Sort entry must be a mapping: {entry!r}")
            for key, direction in entry.items():
                if direction not in SortDirection.CHOICES:
                    raise InvalidValueShapeError(
                        f"Invalid sort direction for '{key}': {direction!r}"
                    )

        for name in ("and_", "or_", "not_", "filter"):
            for item in getattr(self, name):
                if not isinstance(item, QueryItem):
                    raise InvalidValueShapeError(
                        f"{name} expects QueryItem values, got {type(item).__name__}"
                    )

        for name in ("terms_aggregations", "cardinality_aggregations"):
            for agg in getattr(self, name):
                if not isinstance(agg, Aggregation):
                    raise InvalidValueShapeError(
                        f"{name} expects Aggregation values, got {type(agg).__name__}"
                    )


def wrap_query_items(item_type: str, *items: QueryItem) -> QueryItem:
    """
    将多个子句包装为一个嵌套 bool 查询.

    Args:
        item_type: 子句关系，"or"、"not"、"filter"，其他值视为 "and"（不区分大小写）
        *items: 子句列表

    Returns:
        type 为 NESTED 的 QueryItem

    示例:
        # (status = "error" OR status = "warning")
        wrap_query_items(
            "or",
            QueryItem(field="status", value="error", type=QueryType.TERM),
            QueryItem(field="status", value="warning", type=QueryType.TERM),
        )
    """
    relation = item_type.lower()
    if relation == "or":
        doc = QueryDoc(or_=list(items))
    elif relation == "not":
        doc = QueryDoc(not_=list(items))
    elif relation == "filter":
        doc = QueryDoc(filter=list(items))
    else:
        doc = QueryDoc(and_=list(items))
    return QueryItem(field="", value=doc, type=QueryType.NESTED)
