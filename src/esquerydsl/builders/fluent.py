"""QueryDoc 链式构建器模块."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from esquerydsl.core.constants import SortDirection
from esquerydsl.core.models import Aggregation, QueryDoc, QueryItem
from esquerydsl.core.query_types import QueryType
from esquerydsl.typing import SortDict


class QueryDocBuilder:
    """
    QueryDoc 链式构建器.

    使用示例:
        doc = (
            QueryDocBuilder(index="articles")
            .must(QueryItem(field="title", value="Search", type=QueryType.MATCH))
            .filter(QueryItem(field="status", value="published", type=QueryType.TERM))
            .ordering(["-publish_date", "id"])
            .pagination(page=2, page_size=20)
            .add_terms_aggregation("by_author", "author.keyword", size=10)
            .build()
        )

        body = encode(doc)
    """

    def __init__(self, index: str = ""):
        """
        初始化构建器.

        Args:
            index: 索引名称
        """
        self._index = index
        self.clear()

    def must(self, *items: QueryItem) -> QueryDocBuilder:
        """添加 must 子句."""
        self._and.extend(items)
        return self

    def must_not(self, *items: QueryItem) -> QueryDocBuilder:
        """添加 must_not 子句."""
        self._not.extend(items)
        return self

    def should(self, *items: QueryItem) -> QueryDocBuilder:
        """添加 should 子句."""
        self._or.extend(items)
        return self

    def filter(self, *items: QueryItem) -> QueryDocBuilder:  # noqa: A003
        """添加 filter 子句."""
        self._filter.extend(items)
        return self

    def minimum_should_match(self, value: int) -> QueryDocBuilder:
        """设置 should 子句至少匹配数量."""
        self._minimum_should_match = value
        return self

    def ordering(self, ordering: list[str]) -> QueryDocBuilder:
        """
        设置排序.

        Args:
            ordering: 排序字段列表，"-" 前缀表示降序，如 ["-create_time", "name"]

        Returns:
            self，支持链式调用
        """
        self._sort = []
        for field in ordering:
            if field.startswith("-"):
                self._sort.append({field[1:]: SortDirection.DESC})
            else:
                self._sort.append({field: SortDirection.ASC})
        return self

    def pagination(self, page: int = 1, page_size: int = 10) -> QueryDocBuilder:
        """
        设置分页.

        Args:
            page: 页码，最小为 1
            page_size: 每页大小，最小为 0（设为 0 时只返回聚合结果，不返回文档）

        Returns:
            self，支持链式调用
        """
        page = max(1, page)
        self._size = max(0, page_size)
        self._from = (page - 1) * self._size
        return self

    def search_after(self, *values: Any) -> QueryDocBuilder:
        """设置游标分页的 search_after 值."""
        self._search_after = list(values)
        return self

    def track_total_hits(self, enabled: bool = True) -> QueryDocBuilder:
        """设置是否精确统计总命中数."""
        self._track_total_hits = enabled
        return self

    def source(self, *fields: str) -> QueryDocBuilder:
        """设置返回字段."""
        self._source = list(fields)
        return self

    def add_terms_aggregation(
        self,
        name: str,
        field: str,
        size: int | None = None,
        order: Mapping[str, str] | None = None,
    ) -> QueryDocBuilder:
        """
        添加 terms 聚合.

        每次添加的聚合嵌套在上一个 terms 聚合内部。

        示例:
            builder.add_terms_aggregation("by_status", "status", size=10, order={"_count": "desc"})
        """
        self._terms_aggregations.append(
            Aggregation(type=QueryType.TERMS, name=name, field=field, size=size, order=order)
        )
        return self

    def add_cardinality_aggregation(self, name: str, field: str) -> QueryDocBuilder:
        """
        添加去重计数聚合.

        注意: 只有存在 terms 聚合时才会输出。
        """
        self._cardinality_aggregations.append(
            Aggregation(type=QueryType.CARDINALITY, name=name, field=field)
        )
        return self

    def build(self) -> QueryDoc:
        """构建 QueryDoc."""
        return QueryDoc(
            index=self._index,
            size=self._size,
            from_=self._from,
            sort=list(self._sort),
            search_after=list(self._search_after),
            and_=list(self._and),
            or_=list(self._or),
            not_=list(self._not),
            filter=list(self._filter),
            track_total_hits=self._track_total_hits,
            minimum_should_match=self._minimum_should_match,
            terms_aggregations=list(self._terms_aggregations),
            cardinality_aggregations=list(self._cardinality_aggregations),
            source=list(self._source),
        )

    def clear(self) -> QueryDocBuilder:
        """清空所有查询参数."""
        self._and: list[QueryItem] = []
        self._or: list[QueryItem] = []
        self._not: list[QueryItem] = []
        self._filter: list[QueryItem] = []
        self._sort: list[SortDict] = []
        self._search_after: list[Any] = []
        self._size = 0
        self._from = 0
        self._track_total_hits = False
        self._minimum_should_match = 0
        self._terms_aggregations: list[Aggregation] = []
        self._cardinality_aggregations: list[Aggregation] = []
        self._source: list[str] = []
        return self
