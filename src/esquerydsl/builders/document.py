"""查询文档编码模块.

把 QueryDoc 编码为 Elasticsearch 查询请求体，以及 _msearch 使用的 NDJSON 请求体.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from elasticsearch.serializer import JsonSerializer, NdjsonSerializer

from esquerydsl.builders.aggregations import build_aggregations
from esquerydsl.builders.clauses import wrap_bool
from esquerydsl.core.models import QueryDoc
from esquerydsl.core.utils import canonicalize
from esquerydsl.typing import DslDict

logger = logging.getLogger(__name__)


class QueryDocEncoder:
    """
    查询文档编码器.

    输出的顶层字段顺序固定为:
    aggregations, query, size, from, sort, search_after, track_total_hits, _source。
    其中 query 和 size 总是输出，其他字段为空时省略。

    使用示例:
        encoder = QueryDocEncoder()
        body = encoder.encode(
            QueryDoc(
                index="articles",
                and_=[QueryItem(field="title", value="Search", type=QueryType.MATCH)],
            )
        )
        # b'{"query":{"bool":{"must":[{"match":{"title":"Search"}}]}},"size":0}'
    """

    def __init__(
        self,
        serializer: JsonSerializer | None = None,
        ndjson_serializer: NdjsonSerializer | None = None,
        analyze_wildcard: bool = True,
    ):
        """
        初始化编码器.

        Args:
            serializer: 单个请求体使用的 JSON 序列化器
            ndjson_serializer: 批量请求体使用的 NDJSON 序列化器，只负责拼接已编码的行
            analyze_wildcard: query_string 子句的 analyze_wildcard 参数
        """
        self._serializer = serializer or JsonSerializer()
        self._ndjson_serializer = ndjson_serializer or NdjsonSerializer()
        self._analyze_wildcard = analyze_wildcard

    def to_dict(self, doc: QueryDoc) -> DslDict:
        """
        构建查询请求字典.

        Args:
            doc: 查询文档

        Returns:
            字段顺序已规范化的请求字典

        Raises:
            UnsupportedQueryTypeError: 子句或聚合类型无效时抛出
            InvalidValueShapeError: 子句值形态不合法时抛出
            InvalidAggregationError: 同级聚合名称重复时抛出
        """
        body: dict[str, Any] = {}

        aggregations = build_aggregations(doc)
        if aggregations is not None:
            body["aggregations"] = aggregations

        body["query"] = wrap_bool(doc, analyze_wildcard=self._analyze_wildcard)
        # size 为 0 也要输出
        body["size"] = doc.size

        if doc.from_:
            body["from"] = doc.from_
        if doc.sort:
            body["sort"] = canonicalize(doc.sort)
        if doc.search_after:
            body["search_after"] = list(doc.search_after)
        if doc.track_total_hits:
            body["track_total_hits"] = True
        if doc.source:
            body["_source"] = list(doc.source)

        return body

    def encode(self, doc: QueryDoc) -> bytes:
        """
        编码单个查询文档.

        Returns:
            紧凑格式的 JSON 字节串
        """
        logger.debug(f"编码查询文档: index={doc.index}")
        return self._serializer.dumps(self.to_dict(doc))

    def encode_batch(self, docs: Iterable[QueryDoc]) -> str:
        """
        编码多个查询文档为 _msearch 请求体.

        每个文档输出两行: ``{"index":"<索引名>"}`` 和查询请求体，每行以换行符结尾。
        查询请求体与 encode 的输出一致。
        所有文档先全部构建，任何一个失败都不会产生部分输出。

        Args:
            docs: 查询文档列表

        Returns:
            NDJSON 字符串
        """
        # 每行都用 self._serializer 编码，保证与 encode 的输出逐字节一致
        lines: list[bytes] = []
        for doc in docs:
            body = self.to_dict(doc)
            lines.append(self._serializer.dumps({"index": doc.index}))
            lines.append(self._serializer.dumps(body))

        logger.debug(f"编码批量查询: {len(lines) // 2} 个文档")
        if not lines:
            return ""
        return self._ndjson_serializer.dumps(lines).decode("utf-8")


_default_encoder = QueryDocEncoder()


def to_dict(doc: QueryDoc) -> DslDict:
    """使用默认编码器构建查询请求字典."""
    return _default_encoder.to_dict(doc)


def encode(doc: QueryDoc) -> bytes:
    """使用默认编码器编码单个查询文档."""
    return _default_encoder.encode(doc)


def encode_batch(docs: Iterable[QueryDoc]) -> str:
    """使用默认编码器编码 _msearch 请求体."""
    return _default_encoder.encode_batch(docs)
