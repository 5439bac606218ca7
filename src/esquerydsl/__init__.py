"""esquerydsl - Elasticsearch Query DSL 文档模型与序列化工具.

用类型化的值构建 Elasticsearch 查询请求体，而不是手工拼接 JSON 字符串。

主要功能:
    - QueryItem / QueryDoc / Aggregation: 查询文档数据模型
    - encode: 编码为 Query DSL 请求体
    - encode_batch: 编码为 _msearch 使用的 NDJSON 请求体
    - QueryDocBuilder: 链式构建 QueryDoc

使用示例:
    from esquerydsl import QueryDoc, QueryItem, QueryType, encode

    doc = QueryDoc(
        index="some_index",
        and_=[QueryItem(field="title", value="Search", type=QueryType.MATCH)],
    )
    body = encode(doc)
    # b'{"query":{"bool":{"must":[{"match":{"title":"Search"}}]}},"size":0}'
"""

__version__ = "0.1.0"

# 导出构建器
from esquerydsl.builders import (
    QueryDocBuilder,
    QueryDocEncoder,
    encode,
    encode_batch,
    to_dict,
)

# 导出核心组件
from esquerydsl.core import (
    Aggregation,
    QueryDoc,
    QueryItem,
    QueryType,
    RangeBounds,
    query_type_token,
    sanitize_query_field,
    wrap_query_items,
)

# 导出异常
from esquerydsl.exceptions import (
    EsQueryDslError,
    InvalidAggregationError,
    InvalidValueShapeError,
    UnsupportedQueryTypeError,
)

__all__ = [
    # 版本
    "__version__",
    # 数据模型
    "QueryType",
    "QueryItem",
    "Aggregation",
    "QueryDoc",
    "RangeBounds",
    "wrap_query_items",
    # 编码
    "QueryDocEncoder",
    "QueryDocBuilder",
    "to_dict",
    "encode",
    "encode_batch",
    # 工具函数
    "query_type_token",
    "sanitize_query_field",
    # 异常
    "EsQueryDslError",
    "UnsupportedQueryTypeError",
    "InvalidValueShapeError",
    "InvalidAggregationError",
]
