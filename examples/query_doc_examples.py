"""QueryDoc 使用示例.

本示例展示如何使用 esquerydsl 构建查询请求体:
1. bool 查询: must / filter / should 组合
2. 逻辑嵌套: wrap_query_items
3. 聚合: 逐层嵌套的 terms 聚合 + cardinality 聚合
4. 批量查询: _msearch 请求体
"""

from esquerydsl import (
    Aggregation,
    QueryDoc,
    QueryDocBuilder,
    QueryItem,
    QueryType,
    RangeBounds,
    encode,
    encode_batch,
    wrap_query_items,
)


# ==================== 示例 1: bool 查询 ====================
def example_bool_query():
    """示例: 标题匹配 + 状态过滤 + 日期范围."""
    doc = QueryDoc(
        index="articles",
        size=20,
        and_=[QueryItem(field="title", value="Search", type=QueryType.MATCH)],
        filter=[
            QueryItem(field="status", value="published", type=QueryType.TERM),
            QueryItem(
                field="publish_date",
                value=RangeBounds(gte="2015-01-01"),
                type=QueryType.RANGE,
            ),
        ],
    )

    print("bool 查询 DSL:")
    print(encode(doc).decode("utf-8"))
    return doc


# ==================== 示例 2: 逻辑嵌套 ====================
def example_logical_nesting():
    """示例: (status = "error" OR status = "warning") AND NOT deleted."""
    doc = QueryDoc(
        index="alerts",
        and_=[
            wrap_query_items(
                "or",
                QueryItem(field="status", value="error", type=QueryType.TERM),
                QueryItem(field="status", value="warning", type=QueryType.TERM),
            ),
        ],
        not_=[QueryItem(field="deleted", value=True, type=QueryType.TERM)],
    )

    print("\n逻辑嵌套 DSL:")
    print(encode(doc).decode("utf-8"))
    return doc


# ==================== 示例 3: 聚合 ====================
def example_aggregations():
    """示例: 按状态分组，再按级别分组，同时统计去重用户数.

    注意: cardinality 聚合只有在存在 terms 聚合时才会输出。
    """
    doc = QueryDoc(
        index="alerts",
        terms_aggregations=[
            Aggregation(
                type=QueryType.TERMS,
                name="by_status",
                field="status",
                size=10,
                order={"_count": "desc"},
            ),
            Aggregation(type=QueryType.TERMS, name="by_level", field="level"),
        ],
        cardinality_aggregations=[
            Aggregation(type=QueryType.CARDINALITY, name="unique_users", field="user_id"),
        ],
    )

    print("\n聚合 DSL（只返回聚合结果，size=0）:")
    print(encode(doc).decode("utf-8"))
    return doc


# ==================== 示例 4: 批量查询 ====================
def example_multi_search():
    """示例: 使用链式构建器构建两个查询，编码为 _msearch 请求体."""
    docs = [
        QueryDocBuilder(index="index1")
        .must(QueryItem(field="user.id", value="kimchy!", type=QueryType.QUERY_STRING))
        .build(),
        QueryDocBuilder(index="index2")
        .must(QueryItem(field="name", value="Kim*", type=QueryType.WILDCARD))
        .ordering(["-create_time"])
        .pagination(page=2, page_size=10)
        .build(),
    ]

    print("\n_msearch 请求体:")
    print(encode_batch(docs), end="")
    return docs


if __name__ == "__main__":
    # 运行所有示例
    example_bool_query()
    example_logical_nesting()
    example_aggregations()
    example_multi_search()
