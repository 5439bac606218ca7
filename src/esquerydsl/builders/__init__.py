"""构建器模块导出."""

from esquerydsl.builders.aggregations import build_aggregations, build_terms_aggregations
from esquerydsl.builders.clauses import serialize_leaf, wrap_bool
from esquerydsl.builders.document import QueryDocEncoder, encode, encode_batch, to_dict
from esquerydsl.builders.fluent import QueryDocBuilder

__all__ = [
    "serialize_leaf",
    "wrap_bool",
    "build_aggregations",
    "build_terms_aggregations",
    "QueryDocEncoder",
    "QueryDocBuilder",
    "to_dict",
    "encode",
    "encode_batch",
]
