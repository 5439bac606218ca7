"""esquerydsl 异常定义模块."""

from typing import Any


class EsQueryDslError(Exception):
    """esquerydsl 基础异常类."""

    pass


class UnsupportedQueryTypeError(EsQueryDslError):
    """不支持的查询类型异常.

    当查询类型序号没有对应的 DSL 关键字时抛出，携带原始值.
    """

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        super().__init__(message or f"Type {value!r} is not supported")


class InvalidValueShapeError(EsQueryDslError):
    """查询值形态不合法异常（如 query_string 传入非字符串）."""

    pass


class InvalidAggregationError(EsQueryDslError):
    """聚合配置不合法异常（名称、size、order 或同级重名）."""

    pass
