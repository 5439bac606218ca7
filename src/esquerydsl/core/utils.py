"""
esquerydsl 工具函数模块

提供 Query String 字段转义和值规范化函数
"""

from collections.abc import Mapping
from typing import Any

from esquerydsl.core.constants import QueryStringCharacters
from esquerydsl.core.models import RangeBounds


def sanitize_query_field(keyword: str) -> str:
    r"""
    转义 Query String 中的 ES 保留字符。

    按 ``QueryStringCharacters.RESERVED_CHARACTERS`` 的固定顺序逐个做全局替换，
    每个保留字符前加一个反斜杠。反斜杠本身最先处理，之后产生的反斜杠不会被再次转义。

    参考文档: https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-query-string-query.html#_reserved_characters

    示例:
        >>> sanitize_query_field("kimchy!")
        'kimchy\\!'
        >>> sanitize_query_field("a&&b")
        'a\\&&b'

    Args:
        keyword: 需要转义的文本

    Returns:
        转义后的文本
    """
    sanitized = keyword
    for char in QueryStringCharacters.RESERVED_CHARACTERS:
        if char in sanitized:
            sanitized = sanitized.replace(char, "\\" + char)
    return sanitized


def canonicalize(value: Any) -> Any:
    """
    将调用方传入的值转换为规范形式.

    字典在每一层都按键名排序，元组转为列表，RangeBounds 展开为字典。
    其他值原样返回，交给序列化器处理。
    """
    if isinstance(value, RangeBounds):
        value = value.to_es_format()
    if isinstance(value, Mapping):
        return {key: canonicalize(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]
    return value
