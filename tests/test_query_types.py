"""QueryType 查询类型单元测试."""

import pytest

from esquerydsl import QueryType, UnsupportedQueryTypeError, query_type_token
from esquerydsl.core.query_types import QUERY_TYPE_TOKENS, resolve_query_type


class TestQueryType:
    """QueryType 测试类."""

    @pytest.mark.parametrize(
        "query_type, token",
        [
            (QueryType.MATCH, "match"),
            (QueryType.TERM, "term"),
            (QueryType.TERMS, "terms"),
            (QueryType.CARDINALITY, "cardinality"),
            (QueryType.MAX, "max"),
            (QueryType.WILDCARD, "wildcard"),
            (QueryType.RANGE, "range"),
            (QueryType.EXISTS, "exists"),
            (QueryType.QUERY_STRING, "query_string"),
            (QueryType.NESTED, "nested"),
            (QueryType.REGEXP, "regexp"),
        ],
    )
    def test_token(self, query_type, token):
        """测试每个类型的关键字."""
        assert query_type_token(query_type) == token
        assert query_type.token == token

    def test_ordinals_are_fixed(self):
        """测试序号顺序."""
        assert [int(t) for t in QueryType] == list(range(11))
        assert query_type_token(0) == "match"
        assert query_type_token(8) == "query_string"
        assert query_type_token(10) == "regexp"

    def test_every_member_has_token(self):
        """测试所有成员都有关键字."""
        assert set(QUERY_TYPE_TOKENS) == set(QueryType)

    def test_ordinal_equal_to_count_is_invalid(self):
        """测试序号等于类型数量时无效."""
        with pytest.raises(UnsupportedQueryTypeError) as exc_info:
            query_type_token(len(QueryType))
        assert exc_info.value.value == len(QueryType)

    @pytest.mark.parametrize("value", [11, 12, 100001, -1])
    def test_out_of_range(self, value):
        """测试超出范围的序号."""
        with pytest.raises(UnsupportedQueryTypeError) as exc_info:
            query_type_token(value)
        assert exc_info.value.value == value
        assert str(value) in str(exc_info.value)

    @pytest.mark.parametrize("value", ["match", None, 1.0, True])
    def test_non_int_values(self, value):
        """测试非整数值."""
        with pytest.raises(UnsupportedQueryTypeError):
            resolve_query_type(value)

    def test_resolve_int(self):
        """测试整数序号解析."""
        assert resolve_query_type(5) is QueryType.WILDCARD
        assert resolve_query_type(QueryType.RANGE) is QueryType.RANGE
