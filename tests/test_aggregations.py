"""聚合构建单元测试."""

import logging

import pytest

from esquerydsl import (
    Aggregation,
    InvalidAggregationError,
    QueryDoc,
    QueryType,
    UnsupportedQueryTypeError,
)
from esquerydsl.builders import build_aggregations, build_terms_aggregations


def _terms(name, field, **kwargs):
    return Aggregation(type=QueryType.TERMS, name=name, field=field, **kwargs)


def _cardinality(name, field):
    return Aggregation(type=QueryType.CARDINALITY, name=name, field=field)


class TestBuildTermsAggregations:
    """build_terms_aggregations 测试类."""

    def test_empty(self):
        """测试空列表."""
        assert build_terms_aggregations([]) is None

    def test_single(self):
        """测试单个聚合."""
        result = build_terms_aggregations([_terms("by_status", "status", size=10)])
        assert result == {"by_status": {"terms": {"field": "status", "size": 10}}}

    def test_two_levels(self):
        """测试两个聚合逐层嵌套."""
        result = build_terms_aggregations(
            [
                _terms(
                    "first_field_agg",
                    "first_field.keyword",
                    size=100,
                    order={"_count": "desc"},
                ),
                _terms("second_field_agg", "second_field.keyword"),
            ]
        )
        assert result == {
            "first_field_agg": {
                "aggregations": {
                    "second_field_agg": {"terms": {"field": "second_field.keyword"}}
                },
                "terms": {
                    "field": "first_field.keyword",
                    "order": {"_count": "desc"},
                    "size": 100,
                },
            }
        }
        assert list(result["first_field_agg"]) == ["aggregations", "terms"]
        assert list(result["first_field_agg"]["terms"]) == ["field", "order", "size"]

    def test_depth_equals_position(self):
        """测试嵌套深度等于列表位置."""
        aggs = [_terms(f"level_{i}", f"field_{i}") for i in range(4)]
        node = build_terms_aggregations(aggs)
        for i in range(4):
            body = node[f"level_{i}"]
            assert body["terms"] == {"field": f"field_{i}"}
            if i < 3:
                node = body["aggregations"]
            else:
                assert "aggregations" not in body

    def test_invalid_type(self):
        """测试无效聚合类型."""
        agg = Aggregation(type=42, name="agg", field="f")
        with pytest.raises(UnsupportedQueryTypeError):
            build_terms_aggregations([agg])


class TestBuildAggregations:
    """build_aggregations 测试类."""

    def test_no_terms_drops_cardinality(self, caplog):
        """测试没有 terms 聚合时忽略 cardinality 聚合并记录警告."""
        doc = QueryDoc(
            index="some_index",
            cardinality_aggregations=[_cardinality("unique_users", "user_id")],
        )
        with caplog.at_level(logging.WARNING, logger="esquerydsl.builders.aggregations"):
            assert build_aggregations(doc) is None
        assert "cardinality" in caplog.text

    def test_no_aggregations(self):
        """测试没有聚合."""
        assert build_aggregations(QueryDoc()) is None

    def test_cardinality_siblings(self):
        """测试 cardinality 聚合作为最外层同级节点."""
        doc = QueryDoc(
            terms_aggregations=[
                _terms("by_status", "status"),
                _terms("by_level", "level"),
            ],
            cardinality_aggregations=[
                _cardinality("unique_users", "user_id"),
                Aggregation(type=QueryType.MAX, name="latest", field="timestamp"),
            ],
        )
        result = build_aggregations(doc)
        assert list(result) == ["by_status", "latest", "unique_users"]
        assert result["unique_users"] == {"cardinality": {"field": "user_id"}}
        assert result["latest"] == {"max": {"field": "timestamp"}}
        inner = result["by_status"]["aggregations"]
        assert list(inner) == ["by_level"]

    def test_no_cardinality_no_siblings(self):
        """测试没有 cardinality 聚合时没有额外节点."""
        doc = QueryDoc(
            terms_aggregations=[
                _terms("first_field_agg", "a", size=100, order={"_count": "desc"}),
                _terms("second_field_agg", "b"),
            ]
        )
        assert list(build_aggregations(doc)) == ["first_field_agg"]

    def test_duplicate_sibling_name(self):
        """测试同级聚合重名."""
        doc = QueryDoc(
            terms_aggregations=[_terms("by_status", "status")],
            cardinality_aggregations=[_cardinality("by_status", "user_id")],
        )
        with pytest.raises(InvalidAggregationError):
            build_aggregations(doc)
