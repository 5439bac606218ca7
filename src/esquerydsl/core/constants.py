"""esquerydsl 常量定义模块."""


class QueryStringCharacters:
    """Query String 相关字符常量."""

    # ES 保留字符，按转义处理顺序排列（反斜杠必须最先处理）
    # 参考: https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-query-string-query.html#_reserved_characters
    RESERVED_CHARACTERS = (
        "\\",
        "+",
        "=",
        "&&",
        "||",
        "!",
        "(",
        ")",
        "{",
        "}",
        "[",
        "]",
        "^",
        '"',
        "~",
        "*",
        "?",
        ":",
        "/",
    )


class BoolClauses:
    """bool 查询子句关键字，顺序即输出顺序."""

    MUST = "must"
    MUST_NOT = "must_not"
    SHOULD = "should"
    FILTER = "filter"
    MINIMUM_SHOULD_MATCH = "minimum_should_match"


class SortDirection:
    """排序方向."""

    ASC = "asc"
    DESC = "desc"

    CHOICES = (ASC, DESC)
