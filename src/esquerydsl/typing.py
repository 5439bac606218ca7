"""esquerydsl 类型定义模块."""

from typing import Any, Dict

# 排序方向字典类型
# 格式: {字段名: "asc" | "desc"}
SortDict = Dict[str, str]

# 生成的 DSL 字典类型
DslDict = Dict[str, Any]
