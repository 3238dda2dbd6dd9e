from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class OperationType(str, Enum):
    """路径上可用的HTTP操作"""
    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


class OpenApiOperation(BaseModel):
    """单个HTTP操作的描述信息"""
    model_config = ConfigDict(populate_by_name=True)

    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = Field(default=None, alias="operationId")
    tags: List[str] = Field(default_factory=list)


class OpenApiPathItem(BaseModel):
    """
    路径项,描述某个路径上可用的操作

    属性:
        summary (str): 简短说明
        description (str): 详细说明
        operations (dict): 操作类型到操作描述的映射
    """
    summary: Optional[str] = None
    description: Optional[str] = None
    operations: Dict[OperationType, OpenApiOperation] = Field(default_factory=dict)


class OpenApiDocument(BaseModel):
    """只保留路径部分的文档模型,paths保持插入顺序"""
    paths: Optional[Dict[str, OpenApiPathItem]] = Field(default_factory=dict)


def operation_keys(path_item: Any) -> List[str]:
    """
    获取路径项暴露的操作键
    Args:
        path_item: 任意带有operations映射的对象
    Returns:
        List[str]: 小写的操作键列表,保持原有顺序
    """
    operations = getattr(path_item, "operations", None)
    if operations is None and isinstance(path_item, Mapping):
        operations = path_item.get("operations")
    if not operations:
        return []
    keys = []
    for key in operations:
        # 枚举成员取其值
        keys.append(str(key.value if isinstance(key, Enum) else key).lower())
    return keys
