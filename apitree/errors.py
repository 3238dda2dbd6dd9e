# errors.py - 错误处理模块

from typing import Any, Dict, Optional


class TreeError(Exception):
    """
    路径树错误基类,用于规范化路径树操作中的错误信息
    继承自Exception基类
    """
    def __init__(self,
                 message: str,  # 错误消息
                 detail: Optional[Dict[str, Any]] = None):  # 错误详情,可选
        self.message = message  # 错误消息
        self.detail = detail or {}  # 详细错误信息
        super().__init__(message)  # 调用父类构造函数


class InvalidArgumentError(TreeError, ValueError):
    """必填参数缺失或为空"""
    def __init__(self, param_name: str, message: Optional[str] = None):
        self.param_name = param_name
        super().__init__(
            message or f"Value cannot be null or empty: {param_name}",
            detail={"param_name": param_name}
        )


class DuplicateLabelError(TreeError):
    """同一节点上重复挂载相同标签"""
    def __init__(self, label: str, path: str):
        self.label = label
        self.path = path
        super().__init__(
            "A duplicate label already exists for this node.",
            detail={"label": label, "path": path}
        )


def check_argument_not_null(value: Any, param_name: str) -> Any:
    """
    检查参数不为None
    Args:
        value: 参数值
        param_name: 参数名称
    Returns:
        原参数值
    """
    if value is None:
        raise InvalidArgumentError(param_name, f"Value cannot be null: {param_name}")
    return value


def check_argument_not_null_or_empty(value: Optional[str], param_name: str) -> str:
    """检查字符串参数不为None且不为空串"""
    if value is None or value == "":
        raise InvalidArgumentError(param_name)
    return value
