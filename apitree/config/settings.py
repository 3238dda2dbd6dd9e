# 导入所需的Python标准库
from functools import lru_cache  # 用于缓存配置结果
from typing import Any, Dict, Optional  # 用于类型提示
import os  # 用于获取环境变量
import yaml  # 用于解析YAML配置文件
from dataclasses import dataclass, fields  # 用于创建数据类


@dataclass
class MermaidConfig:
    """
    Mermaid导出相关配置的数据类
    """
    direction: str = "LR"          # 图的方向
    stroke: str = "#333"           # 节点边框颜色
    stroke_width: str = "4px"      # 节点边框宽度
    fallback_class: str = "OTHER"  # 没有操作的节点使用的样式类


@dataclass
class LogConfig:
    """
    日志相关配置的数据类
    """
    name: str = "apitree"           # 日志器名称
    level: str = "INFO"             # 日志级别
    log_dir: Optional[str] = None   # 日志目录,为None时只输出到控制台
    format_json: bool = False       # 是否使用JSON格式


def _build(config_cls, values: Optional[Dict[str, Any]]):
    """根据字典创建配置对象,忽略未知的键"""
    known = {f.name for f in fields(config_cls)}
    return config_cls(**{k: v for k, v in (values or {}).items() if k in known})


class Settings:
    """
    应用程序配置管理类
    负责管理和加载各种配置选项
    """

    def __init__(self,
                 mermaid: Optional[MermaidConfig] = None,
                 logging: Optional[LogConfig] = None):
        self._mermaid = mermaid  # 显式传入的导出配置
        self._logging = logging  # 显式传入的日志配置

    @lru_cache()  # 使用LRU缓存装饰器缓存配置结果
    def get_mermaid_config(self) -> MermaidConfig:
        """
        获取Mermaid导出配置
        未显式指定时从环境变量读取

        Returns:
            MermaidConfig: 导出配置对象
        """
        if self._mermaid is not None:
            return self._mermaid
        return MermaidConfig(
            direction=os.getenv("APITREE_MERMAID_DIRECTION", "LR")  # 图的方向
        )

    @lru_cache()
    def get_log_config(self) -> LogConfig:
        """获取日志配置"""
        if self._logging is not None:
            return self._logging
        return LogConfig(
            level=os.getenv("APITREE_LOG_LEVEL", "INFO"),  # 日志级别
            log_dir=os.getenv("APITREE_LOG_DIR"),  # 日志目录
            format_json=os.getenv("APITREE_LOG_JSON", "false").lower() in ("1", "true", "yes")
        )

    @classmethod
    def from_yaml(cls, path: str) -> "Settings":
        """
        从YAML文件加载配置

        Args:
            path (str): YAML配置文件路径

        Returns:
            Settings: 配置对象实例
        """
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        return cls(
            mermaid=_build(MermaidConfig, config.get("mermaid")),
            logging=_build(LogConfig, config.get("logging"))
        )


# 创建全局配置实例
settings = Settings()
