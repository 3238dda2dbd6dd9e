import logging
import json
import traceback
from typing import Optional
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from datetime import datetime

from apitree.config.settings import LogConfig, settings


class JSONFormatter(logging.Formatter):
    """JSON格式的日志格式化器"""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        super().__init__()

    def format(self, record) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno
        }

        # 添加异常信息
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stacktrace": traceback.format_exception(*record.exc_info)
            }

        # 添加节点相关字段
        for field in ("label", "path"):
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # 添加自定义字段
        log_data.update(self.kwargs)

        return json.dumps(log_data)


class LoggerManager:
    """日志管理器"""

    def __init__(self,
                 config: Optional[LogConfig] = None,
                 max_size: int = 10*1024*1024,  # 10MB
                 backup_count: int = 10):
        self.config = config or settings.get_log_config()
        self.name = self.config.name
        self.level = getattr(logging, self.config.level.upper())
        self.log_dir = Path(self.config.log_dir) if self.config.log_dir else None
        self.max_size = max_size
        self.backup_count = backup_count

        # 创建日志目录
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        # 初始化日志器
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """设置日志器"""
        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)

        # 同名日志器已配置过处理器时不再重复添加
        if logger.handlers:
            return logger

        # 设置格式化器
        if self.config.format_json:
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        # 添加控制台处理器
        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_dir is None:
            return logger

        # 添加文件处理器
        file_handler = RotatingFileHandler(
            self.log_dir / f"{self.name}.log",
            maxBytes=self.max_size,
            backupCount=self.backup_count
        )
        file_handler.setLevel(self.level)
        file_handler.setFormatter(formatter)

        # 添加错误日志处理器
        error_handler = TimedRotatingFileHandler(
            self.log_dir / f"{self.name}_error.log",
            when="midnight",
            interval=1,
            backupCount=30
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(error_handler)

        return logger

    def get_logger(self) -> logging.Logger:
        """获取日志器"""
        return self.logger
