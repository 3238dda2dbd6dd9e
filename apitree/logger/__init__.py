from .logger import JSONFormatter, LoggerManager

__all__ = ["JSONFormatter", "LoggerManager"]
