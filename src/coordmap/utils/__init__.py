from .logger import LoggerManager, get_logger

__all__ = ["LoggerManager", "get_logger"]
