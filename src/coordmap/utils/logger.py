"""
統一的 Logger 管理模組
使用 loguru 提供簡潔的日誌記錄功能
"""
from loguru import logger
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module_name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
DEFAULT_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module_name]}:{function}:{line} - {message}"


class LoggerManager:
    """Logger 管理類別，提供統一的日誌配置和獲取介面"""

    _initialized = False
    _loggers = {}
    _handler_ids = []
    _file_handlers = {}  # 記錄每個日誌文件的 handler ID
    _base_config = {}  # 儲存基礎配置

    @classmethod
    def initialize(
        cls,
        log_dir: Optional[str] = None,
        log_level: str = "INFO",
        rotation: str = "00:00",
        retention: str = "30 days",
        format: Optional[str] = None
    ):
        """
        初始化 logger 配置（重複呼叫不會重複加入 handler）

        Args:
            log_dir: 日誌文件目錄，None 表示只輸出到控制台
            log_level: 日誌等級 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            rotation: 日誌輪轉時間 (例如: "00:00" 每天午夜, "500 MB" 文件大小)
            retention: 日誌保留時間 (例如: "30 days", "1 week")
            format: 自定義日誌格式
        """
        if cls._initialized:
            return

        cls._base_config = {
            "log_dir": log_dir,
            "log_level": log_level.upper(),
            "rotation": rotation,
            "retention": retention,
            "format": format
        }

        # 移除預設的 handler
        logger.remove()
        # 設定預設 extra，避免尚未 bind 時缺少欄位
        logger.configure(extra={"module_name": "global", "log_file": "default"})

        cls._handler_ids.append(
            logger.add(
                sys.stderr,
                level=cls._base_config["log_level"],
                format=format or DEFAULT_FORMAT,
                colorize=True
            )
        )

        if log_dir is not None:
            Path(log_dir).mkdir(parents=True, exist_ok=True)

        cls._initialized = True
        logger.debug("Logger 初始化完成")

    @classmethod
    def configure(cls, logging_config) -> None:
        """
        依 LoggingConfig 重新設定 logger

        Args:
            logging_config: coordmap.config.schema.LoggingConfig
        """
        cls.shutdown()
        cls.initialize(
            log_dir=logging_config.log_dir,
            log_level=logging_config.level,
            rotation=logging_config.rotation,
            retention=logging_config.retention,
            format=logging_config.format,
        )

    @classmethod
    def shutdown(cls) -> None:
        """移除本模組加入的所有 handler，回到未初始化狀態"""
        for handler_id in cls._handler_ids + list(cls._file_handlers.values()):
            logger.remove(handler_id)
        cls._handler_ids = []
        cls._file_handlers = {}
        cls._loggers = {}
        cls._initialized = False

    @classmethod
    def _add_file_handler(cls, log_file: str):
        """
        為指定的日誌文件添加 handler

        Args:
            log_file: 日誌文件名稱（不含副檔名和日期）
        """
        config = cls._base_config
        if log_file in cls._file_handlers or config.get("log_dir") is None:
            return

        log_path = Path(config["log_dir"])

        handler_id = logger.add(
            log_path / f"{log_file}_{{time:YYYY-MM-DD}}.log",
            level=config["log_level"],
            rotation=config["rotation"],
            retention=config["retention"],
            format=config["format"] or DEFAULT_FILE_FORMAT,
            encoding="utf-8",
            filter=lambda record: record["extra"].get("log_file") == log_file
        )

        cls._file_handlers[log_file] = handler_id

    @classmethod
    def get_logger(cls, name: str, log_file: str = "default"):
        """
        獲取指定名稱的 logger

        Args:
            name: logger 名稱，建議使用 __name__ 以獲得完整模組路徑
            log_file: 日誌文件名稱（不含副檔名），相同 log_file 的日誌會輸出到同一個文件

        Returns:
            logger 實例

        Example:
            >>> logger = LoggerManager.get_logger(__name__, log_file="coordinate_transformer")
            >>> logger.info("載入攝影機轉換")
        """
        if not cls._initialized:
            cls.initialize()

        logger_key = f"{name}:{log_file}"

        if logger_key not in cls._loggers:
            cls._add_file_handler(log_file)
            cls._loggers[logger_key] = logger.bind(
                module_name=name,
                log_file=log_file
            )

        return cls._loggers[logger_key]


def get_logger(name: str, log_file: str = "default"):
    """
    便捷函數：獲取 logger 實例

    Args:
        name: logger 名稱，建議使用 __name__
        log_file: 日誌文件名稱（不含副檔名），相同 log_file 的日誌會輸出到同一個文件

    Returns:
        logger 實例
    """
    return LoggerManager.get_logger(name, log_file)
