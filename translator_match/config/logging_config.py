"""
Logging configuration for the system
日誌配置
"""

import copy
import logging
import logging.config
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from typing_extensions import TypedDict


class LogLevel(Enum):
    """日誌級別"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(Enum):
    """日誌格式類型"""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
    STRUCTURED = "structured"


class FormatterConfig(TypedDict):
    """日誌格式器配置類型"""
    format: str
    datefmt: str
    style: str


class LoggerConfig(TypedDict):
    """日誌器配置類型"""
    level: str
    handlers: List[str]
    propagate: bool


class LoggingSystemConfig(TypedDict):
    """完整日誌系統配置類型"""
    version: int
    disable_existing_loggers: bool
    formatters: Dict[str, FormatterConfig]
    handlers: Dict[str, Dict[str, Union[str, int, None]]]
    loggers: Dict[str, LoggerConfig]
    root: Dict[str, Union[str, List[str]]]


# 日誌格式定義
LOG_FORMATS: Dict[str, FormatterConfig] = {
    "simple": {
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
        "style": "%"
    },
    "detailed": {
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s() - %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
        "style": "%"
    },
    "json": {
        "format": '{"timestamp":"%(asctime)s","logger":"%(name)s","level":"%(levelname)s","file":"%(filename)s","line":%(lineno)d,"function":"%(funcName)s","message":"%(message)s"}',
        "datefmt": "%Y-%m-%dT%H:%M:%S",
        "style": "%"
    },
    "structured": {
        "format": "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
        "style": "%"
    }
}

# 預設日誌目錄
DEFAULT_LOG_DIR = Path("logs")


def ensure_log_directory(log_dir: Union[str, Path] = DEFAULT_LOG_DIR) -> Path:
    """確保日誌目錄存在"""
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


def get_handler_configs(log_dir: Union[str, Path] = DEFAULT_LOG_DIR) -> Dict[str, Dict[str, Union[str, int, None]]]:
    """獲取日誌處理器配置"""
    log_path = ensure_log_directory(log_dir)

    return {
        "console": {
            "class": "logging.StreamHandler",
            "level": LogLevel.INFO.value,
            "formatter": "simple",
        },
        "file_info": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LogLevel.INFO.value,
            "formatter": "detailed",
            "filename": str(log_path / "application.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "encoding": "utf-8",
        },
        "file_error": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LogLevel.ERROR.value,
            "formatter": "detailed",
            "filename": str(log_path / "error.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 3,
            "encoding": "utf-8",
        },
        "recommendation": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": LogLevel.DEBUG.value,
            "formatter": "json",
            "filename": str(log_path / "recommendation.log"),
            "backupCount": 7,
            "when": "midnight",
            "interval": 1,
            "encoding": "utf-8",
        },
        "pricing": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LogLevel.INFO.value,
            "formatter": "json",
            "filename": str(log_path / "pricing.log"),
            "maxBytes": 20971520,  # 20MB
            "backupCount": 3,
            "encoding": "utf-8",
        },
    }


# 日誌器配置
LOGGER_CONFIGS: Dict[str, LoggerConfig] = {
    "translator_match.core": {
        "level": LogLevel.INFO.value,
        "handlers": ["console", "file_info", "recommendation"],
        "propagate": False
    },
    "translator_match.core.cost_model": {
        "level": LogLevel.INFO.value,
        "handlers": ["console", "file_info", "pricing"],
        "propagate": False
    },
    "translator_match.services": {
        "level": LogLevel.INFO.value,
        "handlers": ["console", "file_info"],
        "propagate": False
    },
    "translator_match.workflow": {
        "level": LogLevel.INFO.value,
        "handlers": ["console", "file_info"],
        "propagate": False
    },
    "translator_match.utils": {
        "level": LogLevel.INFO.value,
        "handlers": ["console", "file_info"],
        "propagate": False
    },
    "error": {
        "level": LogLevel.ERROR.value,
        "handlers": ["console", "file_error"],
        "propagate": False
    },
}


def get_logging_config(
    log_dir: Union[str, Path] = DEFAULT_LOG_DIR,
    console_level: LogLevel = LogLevel.INFO,
    file_level: LogLevel = LogLevel.DEBUG,
    debug_mode: bool = False
) -> LoggingSystemConfig:
    """
    獲取完整的日誌系統配置

    Args:
        log_dir: 日誌目錄路徑
        console_level: 控制台日誌級別
        file_level: 文件日誌級別
        debug_mode: 是否啟用調試模式

    Returns:
        完整的日誌系統配置 (可直接交給 logging.config.dictConfig)
    """
    handlers = get_handler_configs(log_dir)
    loggers = copy.deepcopy(LOGGER_CONFIGS)

    if debug_mode:
        handlers["console"]["level"] = LogLevel.DEBUG.value
        for logger_config in loggers.values():
            if logger_config["level"] == LogLevel.INFO.value:
                logger_config["level"] = LogLevel.DEBUG.value
    else:
        handlers["console"]["level"] = console_level.value

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": copy.deepcopy(LOG_FORMATS),
        "handlers": handlers,
        "loggers": loggers,
        "root": {
            "level": file_level.value,
            "handlers": ["console", "file_info", "file_error"],
        }
    }


def get_development_logging_config(log_dir: Union[str, Path] = DEFAULT_LOG_DIR) -> LoggingSystemConfig:
    """獲取開發環境的日誌配置"""
    return get_logging_config(
        log_dir=log_dir,
        console_level=LogLevel.DEBUG,
        file_level=LogLevel.DEBUG,
        debug_mode=True
    )


def get_production_logging_config(log_dir: Union[str, Path] = DEFAULT_LOG_DIR) -> LoggingSystemConfig:
    """獲取生產環境的日誌配置"""
    return get_logging_config(
        log_dir=log_dir,
        console_level=LogLevel.INFO,
        file_level=LogLevel.INFO,
        debug_mode=False
    )


def get_testing_logging_config(log_dir: Union[str, Path] = DEFAULT_LOG_DIR / "test") -> LoggingSystemConfig:
    """獲取測試環境的日誌配置"""
    return get_logging_config(
        log_dir=log_dir,
        console_level=LogLevel.WARNING,
        file_level=LogLevel.DEBUG,
        debug_mode=False
    )


def setup_logging(
    log_level: str = "INFO",
    verbose: bool = False,
    log_dir: Optional[Union[str, Path]] = None
) -> None:
    """
    設定日誌系統

    Args:
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        verbose: 是否啟用詳細模式
        log_dir: 日誌目錄 (預設 logs/)
    """
    try:
        level_enum = LogLevel(log_level.upper())
    except ValueError:
        level_enum = LogLevel.INFO

    console_level = LogLevel.DEBUG if verbose else level_enum
    target_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR

    from .settings import get_environment
    environment = get_environment()

    if environment == "production":
        config = get_production_logging_config(target_dir)
    elif environment == "testing":
        config = get_testing_logging_config(target_dir / "test")
    else:  # development or others
        config = get_development_logging_config(target_dir)

    config["handlers"]["console"]["level"] = console_level.value
    config["root"]["level"] = level_enum.value

    logging.config.dictConfig(config)


# 特殊用途的日誌器名稱常數
class LoggerNames:
    """日誌器名稱常數"""
    CORE = "translator_match.core"
    COST_MODEL = "translator_match.core.cost_model"
    CONTENT_SCORER = "translator_match.core.content_scorer"
    COLLABORATIVE_SCORER = "translator_match.core.collaborative_scorer"
    HYBRID_RECOMMENDER = "translator_match.core.hybrid_recommender"
    STORE = "translator_match.services.store"
    LLM_SERVICE = "translator_match.services.llm_service"
    DOCUMENT_CLASSIFIER = "translator_match.services.document_classifier"
    DOCUMENT_PROCESSOR = "translator_match.services.document_processor"
    WORKFLOW = "translator_match.workflow"
    ERROR = "error"


__all__ = [
    # Enums and TypedDict classes
    "LogLevel",
    "LogFormat",
    "FormatterConfig",
    "LoggerConfig",
    "LoggingSystemConfig",

    # Configuration dictionaries and constants
    "DEFAULT_LOG_DIR",
    "LOG_FORMATS",
    "LOGGER_CONFIGS",

    # Functions
    "ensure_log_directory",
    "get_handler_configs",
    "get_logging_config",
    "get_development_logging_config",
    "get_production_logging_config",
    "get_testing_logging_config",
    "setup_logging",

    # Constants class
    "LoggerNames",
]
