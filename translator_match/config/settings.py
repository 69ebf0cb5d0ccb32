"""
System settings and configurations
系統設定與配置

Pricing and recommendation policy values live here as named configuration
with documented defaults, so they can be tuned without code changes.
"""

import math
from enum import Enum
from pathlib import Path
from typing import Dict, Union, Optional

from typing_extensions import TypedDict

from ..constants.pricing import (
    BASE_RATE_PER_WORD,
    WORDS_PER_HOUR,
    MINIMUM_FIXED_PRICE,
    DEFAULT_COMPLEXITY_SCORE,
)
from ..constants.recommendation import HYBRID_WEIGHTS, CONTENT_SCORE_WEIGHTS


class Environment(Enum):
    """環境類型"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    """日誌級別"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# 類型定義
class PricingConfig(TypedDict):
    """
    定價配置類型

    - base_rate_per_word: 每字基本費率 (預設 0.12)
    - words_per_hour: 標準翻譯速度 (預設 250)
    - minimum_fixed_price: 固定價格訂單的最低金額 (預設 25.0)
    - default_complexity_score: 未分析文件的預設複雜度 (預設 0.75)
    """
    base_rate_per_word: float
    words_per_hour: int
    minimum_fixed_price: float
    default_complexity_score: float


class RecommendationConfig(TypedDict):
    """
    推薦配置類型

    - content_weight / collaborative_weight: 混合權重 (預設 0.6 / 0.4，總和為 1.0)
    - language_match_score: 語言對符合基本分 (預設 0.5)
    - tag_match_weight: 標籤重疊權重 (預設 0.3)
    - rating_weight: 評分權重 (預設 0.2)
    - unavailable_penalty: 不可接單乘數 (預設 0.5)
    """
    content_weight: float
    collaborative_weight: float
    language_match_score: float
    tag_match_weight: float
    rating_weight: float
    unavailable_penalty: float


class EnvironmentConfig(TypedDict):
    """環境配置類型"""
    debug: bool
    log_level: str
    verbose_logging: bool
    enable_checkpointing: bool
    recommendation_limit: Optional[int]


class SystemSettings(TypedDict):
    """系統設定類型"""
    environment: str
    debug: bool
    log_level: str
    output_dir: str
    logs_dir: str
    default_store_path: str


# 預設系統設定
DEFAULT_SETTINGS: SystemSettings = {
    "environment": Environment.DEVELOPMENT.value,
    "debug": True,
    "log_level": LogLevel.INFO.value,
    "output_dir": "output",
    "logs_dir": "logs",
    "default_store_path": "data/marketplace.json",
}

# 預設定價配置
DEFAULT_PRICING_CONFIG: PricingConfig = {
    "base_rate_per_word": BASE_RATE_PER_WORD,
    "words_per_hour": WORDS_PER_HOUR,
    "minimum_fixed_price": MINIMUM_FIXED_PRICE,
    "default_complexity_score": DEFAULT_COMPLEXITY_SCORE,
}

# 預設推薦配置
DEFAULT_RECOMMENDATION_CONFIG: RecommendationConfig = {
    "content_weight": HYBRID_WEIGHTS["content"],
    "collaborative_weight": HYBRID_WEIGHTS["collaborative"],
    "language_match_score": CONTENT_SCORE_WEIGHTS["language_match"],
    "tag_match_weight": CONTENT_SCORE_WEIGHTS["tag_match"],
    "rating_weight": CONTENT_SCORE_WEIGHTS["rating"],
    "unavailable_penalty": CONTENT_SCORE_WEIGHTS["unavailable_penalty"],
}

# 環境配置
ENVIRONMENT_CONFIGS: Dict[str, EnvironmentConfig] = {
    "development": {
        "debug": True,
        "log_level": LogLevel.DEBUG.value,
        "verbose_logging": True,
        "enable_checkpointing": True,
        "recommendation_limit": None,
    },
    "testing": {
        "debug": True,
        "log_level": LogLevel.WARNING.value,
        "verbose_logging": False,
        "enable_checkpointing": False,
        "recommendation_limit": None,
    },
    "staging": {
        "debug": False,
        "log_level": LogLevel.INFO.value,
        "verbose_logging": False,
        "enable_checkpointing": True,
        "recommendation_limit": 10,
    },
    "production": {
        "debug": False,
        "log_level": LogLevel.WARNING.value,
        "verbose_logging": False,
        "enable_checkpointing": False,
        "recommendation_limit": 10,
    },
}

# 系統路徑配置
SYSTEM_PATHS: Dict[str, str] = {
    "project_root": str(Path(__file__).parent.parent.parent),
    "data_dir": "data",
    "output_dir": "output",
    "logs_dir": "logs",
}


def get_pricing_config(**overrides: Union[int, float]) -> PricingConfig:
    """
    取得定價配置，可覆蓋個別欄位

    Raises:
        ValueError: 未知欄位或數值不合法
    """
    config: PricingConfig = {**DEFAULT_PRICING_CONFIG}
    for key, value in overrides.items():
        if key not in config:
            raise ValueError(f"Unknown pricing setting: {key}")
        config[key] = value  # type: ignore[literal-required]

    for key in ("base_rate_per_word", "minimum_fixed_price"):
        if not _is_finite_number(config[key]) or config[key] < 0:
            raise ValueError(f"{key} must be a non-negative number, got {config[key]}")
    if not _is_finite_number(config["words_per_hour"]) or config["words_per_hour"] <= 0:
        raise ValueError(f"words_per_hour must be positive, got {config['words_per_hour']}")
    complexity = config["default_complexity_score"]
    if not _is_finite_number(complexity) or not 0.0 <= complexity <= 1.0:
        raise ValueError(f"default_complexity_score must be within [0, 1], got {complexity}")
    return config


def get_recommendation_config(**overrides: float) -> RecommendationConfig:
    """
    取得推薦配置，可覆蓋個別欄位

    混合權重必須為非負數且總和為 1.0。

    Raises:
        ValueError: 未知欄位或數值不合法
    """
    config: RecommendationConfig = {**DEFAULT_RECOMMENDATION_CONFIG}
    for key, value in overrides.items():
        if key not in config:
            raise ValueError(f"Unknown recommendation setting: {key}")
        config[key] = value  # type: ignore[literal-required]

    for key, value in config.items():
        if not _is_finite_number(value) or value < 0:
            raise ValueError(f"{key} must be a non-negative number, got {value}")

    weight_sum = config["content_weight"] + config["collaborative_weight"]
    if not math.isclose(weight_sum, 1.0, abs_tol=1e-9):
        raise ValueError(f"Hybrid weights must sum to 1.0, got {weight_sum}")
    if config["unavailable_penalty"] > 1.0:
        raise ValueError("unavailable_penalty must not exceed 1.0")
    return config


def _is_finite_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


# 當前環境設定
CURRENT_ENVIRONMENT = Environment.DEVELOPMENT.value

def get_environment() -> str:
    """取得當前環境"""
    return CURRENT_ENVIRONMENT

def set_environment(env: str) -> None:
    """設定當前環境"""
    global CURRENT_ENVIRONMENT
    if env in [e.value for e in Environment]:
        CURRENT_ENVIRONMENT = env
    else:
        raise ValueError(f"Invalid environment: {env}. Must be one of {[e.value for e in Environment]}")

def get_config_for_environment(env: Optional[str] = None) -> Union[SystemSettings, EnvironmentConfig]:
    """取得指定環境的配置"""
    if env is None:
        env = get_environment()

    if env in ENVIRONMENT_CONFIGS:
        return ENVIRONMENT_CONFIGS[env]
    else:
        return DEFAULT_SETTINGS

def is_development() -> bool:
    """是否為開發環境"""
    return get_environment() == Environment.DEVELOPMENT.value

def is_production() -> bool:
    """是否為生產環境"""
    return get_environment() == Environment.PRODUCTION.value


__all__ = [
    # Enums
    "Environment",
    "LogLevel",

    # TypedDict classes
    "PricingConfig",
    "RecommendationConfig",
    "EnvironmentConfig",
    "SystemSettings",

    # Configuration dictionaries
    "DEFAULT_SETTINGS",
    "DEFAULT_PRICING_CONFIG",
    "DEFAULT_RECOMMENDATION_CONFIG",
    "ENVIRONMENT_CONFIGS",
    "SYSTEM_PATHS",
    "CURRENT_ENVIRONMENT",

    # Functions
    "get_pricing_config",
    "get_recommendation_config",
    "get_environment",
    "set_environment",
    "get_config_for_environment",
    "is_development",
    "is_production",
]
