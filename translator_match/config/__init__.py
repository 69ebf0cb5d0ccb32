"""
Configuration package initialization
配置套件初始化
"""

from .settings import (
    Environment,
    PricingConfig,
    RecommendationConfig,
    DEFAULT_PRICING_CONFIG,
    DEFAULT_RECOMMENDATION_CONFIG,
    get_pricing_config,
    get_recommendation_config,
    get_environment,
    set_environment,
    get_config_for_environment,
)
from .llm_config import get_agent_config, get_llm_config
from .logging_config import get_logging_config, setup_logging, LoggerNames

__all__ = [
    "Environment",
    "PricingConfig",
    "RecommendationConfig",
    "DEFAULT_PRICING_CONFIG",
    "DEFAULT_RECOMMENDATION_CONFIG",
    "get_pricing_config",
    "get_recommendation_config",
    "get_environment",
    "set_environment",
    "get_config_for_environment",
    "get_agent_config",
    "get_llm_config",
    "get_logging_config",
    "setup_logging",
    "LoggerNames",
]
