"""
LLM service configurations
LLM 服務配置

Model settings for the document classifier that tags uploaded documents
and estimates their translation complexity.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from typing_extensions import TypedDict

from ..constants.llm import LLMProvider

logger = logging.getLogger(__name__)


class RetryConfig(TypedDict):
    """重試配置類型"""
    max_retries: int
    initial_delay: float
    max_delay: float


class ModelConfig(TypedDict):
    """模型配置類型"""
    provider: str
    model_name: str
    api_key_name: str
    base_url: Optional[str]
    temperature: float
    max_tokens: int
    timeout_seconds: int
    retry_config: RetryConfig


class AgentModelConfig(TypedDict):
    """角色模型配置類型"""
    primary_model: str
    fallback_model: Optional[str]
    temperature: float
    max_tokens: int
    custom_prompt_template: Optional[str]


# LLM 服務預設配置
DEFAULT_LLM_CONFIGS: Dict[str, ModelConfig] = {
    "gpt-4o": {
        "provider": LLMProvider.OPENAI.value,
        "model_name": "gpt-4o",
        "api_key_name": "OPENAI_API_KEY",
        "base_url": None,
        "temperature": 0.3,
        "max_tokens": 1024,
        "timeout_seconds": 60,
        "retry_config": {
            "max_retries": 3,
            "initial_delay": 1.0,
            "max_delay": 30.0,
        },
    },
    "gpt-4o-mini": {
        "provider": LLMProvider.OPENAI.value,
        "model_name": "gpt-4o-mini",
        "api_key_name": "OPENAI_API_KEY",
        "base_url": None,
        "temperature": 0.3,
        "max_tokens": 1024,
        "timeout_seconds": 60,
        "retry_config": {
            "max_retries": 3,
            "initial_delay": 1.0,
            "max_delay": 30.0,
        },
    },
    "claude-4-sonnet": {
        "provider": LLMProvider.ANTHROPIC.value,
        "model_name": "claude-4-sonnet",
        "api_key_name": "ANTHROPIC_API_KEY",
        "base_url": None,
        "temperature": 0.3,
        "max_tokens": 1024,
        "timeout_seconds": 60,
        "retry_config": {
            "max_retries": 3,
            "initial_delay": 1.0,
            "max_delay": 30.0,
        },
    },
    "gemini-2.5-flash": {
        "provider": LLMProvider.GOOGLE.value,
        "model_name": "gemini-2.5-flash",
        "api_key_name": "GOOGLE_API_KEY",
        "base_url": None,
        "temperature": 0.3,
        "max_tokens": 1024,
        "timeout_seconds": 60,
        "retry_config": {
            "max_retries": 3,
            "initial_delay": 1.0,
            "max_delay": 30.0,
        },
    },
}

# 角色特定配置
AGENT_MODEL_CONFIGS: Dict[str, AgentModelConfig] = {
    "document_classifier": {
        "primary_model": "gpt-4o",
        "fallback_model": "gpt-4o-mini",
        "temperature": 0.3,
        "max_tokens": 1024,
        "custom_prompt_template": None,
    },
}

AGENT_MODELS_FILE = Path(__file__).parent / "agent_models.json"


def get_model_config(model_name: str) -> Optional[ModelConfig]:
    """取得指定模型的配置"""
    return DEFAULT_LLM_CONFIGS.get(model_name)


def _load_agent_models_from_json(path: Path = AGENT_MODELS_FILE) -> Dict[str, AgentModelConfig]:
    """從 agent_models.json 檔案載入角色模型配置 (檔案不存在時回傳空字典)"""
    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            agent_models_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return {}

    agent_configs: Dict[str, AgentModelConfig] = {}
    for agent_name, agent_data in agent_models_data.get("agents", {}).items():
        fallback_models = agent_data.get("fallback_models") or [None]
        parameters = agent_data.get("model_parameters", {})
        agent_configs[agent_name] = {
            "primary_model": agent_data.get("primary_model", "gpt-4o"),
            "fallback_model": fallback_models[0],
            "temperature": parameters.get("temperature", 0.3),
            "max_tokens": parameters.get("max_tokens", 1024),
            "custom_prompt_template": agent_data.get("custom_prompt_template"),
        }

    logger.debug(f"Loaded agent configurations from {path}: {list(agent_configs.keys())}")
    return agent_configs


def get_agent_config(agent_name: str) -> Optional[AgentModelConfig]:
    """取得指定角色的模型配置 (JSON 檔案優先)"""
    json_configs = _load_agent_models_from_json()
    if agent_name in json_configs:
        return json_configs[agent_name]

    return AGENT_MODEL_CONFIGS.get(agent_name)


def get_llm_config(model_name: str = "gpt-4o") -> ModelConfig:
    """取得 LLM 配置

    Args:
        model_name: 模型名稱，預設為 gpt-4o

    Returns:
        ModelConfig: LLM 配置
    """
    config = get_model_config(model_name)
    if config is None:
        return DEFAULT_LLM_CONFIGS["gpt-4o"]
    return config


__all__ = [
    "RetryConfig",
    "ModelConfig",
    "AgentModelConfig",
    "DEFAULT_LLM_CONFIGS",
    "AGENT_MODEL_CONFIGS",
    "AGENT_MODELS_FILE",
    "get_model_config",
    "get_agent_config",
    "get_llm_config",
]
