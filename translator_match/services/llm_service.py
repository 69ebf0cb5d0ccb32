"""
LLM 服務模組 - 使用 LangChain init_chat_model
LLM Service Module - Using LangChain init_chat_model

提供文件分類器使用的統一 LLM 介面
"""

import json
import logging
import os
import time
from dataclasses import dataclass
from typing import List, Dict, Optional, Union

from langchain.chat_models import init_chat_model
from langchain_core.messages import BaseMessage, HumanMessage, AIMessage, SystemMessage

from ..config.llm_config import get_agent_config, get_model_config
from ..constants.llm import LLMModel, LLMProvider, ENV_VARS
from ..constants.pricing import FALLBACK_ANALYSIS


logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """LLM 回應結果"""
    content: str
    model_name: str
    provider: str
    response_time: float
    timestamp: float


class LLMService:
    """LLM 服務類別 - 使用 LangChain init_chat_model"""

    def __init__(
        self,
        provider: LLMProvider,
        model: LLMModel,
        temperature: float = 0.3,
        max_tokens: Optional[int] = 1024,
        timeout: int = 60,
        max_retries: int = 3,
    ):
        self.provider = provider
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.max_retries = max_retries
        self.logger = logging.getLogger(__name__ + ".LLMService")
        self.is_mock = False
        self._client = self._initialize_client()

    def _initialize_client(self):
        """初始化 LLM 客戶端 - 使用 init_chat_model"""
        try:
            # 檢查 API 密鑰是否設置
            if not self._check_api_key():
                self.logger.warning(
                    f"No API key found for {self.provider.value}. Using mock client for development."
                )
                return self._create_mock_client()

            model_identifier = self._get_model_identifier()
            return init_chat_model(
                model=model_identifier,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                max_retries=self.max_retries,
            )

        except Exception as e:
            self.logger.warning(
                f"Failed to initialize real LLM client ({e}). Using mock client for development."
            )
            return self._create_mock_client()

    def _get_model_identifier(self) -> str:
        """根據提供者和模型構建模型標識符"""
        if self.provider == LLMProvider.OPENAI:
            return f"openai:{self.model.value}"
        elif self.provider == LLMProvider.ANTHROPIC:
            return f"anthropic:{self.model.value}"
        elif self.provider == LLMProvider.GOOGLE:
            return f"google_genai:{self.model.value}"
        elif self.provider == LLMProvider.OLLAMA:
            return f"ollama:{self.model.value}"
        else:
            return self.model.value

    def _check_api_key(self) -> bool:
        """檢查對應提供者的 API 密鑰是否設置"""
        if self.provider == LLMProvider.OPENAI:
            return bool(os.getenv(ENV_VARS["openai_api_key"]))
        elif self.provider == LLMProvider.ANTHROPIC:
            return bool(os.getenv(ENV_VARS["anthropic_api_key"]))
        elif self.provider == LLMProvider.GOOGLE:
            return bool(os.getenv(ENV_VARS["google_api_key"]))
        elif self.provider == LLMProvider.OLLAMA:
            # Ollama 不需要 API key
            return True
        return False

    def _create_mock_client(self):
        """建立 Mock 客戶端 - 用於開發和測試"""
        self.is_mock = True

        class MockChatModel:
            @staticmethod
            def _respond(messages: List[BaseMessage]) -> BaseMessage:
                content = str(messages[-1].content) if messages else ""
                # 分類請求回傳備援分析結果
                if "classification" in content.lower():
                    return AIMessage(content=json.dumps({
                        "classification": FALLBACK_ANALYSIS["classification"],
                        "complexityScore": FALLBACK_ANALYSIS["complexity_score"],
                    }))
                return AIMessage(content="This is a development mock response. Configure a real LLM API for actual results.")

            def invoke(self, messages: List[BaseMessage]) -> BaseMessage:
                return self._respond(messages)

            async def ainvoke(self, messages: List[BaseMessage]) -> BaseMessage:
                return self._respond(messages)

        return MockChatModel()

    @staticmethod
    def _convert_messages(messages: Union[List[Dict[str, str]], List[BaseMessage]]) -> List[BaseMessage]:
        """轉換訊息格式為 LangChain 格式，支持兩種輸入格式"""
        langchain_messages: List[BaseMessage] = []

        for msg in messages:
            if isinstance(msg, BaseMessage):
                langchain_messages.append(msg)
            elif isinstance(msg, dict):
                role = msg.get("role", "user")
                content = msg.get("content", "")

                if role == "system":
                    langchain_messages.append(SystemMessage(content=content))
                elif role == "assistant":
                    langchain_messages.append(AIMessage(content=content))
                else:
                    # 預設當作使用者訊息
                    langchain_messages.append(HumanMessage(content=content))

        return langchain_messages

    def invoke(self, messages: Union[List[Dict[str, str]], List[BaseMessage]]) -> LLMResponse:
        """同步調用 LLM"""
        start_time = time.time()

        langchain_messages = self._convert_messages(messages)
        response = self._client.invoke(langchain_messages)

        response_time = time.time() - start_time
        self.logger.debug(f"{self.model.value} responded in {response_time:.2f}s")

        return LLMResponse(
            content=str(response.content),
            model_name=self.model.value,
            provider=self.provider.value,
            response_time=response_time,
            timestamp=time.time()
        )

    async def ainvoke(self, messages: Union[List[Dict[str, str]], List[BaseMessage]]) -> LLMResponse:
        """非同步調用 LLM"""
        start_time = time.time()

        langchain_messages = self._convert_messages(messages)
        response = await self._client.ainvoke(langchain_messages)

        response_time = time.time() - start_time
        self.logger.debug(f"{self.model.value} responded in {response_time:.2f}s")

        return LLMResponse(
            content=str(response.content),
            model_name=self.model.value,
            provider=self.provider.value,
            response_time=response_time,
            timestamp=time.time()
        )


class LLMFactory:
    """LLM 工廠類別"""

    @staticmethod
    def create_llm(provider: LLMProvider, model: LLMModel, **kwargs) -> LLMService:
        """建立 LLM 服務實例"""
        return LLMService(provider, model, **kwargs)

    @staticmethod
    def create_for_agent(agent_name: str) -> LLMService:
        """
        依角色配置建立 LLM 服務

        Args:
            agent_name: 角色名稱，例如 "document_classifier"

        Raises:
            ValueError: 找不到角色或模型配置
        """
        agent_config = get_agent_config(agent_name)
        if agent_config is None:
            raise ValueError(f"No model configuration for agent: {agent_name}")

        model_name = agent_config["primary_model"]
        model_config = get_model_config(model_name)
        if model_config is None:
            raise ValueError(f"Unknown model for agent {agent_name}: {model_name}")

        return LLMService(
            LLMProvider(model_config["provider"]),
            LLMModel(model_name),
            temperature=agent_config["temperature"],
            max_tokens=agent_config["max_tokens"],
            timeout=model_config["timeout_seconds"],
            max_retries=model_config["retry_config"]["max_retries"],
        )


__all__ = [
    "LLMResponse",
    "LLMService",
    "LLMFactory",
]
