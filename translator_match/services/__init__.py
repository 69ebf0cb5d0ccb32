"""
服務模組
Services Module

本模組包含資料存取、文件處理與 LLM 服務
"""

from .store import (
    StoreUnavailableError,
    TranslatorDirectory,
    OrderHistoryStore,
    InMemoryMarketplaceStore,
    load_marketplace_store,
    StoreFactory,
)
from .llm_service import LLMService, LLMResponse, LLMFactory
from .document_processor import (
    DocumentProcessingError,
    ExtractedDocument,
    DocumentExtractor,
    HttpDocumentExtractor,
    count_words,
)
from .document_classifier import (
    ClassificationError,
    DocumentClassifier,
    LLMDocumentClassifier,
)

__all__ = [
    "StoreUnavailableError",
    "TranslatorDirectory",
    "OrderHistoryStore",
    "InMemoryMarketplaceStore",
    "load_marketplace_store",
    "StoreFactory",
    "LLMService",
    "LLMResponse",
    "LLMFactory",
    "DocumentProcessingError",
    "ExtractedDocument",
    "DocumentExtractor",
    "HttpDocumentExtractor",
    "count_words",
    "ClassificationError",
    "DocumentClassifier",
    "LLMDocumentClassifier",
]
