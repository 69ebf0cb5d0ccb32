"""
文件分類服務模組
Document Classifier Service Module

使用 LLM 為上傳文件標記類別並估計翻譯複雜度
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..constants.pricing import (
    DOCUMENT_CLASSIFICATIONS,
    FALLBACK_ANALYSIS,
    MAX_CLASSIFICATIONS,
    MAX_ANALYSIS_CHARACTERS,
)
from ..core.complexity import clamp_score
from .llm_service import LLMService, LLMFactory


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional document analysis assistant for a translation service. "
    "Only respond with the requested JSON format, nothing else."
)

CLASSIFICATION_PROMPT_TEMPLATE = """Analyze the following document text:

---
{text}
---

Based on the content, provide the following information in JSON format:
1. classification: categorize the document into 1-{max_classifications} of these categories: {categories}
2. complexityScore: assess the document's translation complexity on a scale of 0.0 to 1.0, where:
   - up to 0.5: simple, general content
   - up to 0.75: moderate complexity, specialized but accessible
   - up to 1.0: complex, technical jargon, specialized terminology

Return ONLY a valid JSON object with these fields:
{{
  "classification": ["category1", "category2"],
  "complexityScore": number
}}"""

_CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*|\s*```$")


class ClassificationError(Exception):
    """文件分類錯誤"""
    pass


class DocumentClassifier(ABC):
    """文件分類器介面"""

    @abstractmethod
    def classify(self, text: str) -> Tuple[List[str], float]:
        """回傳 (分類標籤, 複雜度分數)"""
        pass


def fallback_classification() -> Tuple[List[str], float]:
    """分類失敗或無內容時的備援結果"""
    return list(FALLBACK_ANALYSIS["classification"]), float(FALLBACK_ANALYSIS["complexity_score"])


def truncate_for_analysis(text: str, limit: int = MAX_ANALYSIS_CHARACTERS) -> str:
    """截斷過長的文字以避免超出模型限制"""
    if len(text) <= limit:
        return text
    return text[:limit] + "... (text truncated for analysis)"


def parse_classification_response(content: str) -> Tuple[List[str], float]:
    """
    解析並驗證模型回應

    Args:
        content: 模型回傳的 JSON 字串

    Returns:
        (已知分類中的 1-3 個標籤, 限制在 [0, 1] 的複雜度)

    Raises:
        ClassificationError: 回應不是合法 JSON 或欄位格式錯誤
    """
    cleaned = _CODE_FENCE_PATTERN.sub("", content.strip())
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ClassificationError(f"Invalid JSON response from model: {e}") from e

    if not isinstance(payload, dict):
        raise ClassificationError("Model response must be a JSON object")

    raw_labels = payload.get("classification")
    raw_score = payload.get("complexityScore")
    if not isinstance(raw_labels, list):
        raise ClassificationError("Model response is missing a classification list")
    if isinstance(raw_score, bool) or not isinstance(raw_score, (int, float)):
        raise ClassificationError("Model response is missing a numeric complexityScore")

    # 只保留已知分類，比對不分大小寫並去除重複
    known = {name.lower(): name for name in DOCUMENT_CLASSIFICATIONS}
    labels: List[str] = []
    for label in raw_labels:
        canonical = known.get(str(label).strip().lower())
        if canonical and canonical not in labels:
            labels.append(canonical)

    if not labels:
        labels = list(FALLBACK_ANALYSIS["classification"])

    return labels[:MAX_CLASSIFICATIONS], clamp_score(float(raw_score))


class LLMDocumentClassifier(DocumentClassifier):
    """LLM 文件分類器"""

    def __init__(self, llm_service: Optional[LLMService] = None, max_characters: int = MAX_ANALYSIS_CHARACTERS):
        """
        初始化分類器

        Args:
            llm_service: LLM 服務，未提供時依 document_classifier 角色配置建立
            max_characters: 送入模型的最大字元數
        """
        self.llm_service = llm_service or LLMFactory.create_for_agent("document_classifier")
        self.max_characters = max_characters
        self.logger = logging.getLogger(__name__ + ".LLMDocumentClassifier")

    def _build_messages(self, text: str) -> List[dict]:
        prompt = CLASSIFICATION_PROMPT_TEMPLATE.format(
            text=truncate_for_analysis(text, self.max_characters),
            max_classifications=MAX_CLASSIFICATIONS,
            categories=", ".join(DOCUMENT_CLASSIFICATIONS),
        )
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def classify(self, text: str) -> Tuple[List[str], float]:
        """
        分類文件

        空白文件直接回傳備援結果，不呼叫模型。

        Raises:
            ClassificationError: 模型呼叫失敗或回應格式錯誤
        """
        if not text or not text.strip():
            self.logger.warning("Empty text provided for analysis, using fallback values")
            return fallback_classification()

        self.logger.info(f"Classifying document ({len(text)} characters)")
        try:
            response = self.llm_service.invoke(self._build_messages(text))
        except Exception as e:
            raise ClassificationError(f"Failed to analyze document: {e}") from e

        labels, score = parse_classification_response(response.content)
        self.logger.info(f"Classified document as {labels} with complexity {score:.2f}")
        return labels, score

    async def aclassify(self, text: str) -> Tuple[List[str], float]:
        """非同步分類文件"""
        if not text or not text.strip():
            self.logger.warning("Empty text provided for analysis, using fallback values")
            return fallback_classification()

        try:
            response = await self.llm_service.ainvoke(self._build_messages(text))
        except Exception as e:
            raise ClassificationError(f"Failed to analyze document: {e}") from e

        return parse_classification_response(response.content)


__all__ = [
    "ClassificationError",
    "DocumentClassifier",
    "LLMDocumentClassifier",
    "fallback_classification",
    "truncate_for_analysis",
    "parse_classification_response",
]
