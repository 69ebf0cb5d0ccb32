"""
文件處理節點
Document Processing Nodes

擷取節點下載訂單文件並計算字數；分類節點為文件標記類別並估計複雜度。
分類失敗時改用備援結果，不會中斷流程。
"""

import logging
from typing import Dict, Optional

from ..state import OrderAnalysisState, ProcessingStatus
from ...models.recommendation import ErrorType
from ...services.document_classifier import DocumentClassifier, fallback_classification
from ...services.document_processor import DocumentExtractor, DocumentProcessingError

logger = logging.getLogger(__name__)


class ExtractionNode:
    """文件擷取節點"""

    def __init__(self, extractor: Optional[DocumentExtractor] = None):
        self.extractor = extractor
        self.logger = logging.getLogger(__name__ + ".ExtractionNode")

    def __call__(self, state: OrderAnalysisState) -> Dict[str, object]:
        order = state["order"]

        if not order.document_url:
            if state.get("word_count") is None:
                return {
                    "processing_status": ProcessingStatus.FAILED,
                    "error_type": ErrorType.INVALID_INPUT,
                    "error_message": "Order has neither a document nor a word count",
                }
            return {
                "document_text": "",
                "processing_status": ProcessingStatus.PROCESSING,
                "notes": state.get("notes", []) + ["No document supplied, using the order word count"],
            }

        if self.extractor is None:
            return {
                "processing_status": ProcessingStatus.FAILED,
                "error_type": ErrorType.DOCUMENT_PROCESSING,
                "error_message": "No document extractor configured",
            }

        try:
            self.logger.info(f"Extracting document for order {order.id}")
            extracted = self.extractor.extract(order.document_url)
        except DocumentProcessingError as e:
            self.logger.error(f"Document extraction failed for order {order.id}: {e}")
            return {
                "processing_status": ProcessingStatus.FAILED,
                "error_type": ErrorType.DOCUMENT_PROCESSING,
                "error_message": str(e),
            }
        except Exception as e:
            self.logger.error(f"Unexpected extraction error for order {order.id}: {e}")
            return {
                "processing_status": ProcessingStatus.FAILED,
                "error_type": ErrorType.OTHER,
                "error_message": f"Failed to process document: {e}",
            }

        return {
            "document_text": extracted.text,
            "word_count": extracted.word_count,
            "processing_status": ProcessingStatus.PROCESSING,
        }


class ClassificationNode:
    """文件分類節點"""

    def __init__(self, classifier: Optional[DocumentClassifier] = None):
        self.classifier = classifier
        self.logger = logging.getLogger(__name__ + ".ClassificationNode")

    def __call__(self, state: OrderAnalysisState) -> Dict[str, object]:
        order = state["order"]
        text = state.get("document_text") or ""
        notes = list(state.get("notes", []))

        # 沒有文件內容時沿用訂單上的複雜度，不產生分類標籤
        if not text.strip():
            known_score = state.get("complexity_score")
            if known_score is not None:
                return {"classification": [], "complexity_score": known_score, "used_fallback": False}
            labels, score = fallback_classification()
            notes.append("No document text to analyze, using default classification")
            return {"classification": labels, "complexity_score": score, "used_fallback": True, "notes": notes}

        if self.classifier is None:
            labels, score = fallback_classification()
            notes.append("No classifier configured, using default classification")
            return {"classification": labels, "complexity_score": score, "used_fallback": True, "notes": notes}

        try:
            labels, score = self.classifier.classify(text)
        except Exception as e:
            self.logger.warning(f"Classification failed for order {order.id}, using fallback: {e}")
            labels, score = fallback_classification()
            notes.append(f"Classification failed: {e}")
            return {"classification": labels, "complexity_score": score, "used_fallback": True, "notes": notes}

        return {"classification": labels, "complexity_score": score, "used_fallback": False}


__all__ = [
    "ExtractionNode",
    "ClassificationNode",
]
