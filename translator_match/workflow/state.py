"""
LangGraph 工作流狀態管理
LangGraph Workflow State Management

訂單分析流程 (擷取 → 分類 → 定價 → 推薦) 在節點之間傳遞的狀態結構
"""

from enum import Enum
from typing import List, Optional

from typing_extensions import TypedDict

from ..models.marketplace import Order
from ..models.pricing import ComplexityClassification, CostQuote, DocumentAnalysis
from ..models.recommendation import RankedTranslator, RecommendationReport, ErrorType


class ProcessingStatus(Enum):
    """處理狀態枚舉"""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class OrderAnalysisState(TypedDict):
    """
    訂單分析工作流狀態

    - 擷取節點填入 document_text / word_count
    - 分類節點填入 classification / complexity_score / used_fallback
    - 定價節點填入 quote / complexity
    - 推薦節點填入 recommendations / recommendation_report
    """
    order: Order
    customer_id: Optional[str]

    # 文件處理結果
    document_text: Optional[str]
    word_count: Optional[int]
    classification: List[str]
    complexity_score: Optional[float]
    used_fallback: bool

    # 定價結果
    quote: Optional[CostQuote]
    complexity: Optional[ComplexityClassification]

    # 推薦結果
    recommendations: List[RankedTranslator]
    recommendation_report: Optional[RecommendationReport]

    # 處理狀態
    processing_status: ProcessingStatus
    error_type: Optional[ErrorType]
    error_message: Optional[str]
    notes: List[str]


def create_initial_state(order: Order, customer_id: Optional[str] = None) -> OrderAnalysisState:
    """
    創建初始工作流狀態

    Args:
        order: 要分析的訂單
        customer_id: 下單客戶，未提供時使用訂單上的客戶

    Returns:
        初始化的工作流狀態
    """
    return OrderAnalysisState(
        order=order,
        customer_id=customer_id if customer_id is not None else order.customer_id,
        document_text=None,
        word_count=order.word_count,
        classification=[],
        complexity_score=order.complexity_score,
        used_fallback=False,
        quote=None,
        complexity=None,
        recommendations=[],
        recommendation_report=None,
        processing_status=ProcessingStatus.PENDING,
        error_type=None,
        error_message=None,
        notes=[],
    )


def to_document_analysis(state: OrderAnalysisState) -> Optional[DocumentAnalysis]:
    """將完成的工作流狀態轉換為文件分析結果"""
    if state.get("processing_status") != ProcessingStatus.COMPLETED:
        return None

    return DocumentAnalysis(
        classification=list(state.get("classification", [])),
        complexity_score=state["complexity_score"],
        word_count=state["word_count"],
        quote=state.get("quote"),
        used_fallback=state.get("used_fallback", False),
        notes=list(state.get("notes", [])),
    )


__all__ = [
    "ProcessingStatus",
    "OrderAnalysisState",
    "create_initial_state",
    "to_document_analysis",
]
