"""
資料模型模組
Data Models Module

本模組包含系統中所有核心資料結構的定義
"""

from .marketplace import *
from .pricing import *
from .recommendation import *

__all__ = [
    # 市場實體
    "Translator",
    "Order",
    "Assignment",
    "OrderSummary",
    "HistoricalOrder",

    # 定價模型
    "ComplexityClassification",
    "CostQuote",
    "DocumentAnalysis",

    # 推薦模型
    "ScoringOutcome",
    "RecommendationScore",
    "RankedTranslator",
    "RecommendationReport",

    # 枚舉類型
    "OrderStatus",
    "AssignmentStatus",
    "ComplexityLabel",
    "ScoreStatus",
    "ErrorType",
]
