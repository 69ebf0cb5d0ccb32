"""
定價相關模型定義
Pricing Related Models
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..constants.languages import LanguageFamily


class ComplexityLabel(Enum):
    """複雜度標籤"""
    SIMPLE = "Simple"
    MODERATE = "Moderate"
    COMPLEX = "Complex"


@dataclass(frozen=True)
class ComplexityClassification:
    """複雜度分類結果"""
    label: ComplexityLabel
    description: str
    score: float


@dataclass(frozen=True)
class CostQuote:
    """
    翻譯報價

    每次由輸入重新計算，不會被原地修改。
    """
    word_count: int
    complexity_score: float
    source_language: str
    target_language: str
    cost: float
    estimated_hours: float
    language_pair_multiplier: float
    source_family: LanguageFamily = LanguageFamily.OTHER
    target_family: LanguageFamily = LanguageFamily.OTHER
    is_fixed_price: bool = False


@dataclass
class DocumentAnalysis:
    """文件分析結果"""
    classification: List[str]
    complexity_score: float
    word_count: int
    quote: Optional[CostQuote] = None
    used_fallback: bool = False
    notes: List[str] = field(default_factory=list)

    @property
    def cost(self) -> Optional[float]:
        return self.quote.cost if self.quote else None

    @property
    def estimated_hours(self) -> Optional[float]:
        return self.quote.estimated_hours if self.quote else None


__all__ = [
    "ComplexityLabel",
    "ComplexityClassification",
    "CostQuote",
    "DocumentAnalysis",
]
