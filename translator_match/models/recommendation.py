"""
推薦相關模型定義
Recommendation Related Models

Scores are transient: they are recomputed for every request and never
persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..constants.recommendation import RECOMMENDATION_STRENGTH_THRESHOLDS
from .marketplace import Translator


class ScoreStatus(Enum):
    """評分結果狀態"""
    OK = "ok"
    NO_DATA = "no_data"              # 沒有可用資料 (非錯誤)
    STORE_FAILURE = "store_failure"  # 資料來源讀取失敗，已降級為空結果


class ErrorType(Enum):
    """錯誤類型枚舉"""
    INVALID_INPUT = "invalid_input"
    STORE_UNAVAILABLE = "store_unavailable"
    DOCUMENT_PROCESSING = "document_processing"
    CLASSIFICATION = "classification"
    OTHER = "other"


@dataclass(frozen=True)
class ScoringOutcome:
    """
    單一評分器的結果

    讓呼叫端可以區分「沒有資料」與「資料來源失敗」，
    即使兩者目前都降級為空的分數表。
    """
    scores: Dict[str, float]
    status: ScoreStatus = ScoreStatus.OK
    reason: str = ""
    error_type: Optional[ErrorType] = None

    @classmethod
    def empty(cls, reason: str) -> "ScoringOutcome":
        return cls(scores={}, status=ScoreStatus.NO_DATA, reason=reason)

    @classmethod
    def failure(cls, reason: str, error_type: ErrorType = ErrorType.STORE_UNAVAILABLE) -> "ScoringOutcome":
        return cls(scores={}, status=ScoreStatus.STORE_FAILURE, reason=reason, error_type=error_type)

    @property
    def has_data(self) -> bool:
        return bool(self.scores)

    def get(self, translator_id: str) -> float:
        """取得譯者分數，未出現者為 0"""
        return self.scores.get(translator_id, 0.0)


@dataclass(frozen=True)
class RecommendationScore:
    """(訂單, 譯者) 配對的分數"""
    translator_id: str
    content_score: float
    collaborative_score: float
    hybrid_score: float


@dataclass(frozen=True)
class RankedTranslator:
    """附帶分數的推薦譯者"""
    translator: Translator
    score: RecommendationScore

    @property
    def content_score(self) -> float:
        return self.score.content_score

    @property
    def collaborative_score(self) -> float:
        return self.score.collaborative_score

    @property
    def hybrid_score(self) -> float:
        return self.score.hybrid_score


@dataclass
class RecommendationReport:
    """推薦流程的完整結果 (含各評分器狀態)"""
    order_id: str
    recommendations: List[RankedTranslator] = field(default_factory=list)
    candidate_status: ScoreStatus = ScoreStatus.OK
    content_outcome: Optional[ScoringOutcome] = None
    collaborative_outcome: Optional[ScoringOutcome] = None
    reason: str = ""

    @property
    def has_collaborative_data(self) -> bool:
        return self.collaborative_outcome is not None and self.collaborative_outcome.has_data

    @property
    def top_score(self) -> float:
        return self.recommendations[0].hybrid_score if self.recommendations else 0.0

    def get_strength(
        self,
        strong: float = RECOMMENDATION_STRENGTH_THRESHOLDS["strong"],
        moderate: float = RECOMMENDATION_STRENGTH_THRESHOLDS["moderate"],
    ) -> str:
        """依最高混合分數判斷推薦強度"""
        if self.top_score > strong:
            return "Strong"
        if self.top_score > moderate:
            return "Moderate"
        return "Weak"


__all__ = [
    "ScoreStatus",
    "ErrorType",
    "ScoringOutcome",
    "RecommendationScore",
    "RankedTranslator",
    "RecommendationReport",
]
