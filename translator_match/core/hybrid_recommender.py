"""
混合推薦器
Hybrid Recommender

Ranks the translators who speak an order's language pair by a weighted
combination of content and collaborative scores. Recommendation never
raises: store failures and unexpected errors degrade to a partial or
empty ranking.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Union

from ..config.settings import RecommendationConfig, get_recommendation_config
from ..models.marketplace import Order, Translator
from ..models.recommendation import (
    ScoringOutcome,
    ScoreStatus,
    RecommendationScore,
    RankedTranslator,
    RecommendationReport,
)
from ..services.store import TranslatorDirectory, OrderHistoryStore
from .content_scorer import ContentBasedScorer
from .collaborative_scorer import CollaborativeScorer

logger = logging.getLogger(__name__)


class HybridRecommender:
    """混合推薦器"""

    def __init__(
        self,
        directory: TranslatorDirectory,
        history: OrderHistoryStore,
        config: Optional[RecommendationConfig] = None,
        content_scorer: Optional[ContentBasedScorer] = None,
        collaborative_scorer: Optional[CollaborativeScorer] = None,
    ):
        """
        初始化混合推薦器

        Args:
            directory: 譯者目錄
            history: 歷史訂單來源
            config: 推薦配置 (權重)，未提供時使用預設值
            content_scorer: 自訂內容式評分器
            collaborative_scorer: 自訂協同評分器
        """
        self.directory = directory
        self.history = history
        self.config = config if config is not None else get_recommendation_config()
        self.content_scorer = content_scorer or ContentBasedScorer(self.config)
        self.collaborative_scorer = collaborative_scorer or CollaborativeScorer(history)
        self.logger = logging.getLogger(__name__ + ".HybridRecommender")

    def recommend(self, order: Order, customer_id: str, limit: Optional[int] = None) -> List[RankedTranslator]:
        """
        推薦譯者

        Args:
            order: 翻譯訂單
            customer_id: 下單客戶
            limit: 最多回傳筆數

        Returns:
            依混合分數由高到低排序的譯者列表；任何錯誤皆回傳空列表
        """
        return self.recommend_with_report(order, customer_id, limit).recommendations

    def recommend_with_report(
        self, order: Order, customer_id: str, limit: Optional[int] = None
    ) -> RecommendationReport:
        """推薦譯者並回傳各評分器的狀態"""
        try:
            candidates = self._fetch_candidates(order)
            if isinstance(candidates, RecommendationReport):
                return candidates

            content = self.content_scorer.score(order, candidates)
            collaborative = self.collaborative_scorer.score(order, customer_id)
            return self._build_report(order, candidates, content, collaborative, limit)

        except Exception as e:
            self.logger.error(f"Recommendation failed for order {order.id}: {e}")
            return RecommendationReport(order_id=order.id, reason=f"Recommendation failed: {e}")

    async def arecommend(
        self, order: Order, customer_id: str, limit: Optional[int] = None
    ) -> RecommendationReport:
        """非同步推薦，兩個評分器於工作執行緒中並行計算"""
        try:
            candidates = await asyncio.to_thread(self._fetch_candidates, order)
            if isinstance(candidates, RecommendationReport):
                return candidates

            content, collaborative = await asyncio.gather(
                asyncio.to_thread(self.content_scorer.score, order, candidates),
                asyncio.to_thread(self.collaborative_scorer.score, order, customer_id),
            )
            return self._build_report(order, candidates, content, collaborative, limit)

        except Exception as e:
            self.logger.error(f"Async recommendation failed for order {order.id}: {e}")
            return RecommendationReport(order_id=order.id, reason=f"Recommendation failed: {e}")

    def _fetch_candidates(self, order: Order) -> Union[List[Translator], RecommendationReport]:
        """取得候選譯者；無候選或讀取失敗時直接回傳報告"""
        try:
            candidates = self.directory.find_by_language_pair(order.source_language, order.target_language)
        except Exception as e:
            self.logger.warning(f"Candidate fetch failed for order {order.id}: {e}")
            return RecommendationReport(
                order_id=order.id,
                candidate_status=ScoreStatus.STORE_FAILURE,
                reason=f"Candidate fetch failed: {e}",
            )

        if not candidates:
            self.logger.info(
                f"No translators for {order.source_language}->{order.target_language} (order {order.id})"
            )
            return RecommendationReport(
                order_id=order.id,
                candidate_status=ScoreStatus.NO_DATA,
                reason="No translators for this language pair",
            )
        return list(candidates)

    def _build_report(
        self,
        order: Order,
        candidates: Sequence[Translator],
        content: ScoringOutcome,
        collaborative: ScoringOutcome,
        limit: Optional[int],
    ) -> RecommendationReport:
        ranked = self.rank(candidates, content, collaborative)
        if limit is not None:
            ranked = ranked[:max(limit, 0)]

        self.logger.info(
            f"Ranked {len(candidates)} translators for order {order.id} "
            f"(collaborative: {collaborative.status.value})"
        )
        return RecommendationReport(
            order_id=order.id,
            recommendations=ranked,
            content_outcome=content,
            collaborative_outcome=collaborative,
            reason=collaborative.reason,
        )

    def rank(
        self,
        candidates: Sequence[Translator],
        content: ScoringOutcome,
        collaborative: ScoringOutcome,
    ) -> List[RankedTranslator]:
        """
        合併分數並排序

        只考慮候選譯者，分數表中其他 ID 會被忽略；
        同分時保留候選列表原本的順序。
        """
        content_weight = self.config["content_weight"]
        collaborative_weight = self.config["collaborative_weight"]

        ranked = []
        for translator in candidates:
            content_score = content.get(translator.id)
            collaborative_score = collaborative.get(translator.id)
            ranked.append(RankedTranslator(
                translator=translator,
                score=RecommendationScore(
                    translator_id=translator.id,
                    content_score=content_score,
                    collaborative_score=collaborative_score,
                    hybrid_score=content_weight * content_score + collaborative_weight * collaborative_score,
                ),
            ))

        # sorted 為穩定排序，reverse 不會打亂同分順序
        return sorted(ranked, key=lambda item: item.hybrid_score, reverse=True)


__all__ = [
    "HybridRecommender",
]
