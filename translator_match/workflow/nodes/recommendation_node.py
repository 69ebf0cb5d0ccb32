"""
推薦節點
Recommendation Node

推薦不會讓流程失敗；沒有推薦器或客戶時直接完成。
"""

import dataclasses
import logging
from typing import Dict, Optional

from ..state import OrderAnalysisState, ProcessingStatus
from ...core.hybrid_recommender import HybridRecommender

logger = logging.getLogger(__name__)


class RecommendationNode:
    """推薦譯者節點"""

    def __init__(self, recommender: Optional[HybridRecommender] = None, limit: Optional[int] = None):
        self.recommender = recommender
        self.limit = limit
        self.logger = logging.getLogger(__name__ + ".RecommendationNode")

    def __call__(self, state: OrderAnalysisState) -> Dict[str, object]:
        customer_id = state.get("customer_id")
        if self.recommender is None or not customer_id:
            return {"processing_status": ProcessingStatus.COMPLETED}

        # 只有實際分類出的標籤併入訂單標籤，備援標籤不影響評分
        order = state["order"]
        tags = list(order.tags)
        if not state.get("used_fallback", False):
            tags = list(dict.fromkeys(tags + list(state.get("classification", []))))
        scored_order = dataclasses.replace(order, tags=tags, complexity_score=state.get("complexity_score"))

        report = self.recommender.recommend_with_report(scored_order, customer_id, self.limit)
        self.logger.info(f"Order {order.id}: {len(report.recommendations)} translators recommended")
        return {
            "recommendations": report.recommendations,
            "recommendation_report": report,
            "processing_status": ProcessingStatus.COMPLETED,
        }


__all__ = [
    "RecommendationNode",
]
