"""
內容式評分器
Content-Based Scorer

Scores each supplied translator against an order's requirements:

1. 0 when the translator lacks the source or target language
2. otherwise the language match base score
3. plus the tag overlap ratio times the tag weight
4. plus rating / 5 times the rating weight
5. times the unavailable penalty when availability is explicitly False
"""

import logging
from typing import Dict, Optional, Sequence

from ..config.settings import RecommendationConfig, get_recommendation_config
from ..constants.recommendation import MAX_TRANSLATOR_RATING
from ..models.marketplace import Order, Translator
from ..models.recommendation import ScoringOutcome

logger = logging.getLogger(__name__)


class ContentBasedScorer:
    """內容式評分器"""

    def __init__(self, config: Optional[RecommendationConfig] = None):
        self.config = config if config is not None else get_recommendation_config()
        self.logger = logging.getLogger(__name__ + ".ContentBasedScorer")

    def score_translator(self, order: Order, translator: Translator) -> float:
        """
        計算單一譯者的內容分數

        Args:
            order: 翻譯訂單
            translator: 候選譯者

        Returns:
            [0, 1] 之間的分數；語言不符時為 0
        """
        # 缺少來源或目標語言即為 0
        if not translator.speaks(order.source_language, order.target_language):
            return 0.0

        score = self.config["language_match_score"]

        order_tags = set(order.tags)
        if order_tags:
            matching = len(order_tags & translator.all_tags)
            score += (matching / len(order_tags)) * self.config["tag_match_weight"]

        score += (translator.rating / MAX_TRANSLATOR_RATING) * self.config["rating_weight"]

        if not translator.is_available:
            score *= self.config["unavailable_penalty"]

        return score

    def score(self, order: Order, translators: Sequence[Translator]) -> ScoringOutcome:
        """
        計算所有譯者的內容分數

        Returns:
            ScoringOutcome，每位譯者皆有分數；沒有譯者時狀態為 NO_DATA
        """
        if not translators:
            return ScoringOutcome.empty("No translators supplied")

        scores: Dict[str, float] = {
            translator.id: self.score_translator(order, translator)
            for translator in translators
        }
        self.logger.debug(f"Content scores for order {order.id}: {scores}")
        return ScoringOutcome(scores=scores)


__all__ = [
    "ContentBasedScorer",
]
