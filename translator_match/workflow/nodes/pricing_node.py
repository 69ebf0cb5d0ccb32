"""
定價節點
Pricing Node
"""

import logging
from typing import Dict

from ..state import OrderAnalysisState, ProcessingStatus
from ...core.complexity import classify_complexity
from ...core.cost_model import LanguagePairCostModel, InvalidInputError
from ...models.recommendation import ErrorType

logger = logging.getLogger(__name__)


class PricingNode:
    """依字數、複雜度與語言對計算報價"""

    def __init__(self, cost_model: LanguagePairCostModel):
        self.cost_model = cost_model
        self.logger = logging.getLogger(__name__ + ".PricingNode")

    def __call__(self, state: OrderAnalysisState) -> Dict[str, object]:
        order = state["order"]
        try:
            quote = self.cost_model.price(
                state["word_count"],
                state["complexity_score"],
                order.source_language,
                order.target_language,
            )
        except InvalidInputError as e:
            self.logger.error(f"Pricing failed for order {order.id}: {e}")
            return {
                "processing_status": ProcessingStatus.FAILED,
                "error_type": ErrorType.INVALID_INPUT,
                "error_message": str(e),
            }

        self.logger.info(f"Order {order.id} priced at {quote.cost:.2f} ({quote.estimated_hours:.2f} hours)")
        return {
            "quote": quote,
            "complexity": classify_complexity(quote.complexity_score),
        }


__all__ = [
    "PricingNode",
]
