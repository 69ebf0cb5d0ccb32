"""
協同過濾評分器
Collaborative Scorer

Estimates how likely each translator is to suit an order from aggregate
past assignment outcomes. Historical orders count as similar when they
share the exact source and target language; tags are not considered.
Store failures never propagate: they are logged and reported as a
STORE_FAILURE outcome with no scores.
"""

import logging
from collections import Counter

from ..constants.recommendation import COMPLETED_STATUS
from ..models.marketplace import Order
from ..models.recommendation import ScoringOutcome, ErrorType
from ..services.store import OrderHistoryStore

logger = logging.getLogger(__name__)


class CollaborativeScorer:
    """協同過濾評分器"""

    def __init__(self, history: OrderHistoryStore):
        self.history = history
        self.logger = logging.getLogger(__name__ + ".CollaborativeScorer")

    def score(self, order: Order, customer_id: str) -> ScoringOutcome:
        """
        計算協同分數

        Args:
            order: 翻譯訂單
            customer_id: 下單客戶

        Returns:
            ScoringOutcome；分數為各譯者完成指派數 / 總完成指派數，總和為 1
        """
        try:
            customer_orders = self.history.orders_by_customer(customer_id)
            if not customer_orders:
                return ScoringOutcome.empty(f"Customer {customer_id} has no order history")

            similar_orders = self.history.completed_orders_by_language_pair(
                order.source_language, order.target_language
            )
        except Exception as e:
            self.logger.warning(f"Collaborative scoring skipped for order {order.id}: {e}")
            return ScoringOutcome.failure(str(e), ErrorType.STORE_UNAVAILABLE)

        counts: Counter = Counter()
        for historical in similar_orders:
            for assignment in historical.assignments:
                # 沒有譯者 ID 的指派無法歸屬，略過
                if not assignment.translator_id:
                    continue
                if assignment.status.value == COMPLETED_STATUS:
                    counts[assignment.translator_id] += 1

        total = sum(counts.values())
        if total == 0:
            return ScoringOutcome.empty(
                f"No completed assignments for {order.source_language}->{order.target_language}"
            )

        scores = {translator_id: count / total for translator_id, count in counts.items()}
        self.logger.debug(f"Collaborative scores for order {order.id}: {scores}")
        return ScoringOutcome(scores=scores)


__all__ = [
    "CollaborativeScorer",
]
