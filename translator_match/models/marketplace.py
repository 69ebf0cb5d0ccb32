"""
市場實體模型定義
Marketplace Entity Models

Translators, orders and historical assignments as read from the
marketplace store. The engine only reads these snapshots; status
transitions happen elsewhere.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional


class OrderStatus(Enum):
    """訂單狀態枚舉"""
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AssignmentStatus(Enum):
    """指派狀態枚舉"""
    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    DECLINED = "declined"
    CANCELLED = "cancelled"


def _dedupe(values: List[str]) -> List[str]:
    """去除重複值並保留原始順序"""
    return list(dict.fromkeys(values))


@dataclass
class Translator:
    """譯者資料"""
    id: str
    languages: FrozenSet[str]
    expertise: FrozenSet[str] = field(default_factory=frozenset)
    custom_tags: FrozenSet[str] = field(default_factory=frozenset)
    rating: float = 0.0
    availability: Optional[bool] = None  # None 視為可接單
    full_name: str = ""
    total_orders: Optional[int] = None
    completed_orders: Optional[int] = None

    def __post_init__(self) -> None:
        """資料後處理驗證"""
        if not self.id:
            raise ValueError("Translator id cannot be empty")
        self.languages = frozenset(self.languages)
        self.expertise = frozenset(self.expertise)
        self.custom_tags = frozenset(self.custom_tags or ())
        if not 0.0 <= self.rating <= 5.0:
            raise ValueError(f"Rating {self.rating} must be between 0 and 5")

    @property
    def is_available(self) -> bool:
        """只有明確標記為 False 才視為不可接單"""
        return self.availability is not False

    @property
    def all_tags(self) -> FrozenSet[str]:
        """專長與自訂標籤的聯集"""
        return self.expertise | self.custom_tags

    def speaks(self, source_language: str, target_language: str) -> bool:
        """是否同時掌握來源與目標語言"""
        return source_language in self.languages and target_language in self.languages


@dataclass
class Order:
    """翻譯訂單"""
    id: str
    customer_id: str
    source_language: str
    target_language: str
    tags: List[str] = field(default_factory=list)
    complexity_score: Optional[float] = None
    document_url: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    word_count: Optional[int] = None

    def __post_init__(self) -> None:
        """資料後處理驗證"""
        if not self.source_language or not self.target_language:
            raise ValueError("Source and target language cannot be empty")
        self.tags = _dedupe(list(self.tags or []))
        if self.complexity_score is not None and not 0.0 <= self.complexity_score <= 1.0:
            raise ValueError(f"Complexity score {self.complexity_score} must be between 0 and 1")


@dataclass(frozen=True)
class Assignment:
    """歷史指派記錄"""
    order_id: str
    translator_id: Optional[str]
    status: AssignmentStatus


@dataclass
class OrderSummary:
    """客戶歷史訂單摘要"""
    id: str
    source_language: str
    target_language: str
    tags: List[str] = field(default_factory=list)


@dataclass
class HistoricalOrder:
    """含指派記錄的歷史訂單"""
    id: str
    customer_id: str
    source_language: str
    target_language: str
    status: OrderStatus
    tags: List[str] = field(default_factory=list)
    assignments: List[Assignment] = field(default_factory=list)


__all__ = [
    "OrderStatus",
    "AssignmentStatus",
    "Translator",
    "Order",
    "Assignment",
    "OrderSummary",
    "HistoricalOrder",
]
