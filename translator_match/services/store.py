"""
市場資料存取服務模組
Marketplace Store Service Module

定義推薦引擎所需的資料存取介面，並提供記憶體 / JSON 檔案實作
"""

import json
import logging
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..models.marketplace import (
    Translator,
    Order,
    Assignment,
    OrderSummary,
    HistoricalOrder,
    OrderStatus,
    AssignmentStatus,
)


logger = logging.getLogger(__name__)

# 訂單標籤查詢的預設分頁大小
DEFAULT_ORDER_PAGE_SIZE = 50


class StoreUnavailableError(Exception):
    """資料來源無法讀取"""
    pass


class TranslatorDirectory(ABC):
    """譯者目錄介面"""

    @abstractmethod
    def find_by_language_pair(self, source_language: str, target_language: str) -> List[Translator]:
        """取得同時掌握來源與目標語言的譯者"""
        pass


class OrderHistoryStore(ABC):
    """歷史訂單介面"""

    @abstractmethod
    def orders_by_customer(self, customer_id: str) -> List[OrderSummary]:
        """取得客戶的歷史訂單摘要"""
        pass

    @abstractmethod
    def completed_orders_by_language_pair(
        self, source_language: str, target_language: str
    ) -> List[HistoricalOrder]:
        """取得同語言對且已完成的訂單 (含指派記錄)"""
        pass


class InMemoryMarketplaceStore(TranslatorDirectory, OrderHistoryStore):
    """記憶體市場資料庫，同時實作譯者目錄與歷史訂單介面"""

    def __init__(
        self,
        translators: Optional[Iterable[Translator]] = None,
        orders: Optional[Iterable[Order]] = None,
        assignments: Optional[Iterable[Assignment]] = None,
    ) -> None:
        self.translators: List[Translator] = list(translators or [])
        self.orders: List[Order] = list(orders or [])
        self.assignments: List[Assignment] = list(assignments or [])
        self.logger = logging.getLogger(__name__ + ".InMemoryMarketplaceStore")

    def find_by_language_pair(self, source_language: str, target_language: str) -> List[Translator]:
        matches = [t for t in self.translators if t.speaks(source_language, target_language)]
        self.logger.debug(f"Found {len(matches)} translators for {source_language}->{target_language}")
        return matches

    def orders_by_customer(self, customer_id: str) -> List[OrderSummary]:
        return [
            OrderSummary(
                id=order.id,
                source_language=order.source_language,
                target_language=order.target_language,
                tags=list(order.tags),
            )
            for order in self.orders
            if order.customer_id == customer_id
        ]

    def completed_orders_by_language_pair(
        self, source_language: str, target_language: str
    ) -> List[HistoricalOrder]:
        by_order: Dict[str, List[Assignment]] = {}
        for assignment in self.assignments:
            by_order.setdefault(assignment.order_id, []).append(assignment)

        return [
            HistoricalOrder(
                id=order.id,
                customer_id=order.customer_id,
                source_language=order.source_language,
                target_language=order.target_language,
                status=order.status,
                tags=list(order.tags),
                assignments=by_order.get(order.id, []),
            )
            for order in self.orders
            if order.status == OrderStatus.COMPLETED
            and order.source_language == source_language
            and order.target_language == target_language
        ]

    def get_order(self, order_id: str) -> Optional[Order]:
        """依 ID 取得訂單"""
        for order in self.orders:
            if order.id == order_id:
                return order
        return None

    def summarize_tags(self) -> List[Tuple[str, int]]:
        """
        統計所有訂單的標籤使用次數

        Returns:
            (標籤, 次數) 列表，依次數由多到少排序
        """
        counts = Counter(tag for order in self.orders for tag in order.tags)
        return counts.most_common()

    def orders_by_tags(
        self,
        tags: Optional[Iterable[str]] = None,
        status: Optional[OrderStatus] = None,
        limit: int = DEFAULT_ORDER_PAGE_SIZE,
        offset: int = 0,
    ) -> List[Order]:
        """
        依標籤與狀態篩選訂單

        Args:
            tags: 訂單必須包含的所有標籤，未提供時不篩選
            status: 訂單狀態，未提供時不篩選
            limit: 每頁筆數
            offset: 略過的筆數

        Returns:
            符合條件的訂單 (保留資料庫順序)

        Raises:
            ValueError: limit 或 offset 為負數
        """
        if limit < 0 or offset < 0:
            raise ValueError(f"limit and offset must be non-negative, got limit={limit}, offset={offset}")

        required = set(tags or [])
        matches = [
            order for order in self.orders
            if required.issubset(order.tags)
            and (status is None or order.status == status)
        ]
        return matches[offset:offset + limit]


def translator_from_dict(data: Dict[str, object]) -> Translator:
    """由字典建立譯者"""
    return Translator(
        id=str(data["id"]),
        languages=frozenset(data.get("languages") or []),
        expertise=frozenset(data.get("expertise") or []),
        custom_tags=frozenset(data.get("custom_tags") or []),
        rating=float(data.get("rating") or 0.0),
        availability=data.get("availability"),
        full_name=str(data.get("full_name") or ""),
        total_orders=data.get("total_orders"),
        completed_orders=data.get("completed_orders"),
    )


def order_from_dict(data: Dict[str, object]) -> Order:
    """由字典建立訂單"""
    complexity = data.get("complexity_score")
    word_count = data.get("word_count")
    return Order(
        id=str(data["id"]),
        customer_id=str(data["customer_id"]),
        source_language=str(data["source_language"]),
        target_language=str(data["target_language"]),
        tags=list(data.get("tags") or []),
        complexity_score=float(complexity) if complexity is not None else None,
        document_url=data.get("document_url"),
        status=OrderStatus(data.get("status", OrderStatus.PENDING.value)),
        word_count=int(word_count) if word_count is not None else None,
    )


def assignment_from_dict(data: Dict[str, object]) -> Assignment:
    """由字典建立指派記錄"""
    translator_id = data.get("translator_id")
    return Assignment(
        order_id=str(data["order_id"]),
        translator_id=str(translator_id) if translator_id else None,
        status=AssignmentStatus(data["status"]),
    )


def load_marketplace_store(path: Union[str, Path]) -> InMemoryMarketplaceStore:
    """
    從 JSON 檔案載入市場資料

    檔案格式: {"translators": [...], "orders": [...], "assignments": [...]}

    Raises:
        StoreUnavailableError: 檔案不存在或格式錯誤
    """
    store_path = Path(path)
    logger.info(f"Loading marketplace store from {store_path}")

    try:
        with open(store_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise StoreUnavailableError(f"Failed to read marketplace store {store_path}: {e}") from e

    if not isinstance(data, dict):
        raise StoreUnavailableError(f"Marketplace store {store_path} must contain a JSON object")

    try:
        translators = [translator_from_dict(item) for item in data.get("translators", [])]
        orders = [order_from_dict(item) for item in data.get("orders", [])]
        assignments = [assignment_from_dict(item) for item in data.get("assignments", [])]
    except (KeyError, TypeError, ValueError) as e:
        raise StoreUnavailableError(f"Invalid record in marketplace store {store_path}: {e}") from e

    logger.info(
        f"Loaded {len(translators)} translators, {len(orders)} orders, "
        f"{len(assignments)} assignments"
    )
    return InMemoryMarketplaceStore(translators, orders, assignments)


class StoreFactory:
    """資料來源工廠"""

    @staticmethod
    def create_store(store_type: str, path: Optional[str] = None) -> InMemoryMarketplaceStore:
        """建立資料來源"""
        store_type = store_type.lower()
        if store_type == "memory":
            return InMemoryMarketplaceStore()
        elif store_type == "json":
            if not path:
                raise ValueError("A file path is required for the json store")
            return load_marketplace_store(path)
        else:
            raise ValueError(f"Unsupported store type: {store_type}")


__all__ = [
    "DEFAULT_ORDER_PAGE_SIZE",
    "StoreUnavailableError",
    "TranslatorDirectory",
    "OrderHistoryStore",
    "InMemoryMarketplaceStore",
    "translator_from_dict",
    "order_from_dict",
    "assignment_from_dict",
    "load_marketplace_store",
    "StoreFactory",
]
