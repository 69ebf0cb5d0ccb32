"""
語言對成本模型
Language-Pair Cost Model

Prices a translation job from its word count, complexity score and
language pair:

    multiplier      = 1.0 same family | 2.0 distant families | 1.5 otherwise
    cost            = words × base_rate × complexity × multiplier
    estimated_hours = (words / words_per_hour) × complexity × multiplier

Both outputs are rounded half-up to two decimals. The model is pure and
performs no I/O.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ..config.settings import PricingConfig, get_pricing_config
from ..constants.languages import (
    LanguageFamily,
    LANGUAGE_FAMILIES,
    DISTANT_FAMILY_PAIRS,
    LANGUAGE_PAIR_MULTIPLIERS,
)
from ..constants.pricing import PRICE_DECIMAL_PLACES
from ..models.pricing import CostQuote

logger = logging.getLogger(__name__)

_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)


class InvalidInputError(ValueError):
    """定價輸入不合法 (字數為負、複雜度超出範圍或 NaN)"""
    pass


def round_half_up(value: float) -> float:
    """四捨五入至兩位小數 (ROUND_HALF_UP)"""
    return float(Decimal(str(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def get_language_family(language: str) -> LanguageFamily:
    """取得語言所屬家族，未知語言歸類為 Other"""
    if not language:
        return LanguageFamily.OTHER
    return LANGUAGE_FAMILIES.get(language.strip().lower(), LanguageFamily.OTHER)


def get_language_pair_multiplier(source_language: str, target_language: str) -> float:
    """
    計算語言對乘數

    Args:
        source_language: 來源語言名稱
        target_language: 目標語言名稱

    Returns:
        同家族 1.0；指定的遠距家族組合 2.0；其他不同家族 1.5
    """
    source_family = get_language_family(source_language)
    target_family = get_language_family(target_language)

    if source_family == target_family:
        return LANGUAGE_PAIR_MULTIPLIERS["same_family"]
    if frozenset({source_family, target_family}) in DISTANT_FAMILY_PAIRS:
        return LANGUAGE_PAIR_MULTIPLIERS["distant_families"]
    return LANGUAGE_PAIR_MULTIPLIERS["different_families"]


def _validate_word_count(word_count: object) -> int:
    if isinstance(word_count, bool) or not isinstance(word_count, int):
        raise InvalidInputError(f"Word count must be an integer, got {word_count!r}")
    if word_count < 0:
        raise InvalidInputError(f"Word count must be non-negative, got {word_count}")
    return word_count


def _validate_complexity(complexity_score: object) -> float:
    if isinstance(complexity_score, bool) or not isinstance(complexity_score, (int, float)):
        raise InvalidInputError(f"Complexity score must be a number, got {complexity_score!r}")
    if math.isnan(complexity_score) or not 0.0 <= complexity_score <= 1.0:
        raise InvalidInputError(f"Complexity score must be within [0, 1], got {complexity_score}")
    return float(complexity_score)


class LanguagePairCostModel:
    """語言對成本模型"""

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config if config is not None else get_pricing_config()
        self.logger = logging.getLogger(__name__ + ".LanguagePairCostModel")

    def _estimate_hours(self, word_count: int, complexity_score: float, multiplier: float) -> float:
        return (word_count / self.config["words_per_hour"]) * complexity_score * multiplier

    def price(
        self,
        word_count: int,
        complexity_score: float,
        source_language: str,
        target_language: str,
    ) -> CostQuote:
        """
        計算翻譯報價

        Args:
            word_count: 文件字數 (非負整數)
            complexity_score: 複雜度分數 [0, 1]
            source_language: 來源語言
            target_language: 目標語言

        Returns:
            CostQuote (cost 與 estimated_hours 皆四捨五入至兩位小數)

        Raises:
            InvalidInputError: 字數或複雜度不合法
        """
        word_count = _validate_word_count(word_count)
        complexity_score = _validate_complexity(complexity_score)

        multiplier = get_language_pair_multiplier(source_language, target_language)
        cost = word_count * self.config["base_rate_per_word"] * complexity_score * multiplier
        hours = self._estimate_hours(word_count, complexity_score, multiplier)

        quote = CostQuote(
            word_count=word_count,
            complexity_score=complexity_score,
            source_language=source_language,
            target_language=target_language,
            cost=round_half_up(cost),
            estimated_hours=round_half_up(hours),
            language_pair_multiplier=multiplier,
            source_family=get_language_family(source_language),
            target_family=get_language_family(target_language),
        )

        self.logger.debug(
            f"Priced {word_count} words {source_language}->{target_language} "
            f"(complexity={complexity_score}, multiplier={multiplier}): "
            f"cost={quote.cost}, hours={quote.estimated_hours}"
        )
        return quote

    def quote_fixed_price(
        self,
        word_count: int,
        fixed_price: float,
        source_language: str,
        target_language: str,
    ) -> CostQuote:
        """
        固定價格訂單報價

        價格由客戶指定 (不得低於最低金額)，複雜度採用預設值，
        預估時數仍依一般公式計算。

        Raises:
            InvalidInputError: 字數不合法或價格低於最低金額
        """
        word_count = _validate_word_count(word_count)
        if isinstance(fixed_price, bool) or not isinstance(fixed_price, (int, float)) or math.isnan(fixed_price):
            raise InvalidInputError(f"Fixed price must be a number, got {fixed_price!r}")
        minimum = self.config["minimum_fixed_price"]
        if fixed_price < minimum:
            raise InvalidInputError(f"Fixed price must be at least {minimum:.2f}, got {fixed_price}")

        complexity_score = self.config["default_complexity_score"]
        multiplier = get_language_pair_multiplier(source_language, target_language)
        hours = self._estimate_hours(word_count, complexity_score, multiplier)

        self.logger.debug(f"Fixed-price quote {fixed_price} for {word_count} words {source_language}->{target_language}")
        return CostQuote(
            word_count=word_count,
            complexity_score=complexity_score,
            source_language=source_language,
            target_language=target_language,
            cost=round_half_up(float(fixed_price)),
            estimated_hours=round_half_up(hours),
            language_pair_multiplier=multiplier,
            source_family=get_language_family(source_language),
            target_family=get_language_family(target_language),
            is_fixed_price=True,
        )


def price(
    word_count: int,
    complexity_score: float,
    source_language: str,
    target_language: str,
    config: Optional[PricingConfig] = None,
) -> CostQuote:
    """以預設 (或指定) 定價配置計算報價"""
    return LanguagePairCostModel(config).price(word_count, complexity_score, source_language, target_language)


__all__ = [
    "InvalidInputError",
    "LanguagePairCostModel",
    "round_half_up",
    "get_language_family",
    "get_language_pair_multiplier",
    "price",
]
