"""
Pricing and complexity constants
定價與複雜度常數
"""

from typing import Dict, List, Tuple

# 每字基本費率 (USD)
BASE_RATE_PER_WORD = 0.12

# 標準翻譯速度 (每小時字數)
WORDS_PER_HOUR = 250

# 固定價格訂單
MINIMUM_FIXED_PRICE = 25.0
DEFAULT_COMPLEXITY_SCORE = 0.75  # 未分析時的預設複雜度 (Moderate)

# 金額與時數的小數位數
PRICE_DECIMAL_PLACES = 2

# 複雜度區間: (標籤, 上限(含), 說明)，由低至高排列
COMPLEXITY_BANDS: List[Tuple[str, float, str]] = [
    ("Simple", 0.5, "Simple, general content that is straightforward to translate"),
    ("Moderate", 0.75, "Moderate complexity, specialized but accessible content"),
    ("Complex", 1.0, "Complex content with technical jargon and specialized terminology"),
]

# 文件分類 (LLM 分類器可用的標籤)
DOCUMENT_CLASSIFICATIONS: List[str] = [
    "Technical",
    "Legal",
    "Medical",
    "Financial",
    "Marketing",
    "Literary",
    "Academic",
    "Scientific",
    "Software",
    "Engineering",
    "Business",
    "General",
]

# 分類失敗時的備援結果
FALLBACK_ANALYSIS: Dict[str, object] = {
    "classification": ["General"],
    "complexity_score": DEFAULT_COMPLEXITY_SCORE,
}

MAX_CLASSIFICATIONS = 3
MAX_ANALYSIS_CHARACTERS = 8000


__all__ = [
    "BASE_RATE_PER_WORD",
    "WORDS_PER_HOUR",
    "MINIMUM_FIXED_PRICE",
    "DEFAULT_COMPLEXITY_SCORE",
    "PRICE_DECIMAL_PLACES",
    "COMPLEXITY_BANDS",
    "DOCUMENT_CLASSIFICATIONS",
    "FALLBACK_ANALYSIS",
    "MAX_CLASSIFICATIONS",
    "MAX_ANALYSIS_CHARACTERS",
]
