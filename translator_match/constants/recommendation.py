"""
Recommendation scoring constants
推薦評分常數
"""

from typing import Dict

# 混合推薦權重 (總和必須為 1.0)
HYBRID_WEIGHTS: Dict[str, float] = {
    "content": 0.6,
    "collaborative": 0.4,
}

# 內容式評分權重
CONTENT_SCORE_WEIGHTS: Dict[str, float] = {
    "language_match": 0.5,       # 語言對完全符合的基本分
    "tag_match": 0.3,            # 標籤重疊比例的權重
    "rating": 0.2,               # 評分 (0-5) 的權重
    "unavailable_penalty": 0.5,  # 不可接單時的乘數
}

MAX_TRANSLATOR_RATING = 5.0

# 協同過濾只計算此狀態的指派
COMPLETED_STATUS = "completed"

# 推薦強度分級 (依最高混合分數)
RECOMMENDATION_STRENGTH_THRESHOLDS: Dict[str, float] = {
    "strong": 0.5,
    "moderate": 0.3,
}


__all__ = [
    "HYBRID_WEIGHTS",
    "CONTENT_SCORE_WEIGHTS",
    "MAX_TRANSLATOR_RATING",
    "COMPLETED_STATUS",
    "RECOMMENDATION_STRENGTH_THRESHOLDS",
]
