"""
Complexity classifier
複雜度分類

Maps a continuous complexity score onto a Simple / Moderate / Complex band.
Classification is advisory, so out-of-range scores are clamped rather than
rejected.
"""

import math

from ..constants.pricing import COMPLEXITY_BANDS
from ..models.pricing import ComplexityClassification, ComplexityLabel


def clamp_score(score: float) -> float:
    """將分數限制在 [0, 1]，NaN 視為 0"""
    if math.isnan(score):
        return 0.0
    return max(0.0, min(1.0, score))


def classify_complexity(score: float) -> ComplexityClassification:
    """
    分類複雜度分數

    區間上限為包含 (score <= 0.5 為 Simple，0.5 < score <= 0.75 為 Moderate，
    其餘為 Complex)。
    """
    clamped = clamp_score(float(score))
    for label, upper_bound, description in COMPLEXITY_BANDS:
        if clamped <= upper_bound:
            return ComplexityClassification(
                label=ComplexityLabel(label),
                description=description,
                score=clamped,
            )

    # 最後一個區間上限為 1.0，clamp 後不會到達這裡
    label, _, description = COMPLEXITY_BANDS[-1]
    return ComplexityClassification(label=ComplexityLabel(label), description=description, score=clamped)


def get_complexity_label(score: float) -> str:
    """只取得標籤文字"""
    return classify_complexity(score).label.value


__all__ = [
    "clamp_score",
    "classify_complexity",
    "get_complexity_label",
]
