"""
顯示格式工具
Display Formatting Utilities
"""

import math
from typing import Tuple

from ..core.complexity import classify_complexity


def format_complexity(score: float) -> str:
    """
    格式化複雜度分數與標籤

    Example:
        format_complexity(0.5) -> "0.50 (Simple)"
    """
    classification = classify_complexity(score)
    return f"{classification.score:.2f} ({classification.label.value})"


def _split_hours(hours: float) -> Tuple[int, int]:
    """拆成整數小時與分鐘，分鐘四捨五入到 60 時進位"""
    whole_hours = math.floor(hours)
    minutes = math.floor((hours - whole_hours) * 60 + 0.5)
    if minutes == 60:
        return whole_hours + 1, 0
    return whole_hours, minutes


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}{'' if value == 1 else 's'}"


def format_estimated_time(hours: float) -> str:
    """
    將小數時數轉為易讀文字

    Example:
        format_estimated_time(2.5) -> "2 hours 30 minutes"
    """
    if hours <= 0:
        return "0 minutes"

    whole_hours, minutes = _split_hours(hours)
    if whole_hours == 0:
        return _plural(minutes, "minute")
    if minutes == 0:
        return _plural(whole_hours, "hour")
    return f"{_plural(whole_hours, 'hour')} {_plural(minutes, 'minute')}"


def format_estimated_time_compact(hours: float) -> str:
    """
    將小數時數轉為精簡文字

    Example:
        format_estimated_time_compact(2.5) -> "2h 30m"
    """
    if hours <= 0:
        return "0m"

    whole_hours, minutes = _split_hours(hours)
    if whole_hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{whole_hours}h"
    return f"{whole_hours}h {minutes}m"


__all__ = [
    "format_complexity",
    "format_estimated_time",
    "format_estimated_time_compact",
]
