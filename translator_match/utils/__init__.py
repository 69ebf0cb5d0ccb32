"""
Utils package initialization
工具套件初始化
"""

from .formatting import format_complexity, format_estimated_time, format_estimated_time_compact
from .recommendation_exporter import RecommendationExporter, ExportError

__all__ = [
    "format_complexity",
    "format_estimated_time",
    "format_estimated_time_compact",
    "RecommendationExporter",
    "ExportError",
]
