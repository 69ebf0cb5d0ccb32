"""
推薦結果匯出工具
Recommendation Export Utility

支援 JSONL 與 CSV 兩種輸出格式
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

import pandas as pd

from ..models.recommendation import RankedTranslator

logger = logging.getLogger(__name__)

EXPORT_FORMATS: Dict[str, List[str]] = {
    "jsonl": [".jsonl", ".json"],
    "csv": [".csv"],
}

EXPORT_COLUMNS: List[str] = [
    "order_id", "rank", "translator_id", "full_name", "rating",
    "available", "content_score", "collaborative_score", "hybrid_score",
]


class ExportError(Exception):
    """匯出錯誤"""
    pass


class RecommendationExporter:
    """推薦結果匯出器"""

    def __init__(self):
        self.logger = logging.getLogger(__name__ + ".RecommendationExporter")

    @staticmethod
    def ranked_to_dict(order_id: str, rank: int, item: RankedTranslator) -> Dict[str, object]:
        """將單筆推薦轉為扁平字典"""
        translator = item.translator
        return {
            "order_id": order_id,
            "rank": rank,
            "translator_id": translator.id,
            "full_name": translator.full_name,
            "rating": translator.rating,
            "available": translator.is_available,
            "content_score": round(item.content_score, 4),
            "collaborative_score": round(item.collaborative_score, 4),
            "hybrid_score": round(item.hybrid_score, 4),
        }

    def to_rows(self, order_id: str, recommendations: Sequence[RankedTranslator]) -> List[Dict[str, object]]:
        return [self.ranked_to_dict(order_id, rank, item) for rank, item in enumerate(recommendations, start=1)]

    def detect_format(self, output_path: Union[str, Path]) -> str:
        """
        依副檔名判斷輸出格式

        Raises:
            ExportError: 不支援的格式
        """
        suffix = Path(output_path).suffix.lower()
        for format_name, extensions in EXPORT_FORMATS.items():
            if suffix in extensions:
                return format_name
        raise ExportError(f"Unsupported export format: {suffix}")

    def to_jsonl(self, order_id: str, recommendations: Sequence[RankedTranslator], output_path: Union[str, Path]) -> None:
        """匯出為 JSONL"""
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                for row in self.to_rows(order_id, recommendations):
                    f.write(json.dumps(row, ensure_ascii=False) + "\n")
        except OSError as e:
            raise ExportError(f"JSONL export failed: {e}") from e

        self.logger.info(f"Exported {len(recommendations)} recommendations to {output_path}")

    def to_csv(self, order_id: str, recommendations: Sequence[RankedTranslator], output_path: Union[str, Path]) -> None:
        """匯出為 CSV"""
        try:
            df = pd.DataFrame(self.to_rows(order_id, recommendations), columns=EXPORT_COLUMNS)
            df.to_csv(output_path, index=False, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"CSV export failed: {e}") from e

        self.logger.info(f"Exported {len(recommendations)} recommendations to {output_path}")

    def export(self, order_id: str, recommendations: Sequence[RankedTranslator], output_path: Union[str, Path]) -> str:
        """
        依副檔名匯出推薦結果

        Returns:
            使用的格式名稱
        """
        export_format = self.detect_format(output_path)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        if export_format == "csv":
            self.to_csv(order_id, recommendations, output_path)
        else:
            self.to_jsonl(order_id, recommendations, output_path)
        return export_format


__all__ = [
    "EXPORT_FORMATS",
    "EXPORT_COLUMNS",
    "ExportError",
    "RecommendationExporter",
]
