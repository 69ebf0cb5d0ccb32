"""
推薦結果匯出測試模組
Test module for the recommendation exporter
"""

import json
import sys
from pathlib import Path

import pandas as pd
import pytest

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.models.marketplace import Translator
from translator_match.models.recommendation import RankedTranslator, RecommendationScore
from translator_match.utils.recommendation_exporter import (
    EXPORT_COLUMNS,
    ExportError,
    RecommendationExporter,
)


@pytest.fixture
def recommendations():
    return [
        RankedTranslator(
            translator=Translator(id="t1", languages={"English", "German"}, rating=4.8, full_name="Anna Weber"),
            score=RecommendationScore("t1", 0.96, 0.0, 0.576),
        ),
        RankedTranslator(
            translator=Translator(id="t2", languages={"English", "German"}, availability=False),
            score=RecommendationScore("t2", 0.35, 2 / 3, 0.476666666),
        ),
    ]


@pytest.fixture
def exporter():
    return RecommendationExporter()


class TestRecommendationExporter:
    """測試推薦結果匯出器"""

    def test_to_rows(self, exporter, recommendations):
        rows = exporter.to_rows("o1", recommendations)
        assert [row["rank"] for row in rows] == [1, 2]
        assert rows[0]["full_name"] == "Anna Weber"
        assert rows[1]["available"] is False
        assert rows[1]["collaborative_score"] == 0.6667
        assert list(rows[0]) == EXPORT_COLUMNS

    @pytest.mark.parametrize("path, expected", [
        ("out/recs.jsonl", "jsonl"),
        ("out/recs.JSON", "jsonl"),
        ("out/recs.csv", "csv"),
    ])
    def test_detect_format(self, exporter, path, expected):
        assert exporter.detect_format(path) == expected

    def test_detect_unsupported_format(self, exporter):
        with pytest.raises(ExportError, match="Unsupported export format: .xlsx"):
            exporter.detect_format("recs.xlsx")

    def test_export_jsonl(self, exporter, recommendations, tmp_path):
        output = tmp_path / "nested" / "recs.jsonl"
        assert exporter.export("o1", recommendations, output) == "jsonl"

        lines = output.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["translator_id"] == "t1"
        assert first["hybrid_score"] == 0.576

    def test_export_csv(self, exporter, recommendations, tmp_path):
        output = tmp_path / "recs.csv"
        assert exporter.export("o1", recommendations, output) == "csv"

        df = pd.read_csv(output)
        assert list(df.columns) == EXPORT_COLUMNS
        assert df["translator_id"].tolist() == ["t1", "t2"]
        assert df["hybrid_score"].iloc[1] == pytest.approx(0.4767)

    def test_export_empty_csv_keeps_header(self, exporter, tmp_path):
        output = tmp_path / "empty.csv"
        exporter.export("o1", [], output)
        df = pd.read_csv(output)
        assert list(df.columns) == EXPORT_COLUMNS
        assert df.empty
