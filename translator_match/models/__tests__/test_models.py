"""
資料模型測試模組
Test module for data models
"""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.constants.recommendation import RECOMMENDATION_STRENGTH_THRESHOLDS
from translator_match.models.marketplace import Order, OrderStatus, Translator
from translator_match.models.pricing import CostQuote, DocumentAnalysis
from translator_match.models.recommendation import (
    ErrorType,
    RankedTranslator,
    RecommendationReport,
    RecommendationScore,
    ScoreStatus,
    ScoringOutcome,
)


def make_ranked(translator_id: str, hybrid: float) -> RankedTranslator:
    return RankedTranslator(
        translator=Translator(id=translator_id, languages={"English", "German"}),
        score=RecommendationScore(translator_id, hybrid, 0.0, hybrid),
    )


class TestTranslator:
    """測試譯者模型"""

    def test_sets_are_normalized(self):
        translator = Translator(id="t1", languages=["English", "German"], expertise=["Legal"], custom_tags=None)
        assert translator.languages == frozenset({"English", "German"})
        assert translator.custom_tags == frozenset()

    def test_empty_id(self):
        with pytest.raises(ValueError, match="id cannot be empty"):
            Translator(id="", languages={"English"})

    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValueError, match="between 0 and 5"):
            Translator(id="t1", languages={"English"}, rating=rating)

    @pytest.mark.parametrize("availability, expected", [(None, True), (True, True), (False, False)])
    def test_is_available(self, availability, expected):
        translator = Translator(id="t1", languages={"English"}, availability=availability)
        assert translator.is_available is expected

    def test_all_tags(self):
        translator = Translator(id="t1", languages={"English"}, expertise={"Legal"}, custom_tags={"Gaming", "Legal"})
        assert translator.all_tags == {"Legal", "Gaming"}

    def test_speaks_requires_both_languages(self):
        translator = Translator(id="t1", languages={"English", "German"})
        assert translator.speaks("English", "German")
        assert translator.speaks("German", "English")
        assert not translator.speaks("English", "French")
        assert not translator.speaks("english", "German")


class TestOrder:
    """測試訂單模型"""

    def test_tags_are_deduplicated_in_order(self):
        order = Order("o1", "c1", "English", "German", tags=["Legal", "Finance", "Legal"])
        assert order.tags == ["Legal", "Finance"]
        assert order.status == OrderStatus.PENDING

    def test_missing_language(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Order("o1", "c1", "", "German")

    def test_complexity_out_of_range(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            Order("o1", "c1", "English", "German", complexity_score=1.2)


class TestScoringOutcome:
    """測試評分結果"""

    def test_empty(self):
        outcome = ScoringOutcome.empty("No history")
        assert outcome.status == ScoreStatus.NO_DATA
        assert outcome.reason == "No history"
        assert outcome.error_type is None
        assert not outcome.has_data

    def test_failure(self):
        outcome = ScoringOutcome.failure("connection lost")
        assert outcome.status == ScoreStatus.STORE_FAILURE
        assert outcome.error_type == ErrorType.STORE_UNAVAILABLE
        assert outcome.scores == {}

    def test_get_missing_translator(self):
        outcome = ScoringOutcome(scores={"t1": 0.4})
        assert outcome.get("t1") == 0.4
        assert outcome.get("t2") == 0.0
        assert outcome.has_data


class TestRecommendationReport:
    """測試推薦報告"""

    def test_empty_report(self):
        report = RecommendationReport(order_id="o1")
        assert report.top_score == 0.0
        assert report.get_strength() == "Weak"
        assert not report.has_collaborative_data

    @pytest.mark.parametrize("score, strength", [(0.51, "Strong"), (0.5, "Moderate"), (0.31, "Moderate"), (0.3, "Weak")])
    def test_strength_thresholds(self, score, strength):
        report = RecommendationReport(order_id="o1", recommendations=[make_ranked("t1", score)])
        assert report.get_strength() == strength

    def test_default_thresholds_follow_constants(self):
        strong = RECOMMENDATION_STRENGTH_THRESHOLDS["strong"]
        moderate = RECOMMENDATION_STRENGTH_THRESHOLDS["moderate"]
        assert RecommendationReport("o1", [make_ranked("t1", strong)]).get_strength() == "Moderate"
        assert RecommendationReport("o1", [make_ranked("t1", moderate)]).get_strength() == "Weak"

    def test_custom_thresholds(self):
        report = RecommendationReport(order_id="o1", recommendations=[make_ranked("t1", 0.4)])
        assert report.get_strength(strong=0.35, moderate=0.1) == "Strong"

    def test_collaborative_data_flag(self):
        report = RecommendationReport(
            order_id="o1",
            collaborative_outcome=ScoringOutcome(scores={"t1": 1.0}),
        )
        assert report.has_collaborative_data

    def test_ranked_translator_exposes_scores(self):
        ranked = make_ranked("t1", 0.42)
        assert ranked.hybrid_score == 0.42
        assert ranked.content_score == 0.42
        assert ranked.collaborative_score == 0.0


class TestDocumentAnalysis:
    """測試文件分析結果"""

    def test_without_quote(self):
        analysis = DocumentAnalysis(classification=["General"], complexity_score=0.75, word_count=10)
        assert analysis.cost is None
        assert analysis.estimated_hours is None

    def test_with_quote(self):
        quote = CostQuote(
            word_count=1000,
            complexity_score=1.0,
            source_language="English",
            target_language="Chinese",
            cost=144.0,
            estimated_hours=4.8,
            language_pair_multiplier=1.2,
        )
        analysis = DocumentAnalysis(classification=["Legal"], complexity_score=1.0, word_count=1000, quote=quote)
        assert analysis.cost == 144.0
        assert analysis.estimated_hours == 4.8
