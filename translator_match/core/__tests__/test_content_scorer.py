"""
內容式評分器測試模組
Test module for the content-based scorer
"""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.config.settings import get_recommendation_config
from translator_match.core.content_scorer import ContentBasedScorer
from translator_match.models.marketplace import Order, Translator
from translator_match.models.recommendation import ScoreStatus


@pytest.fixture
def scorer() -> ContentBasedScorer:
    return ContentBasedScorer()


@pytest.fixture
def order() -> Order:
    return Order(
        id="o1",
        customer_id="c1",
        source_language="English",
        target_language="Chinese",
        tags=["Legal", "Business"],
    )


def make_translator(translator_id: str = "t1", **kwargs) -> Translator:
    defaults = {
        "languages": {"English", "Chinese"},
        "expertise": set(),
        "rating": 0.0,
    }
    defaults.update(kwargs)
    return Translator(id=translator_id, **defaults)


class TestLanguageGate:
    """測試語言硬性門檻"""

    def test_missing_target_language_scores_zero(self, scorer: ContentBasedScorer, order: Order) -> None:
        """缺少目標語言時分數為 0，不論標籤與評分"""
        translator = make_translator(languages={"English", "French"}, expertise={"Legal", "Business"}, rating=5.0)
        assert scorer.score_translator(order, translator) == 0.0

    def test_missing_source_language_scores_zero(self, scorer: ContentBasedScorer, order: Order) -> None:
        """缺少來源語言時分數為 0"""
        translator = make_translator(languages={"Chinese"}, rating=5.0)
        assert scorer.score_translator(order, translator) == 0.0

    def test_gate_applies_even_if_caller_did_not_filter(self, scorer: ContentBasedScorer, order: Order) -> None:
        """評分器自行重新檢查語言"""
        outcome = scorer.score(order, [make_translator("t1"), make_translator("t2", languages={"German"})])
        assert outcome.scores["t2"] == 0.0
        assert outcome.scores["t1"] > 0.0


class TestContentScore:
    """測試內容分數計算"""

    def test_no_overlap_full_rating(self, scorer: ContentBasedScorer, order: Order) -> None:
        """雙語、無標籤重疊、評分 5、可接單 → 0.7"""
        translator = make_translator(expertise={"Medical"}, rating=5.0, availability=True)
        assert scorer.score_translator(order, translator) == pytest.approx(0.7)

    def test_full_tag_overlap_from_expertise_and_custom_tags(self, scorer: ContentBasedScorer, order: Order) -> None:
        """專長與自訂標籤皆計入重疊"""
        translator = make_translator(expertise={"Legal"}, custom_tags={"Business"}, rating=0.0)
        assert scorer.score_translator(order, translator) == pytest.approx(0.8)

    def test_partial_tag_overlap(self, scorer: ContentBasedScorer, order: Order) -> None:
        """一半標籤重疊"""
        translator = make_translator(expertise={"Legal", "Medical"}, rating=2.5)
        # 0.5 + 0.5 × 0.3 + 0.5 × 0.2
        assert scorer.score_translator(order, translator) == pytest.approx(0.75)

    def test_empty_order_tags(self, scorer: ContentBasedScorer) -> None:
        """訂單沒有標籤時不加標籤分"""
        order = Order(id="o2", customer_id="c1", source_language="English", target_language="Chinese")
        translator = make_translator(expertise={"Legal"}, rating=5.0)
        assert scorer.score_translator(order, translator) == pytest.approx(0.7)

    def test_duplicate_order_tags_are_deduplicated(self, scorer: ContentBasedScorer) -> None:
        """重複標籤只計一次"""
        order = Order(
            id="o3", customer_id="c1", source_language="English", target_language="Chinese",
            tags=["Legal", "Legal", "Medical"],
        )
        translator = make_translator(expertise={"Legal"})
        assert scorer.score_translator(order, translator) == pytest.approx(0.5 + 0.15)

    def test_tag_matching_is_exact(self, scorer: ContentBasedScorer, order: Order) -> None:
        """標籤比對區分大小寫"""
        translator = make_translator(expertise={"legal"})
        assert scorer.score_translator(order, translator) == pytest.approx(0.5)

    def test_unavailable_penalty(self, scorer: ContentBasedScorer, order: Order) -> None:
        """明確不可接單時分數減半"""
        translator = make_translator(expertise={"Medical"}, rating=5.0, availability=False)
        assert scorer.score_translator(order, translator) == pytest.approx(0.35)

    def test_missing_availability_is_not_penalized(self, scorer: ContentBasedScorer, order: Order) -> None:
        """未設定可接單狀態視為可接單"""
        translator = make_translator(rating=5.0, availability=None)
        assert scorer.score_translator(order, translator) == pytest.approx(0.7)

    def test_scores_within_unit_interval(self, scorer: ContentBasedScorer, order: Order) -> None:
        """分數介於 0 與 1"""
        best = make_translator(expertise={"Legal", "Business"}, rating=5.0)
        assert 0.0 <= scorer.score_translator(order, best) <= 1.0
        assert scorer.score_translator(order, best) == pytest.approx(1.0)

    def test_custom_weights(self, order: Order) -> None:
        """自訂權重"""
        config = get_recommendation_config(language_match_score=0.4, rating_weight=0.3)
        scorer = ContentBasedScorer(config)
        translator = make_translator(rating=5.0)
        assert scorer.score_translator(order, translator) == pytest.approx(0.7)


class TestScoreOutcome:
    """測試評分結果"""

    def test_every_translator_is_scored(self, scorer: ContentBasedScorer, order: Order) -> None:
        """每位譯者皆有分數"""
        translators = [make_translator("t1"), make_translator("t2", languages={"English"}), make_translator("t3")]
        outcome = scorer.score(order, translators)

        assert outcome.status == ScoreStatus.OK
        assert set(outcome.scores) == {"t1", "t2", "t3"}

    def test_empty_translator_list(self, scorer: ContentBasedScorer, order: Order) -> None:
        """沒有譯者時為 NO_DATA"""
        outcome = scorer.score(order, [])
        assert outcome.status == ScoreStatus.NO_DATA
        assert outcome.scores == {}
        assert outcome.reason
