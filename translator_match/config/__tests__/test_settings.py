"""
系統設定測試模組
Test module for system settings
"""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.config import settings
from translator_match.config.settings import (
    DEFAULT_PRICING_CONFIG,
    DEFAULT_RECOMMENDATION_CONFIG,
    ENVIRONMENT_CONFIGS,
    Environment,
    get_config_for_environment,
    get_environment,
    get_pricing_config,
    get_recommendation_config,
    is_development,
    is_production,
    set_environment,
)


@pytest.fixture
def restore_environment():
    original = settings.CURRENT_ENVIRONMENT
    yield
    settings.CURRENT_ENVIRONMENT = original


class TestPricingConfig:
    """測試定價配置"""

    def test_default_values(self):
        config = get_pricing_config()
        assert config == DEFAULT_PRICING_CONFIG
        assert config["base_rate_per_word"] == 0.12
        assert config["words_per_hour"] == 250
        assert config["minimum_fixed_price"] == 25.0
        assert config["default_complexity_score"] == 0.75

    def test_override_returns_copy(self):
        config = get_pricing_config(base_rate_per_word=0.2)
        assert config["base_rate_per_word"] == 0.2
        assert DEFAULT_PRICING_CONFIG["base_rate_per_word"] == 0.12

    def test_unknown_setting(self):
        with pytest.raises(ValueError, match="Unknown pricing setting"):
            get_pricing_config(rate=0.1)

    @pytest.mark.parametrize("value", [-0.01, float("nan"), float("inf")])
    def test_invalid_base_rate(self, value):
        with pytest.raises(ValueError, match="base_rate_per_word"):
            get_pricing_config(base_rate_per_word=value)

    def test_words_per_hour_must_be_positive(self):
        with pytest.raises(ValueError, match="words_per_hour must be positive"):
            get_pricing_config(words_per_hour=0)

    def test_default_complexity_out_of_range(self):
        with pytest.raises(ValueError, match="default_complexity_score"):
            get_pricing_config(default_complexity_score=1.5)


class TestRecommendationConfig:
    """測試推薦配置"""

    def test_default_values(self):
        config = get_recommendation_config()
        assert config == DEFAULT_RECOMMENDATION_CONFIG
        assert config["content_weight"] + config["collaborative_weight"] == pytest.approx(1.0)

    def test_override_weights(self):
        config = get_recommendation_config(content_weight=0.7, collaborative_weight=0.3)
        assert config["content_weight"] == 0.7
        assert config["collaborative_weight"] == 0.3

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValueError, match="must sum to 1.0"):
            get_recommendation_config(content_weight=0.7)

    def test_negative_weight(self):
        with pytest.raises(ValueError, match="non-negative"):
            get_recommendation_config(content_weight=-0.2, collaborative_weight=1.2)

    def test_bool_is_not_a_number(self):
        with pytest.raises(ValueError, match="rating_weight"):
            get_recommendation_config(rating_weight=True)

    def test_penalty_cannot_exceed_one(self):
        with pytest.raises(ValueError, match="unavailable_penalty"):
            get_recommendation_config(unavailable_penalty=1.5)

    def test_unknown_setting(self):
        with pytest.raises(ValueError, match="Unknown recommendation setting"):
            get_recommendation_config(popularity_weight=0.1)


class TestEnvironment:
    """測試環境設定"""

    def test_set_and_get_environment(self, restore_environment):
        set_environment("production")
        assert get_environment() == "production"
        assert is_production()
        assert not is_development()

    def test_invalid_environment(self, restore_environment):
        with pytest.raises(ValueError, match="Invalid environment"):
            set_environment("qa")

    def test_config_for_each_environment(self):
        for env in Environment:
            assert get_config_for_environment(env.value) == ENVIRONMENT_CONFIGS[env.value]

    def test_config_defaults_to_current_environment(self, restore_environment):
        set_environment("staging")
        config = get_config_for_environment()
        assert config["recommendation_limit"] == 10
        assert config["enable_checkpointing"] is True

    def test_unknown_environment_falls_back_to_defaults(self):
        config = get_config_for_environment("unknown")
        assert config["default_store_path"] == "data/marketplace.json"
