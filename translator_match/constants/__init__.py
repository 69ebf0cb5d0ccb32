"""
Constants module initialization
"""

from .languages import *
from .pricing import *
from .recommendation import *
from .llm import *

__all__ = [
    # Language constants
    "LanguageFamily",
    "LANGUAGE_FAMILIES",
    "DISTANT_FAMILY_PAIRS",
    "LANGUAGE_PAIR_MULTIPLIERS",

    # Pricing constants
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

    # Recommendation constants
    "HYBRID_WEIGHTS",
    "CONTENT_SCORE_WEIGHTS",
    "MAX_TRANSLATOR_RATING",
    "COMPLETED_STATUS",
    "RECOMMENDATION_STRENGTH_THRESHOLDS",

    # LLM constants
    "LLMProvider",
    "LLMModel",
    "PROVIDER_MODELS",
    "DEFAULT_MODELS",
    "ENV_VARS",
]
