"""
Core scoring and pricing module
核心評分與定價模組
"""

from .cost_model import *
from .complexity import *
from .content_scorer import *
from .collaborative_scorer import *
from .hybrid_recommender import *

__all__ = [
    # 定價
    "InvalidInputError",
    "LanguagePairCostModel",
    "round_half_up",
    "get_language_family",
    "get_language_pair_multiplier",
    "price",

    # 複雜度
    "clamp_score",
    "classify_complexity",
    "get_complexity_label",

    # 推薦
    "ContentBasedScorer",
    "CollaborativeScorer",
    "HybridRecommender",
]
