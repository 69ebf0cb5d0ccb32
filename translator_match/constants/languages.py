"""
Language family constants
語言家族常數

Fixed language → family table used to estimate translation difficulty.
"""

from enum import Enum
from typing import Dict, FrozenSet, Set


class LanguageFamily(Enum):
    """語言家族"""
    GERMANIC = "Germanic"
    ROMANCE = "Romance"
    SLAVIC = "Slavic"
    SINITIC = "Sinitic"
    JAPONIC = "Japonic"
    KOREANIC = "Koreanic"
    SEMITIC = "Semitic"
    OTHER = "Other"


# 語言名稱 (小寫) → 語言家族
LANGUAGE_FAMILIES: Dict[str, LanguageFamily] = {
    # Germanic
    "english": LanguageFamily.GERMANIC,
    "german": LanguageFamily.GERMANIC,
    "dutch": LanguageFamily.GERMANIC,
    "swedish": LanguageFamily.GERMANIC,
    "norwegian": LanguageFamily.GERMANIC,
    "danish": LanguageFamily.GERMANIC,
    "icelandic": LanguageFamily.GERMANIC,
    "afrikaans": LanguageFamily.GERMANIC,
    # Romance
    "spanish": LanguageFamily.ROMANCE,
    "french": LanguageFamily.ROMANCE,
    "italian": LanguageFamily.ROMANCE,
    "portuguese": LanguageFamily.ROMANCE,
    "romanian": LanguageFamily.ROMANCE,
    "catalan": LanguageFamily.ROMANCE,
    # Slavic
    "russian": LanguageFamily.SLAVIC,
    "ukrainian": LanguageFamily.SLAVIC,
    "polish": LanguageFamily.SLAVIC,
    "czech": LanguageFamily.SLAVIC,
    "slovak": LanguageFamily.SLAVIC,
    "bulgarian": LanguageFamily.SLAVIC,
    "serbian": LanguageFamily.SLAVIC,
    "croatian": LanguageFamily.SLAVIC,
    "belarusian": LanguageFamily.SLAVIC,
    # Sinitic
    "chinese": LanguageFamily.SINITIC,
    "mandarin": LanguageFamily.SINITIC,
    "cantonese": LanguageFamily.SINITIC,
    # Japonic
    "japanese": LanguageFamily.JAPONIC,
    # Koreanic
    "korean": LanguageFamily.KOREANIC,
    # Semitic
    "arabic": LanguageFamily.SEMITIC,
    "hebrew": LanguageFamily.SEMITIC,
    "amharic": LanguageFamily.SEMITIC,
    "maltese": LanguageFamily.SEMITIC,
}

# 距離較遠的語言家族組合 (雙向皆適用)
DISTANT_FAMILY_PAIRS: Set[FrozenSet[LanguageFamily]] = {
    frozenset({LanguageFamily.SINITIC, LanguageFamily.GERMANIC}),
    frozenset({LanguageFamily.SEMITIC, LanguageFamily.GERMANIC}),
}

# 語言對乘數
LANGUAGE_PAIR_MULTIPLIERS: Dict[str, float] = {
    "same_family": 1.0,
    "distant_families": 2.0,
    "different_families": 1.5,
}


__all__ = [
    "LanguageFamily",
    "LANGUAGE_FAMILIES",
    "DISTANT_FAMILY_PAIRS",
    "LANGUAGE_PAIR_MULTIPLIERS",
]
