"""
Translator Recommendation & Order Pricing Engine
Hybrid translator ranking and language-pair aware translation pricing
"""

__version__ = "0.1.0"
__description__ = "Translator recommendation and order pricing engine"

from .config import (
    get_pricing_config,
    get_recommendation_config,
    get_logging_config,
)

from .models import (
    Translator,
    Order,
    CostQuote,
    RankedTranslator,
)

from .core import (
    InvalidInputError,
    LanguagePairCostModel,
    price,
    classify_complexity,
    HybridRecommender,
)

from .services import (
    InMemoryMarketplaceStore,
    load_marketplace_store,
)

from .workflow import (
    OrderAnalysisWorkflow,
)

__all__ = [
    # Configuration
    "get_pricing_config",
    "get_recommendation_config",
    "get_logging_config",

    # Models
    "Translator",
    "Order",
    "CostQuote",
    "RankedTranslator",

    # Core
    "InvalidInputError",
    "LanguagePairCostModel",
    "price",
    "classify_complexity",
    "HybridRecommender",

    # Services
    "InMemoryMarketplaceStore",
    "load_marketplace_store",

    # Workflow
    "OrderAnalysisWorkflow",
]
