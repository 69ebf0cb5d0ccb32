"""
Workflow nodes package initialization
工作流程節點套件初始化
"""

from .document_node import ExtractionNode, ClassificationNode
from .pricing_node import PricingNode
from .recommendation_node import RecommendationNode

__all__ = [
    "ExtractionNode",
    "ClassificationNode",
    "PricingNode",
    "RecommendationNode",
]
