"""
LangGraph 工作流程圖定義
LangGraph Workflow Graph Definition

訂單分析流程: 擷取 → 分類 → 定價 → 推薦

擷取或定價失敗時流程直接結束 (狀態 FAILED)；
分類失敗改用備援結果；推薦永遠不會讓流程失敗。
"""

import logging
from typing import Literal, Optional

from langgraph.checkpoint.memory import MemorySaver
from langgraph.graph import StateGraph, START, END
from langgraph.graph.state import CompiledStateGraph

from .nodes import ExtractionNode, ClassificationNode, PricingNode, RecommendationNode
from .state import OrderAnalysisState, ProcessingStatus, create_initial_state
from ..core.cost_model import LanguagePairCostModel
from ..core.hybrid_recommender import HybridRecommender
from ..models.marketplace import Order
from ..services.document_classifier import DocumentClassifier
from ..services.document_processor import DocumentExtractor

logger = logging.getLogger(__name__)


def route_after_step(state: OrderAnalysisState) -> Literal["continue", "end"]:
    """
    步驟完成後的路由邏輯

    Args:
        state: 當前工作流狀態

    Returns:
        失敗時為 "end"，否則為 "continue"
    """
    if state.get("processing_status") == ProcessingStatus.FAILED:
        order = state.get("order")
        order_id = order.id if order else "unknown"
        logger.info(f"Order {order_id} analysis stopped: {state.get('error_message')}")
        return "end"
    return "continue"


def create_workflow_graph(
    extractor: Optional[DocumentExtractor] = None,
    classifier: Optional[DocumentClassifier] = None,
    cost_model: Optional[LanguagePairCostModel] = None,
    recommender: Optional[HybridRecommender] = None,
    recommendation_limit: Optional[int] = None,
) -> StateGraph:
    """
    創建 LangGraph 工作流程圖

    Args:
        extractor: 文件擷取器
        classifier: 文件分類器
        cost_model: 成本模型，未提供時使用預設定價配置
        recommender: 混合推薦器，未提供時略過推薦
        recommendation_limit: 推薦筆數上限

    Returns:
        配置好的 StateGraph
    """
    logger.info("Creating order analysis workflow graph")

    graph = StateGraph(OrderAnalysisState)

    graph.add_node("extract", ExtractionNode(extractor))
    graph.add_node("classify", ClassificationNode(classifier))
    graph.add_node("price", PricingNode(cost_model or LanguagePairCostModel()))
    graph.add_node("recommend", RecommendationNode(recommender, recommendation_limit))

    graph.add_edge(START, "extract")
    graph.add_conditional_edges(
        "extract",
        route_after_step,
        {"continue": "classify", "end": END},
    )
    graph.add_edge("classify", "price")
    graph.add_conditional_edges(
        "price",
        route_after_step,
        {"continue": "recommend", "end": END},
    )
    graph.add_edge("recommend", END)

    return graph


class OrderAnalysisWorkflow:
    """訂單分析工作流管理器"""

    def __init__(
        self,
        extractor: Optional[DocumentExtractor] = None,
        classifier: Optional[DocumentClassifier] = None,
        cost_model: Optional[LanguagePairCostModel] = None,
        recommender: Optional[HybridRecommender] = None,
        recommendation_limit: Optional[int] = None,
        enable_checkpointing: bool = False,
    ):
        """
        初始化工作流管理器

        Args:
            enable_checkpointing: 是否啟用記憶體檢查點
        """
        self.enable_checkpointing = enable_checkpointing
        self.logger = logging.getLogger(__name__ + ".OrderAnalysisWorkflow")

        graph = create_workflow_graph(extractor, classifier, cost_model, recommender, recommendation_limit)
        if enable_checkpointing:
            self.workflow: CompiledStateGraph = graph.compile(checkpointer=MemorySaver())
        else:
            self.workflow = graph.compile()

    def _run_config(self, order: Order, config: Optional[dict]) -> Optional[dict]:
        # 檢查點需要 thread_id
        if config is None and self.enable_checkpointing:
            return {"configurable": {"thread_id": order.id}}
        return config

    def process_order(
        self, order: Order, customer_id: Optional[str] = None, config: Optional[dict] = None
    ) -> OrderAnalysisState:
        """
        分析單一訂單

        Args:
            order: 要分析的訂單
            customer_id: 下單客戶
            config: 工作流配置

        Returns:
            最終工作流狀態
        """
        state = create_initial_state(order, customer_id)
        self.logger.info(f"Analyzing order {order.id}")

        try:
            final_state = self.workflow.invoke(state, config=self._run_config(order, config))
        except Exception as e:
            self.logger.error(f"Workflow execution failed for order {order.id}: {e}")
            state["processing_status"] = ProcessingStatus.FAILED
            state["error_message"] = str(e)
            return state

        self.logger.info(f"Order {order.id} analysis finished with status: {final_state['processing_status'].value}")
        return final_state

    async def aprocess_order(
        self, order: Order, customer_id: Optional[str] = None, config: Optional[dict] = None
    ) -> OrderAnalysisState:
        """非同步分析單一訂單"""
        state = create_initial_state(order, customer_id)

        try:
            return await self.workflow.ainvoke(state, config=self._run_config(order, config))
        except Exception as e:
            self.logger.error(f"Workflow execution failed for order {order.id}: {e}")
            state["processing_status"] = ProcessingStatus.FAILED
            state["error_message"] = str(e)
            return state


__all__ = [
    "route_after_step",
    "create_workflow_graph",
    "OrderAnalysisWorkflow",
]
