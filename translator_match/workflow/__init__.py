"""
Workflow package initialization
工作流程套件初始化
"""

from .state import (
    ProcessingStatus,
    OrderAnalysisState,
    create_initial_state,
    to_document_analysis,
)

from .graph import (
    OrderAnalysisWorkflow,
    create_workflow_graph,
    route_after_step,
)

__all__ = [
    # State management
    "ProcessingStatus",
    "OrderAnalysisState",
    "create_initial_state",
    "to_document_analysis",

    # Graph management
    "OrderAnalysisWorkflow",
    "create_workflow_graph",
    "route_after_step",
]
