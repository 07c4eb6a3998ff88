"""
Agent Flow Workflow — editor graph models and the agent-flow adapter.

Architecture:
    nodes/              — node kinds: defaults and checklist rules
    workflow_model      — editor graph (canvas) data models
    agent_flow_model    — agent-flow backend documents and API records
    validation          — START/END structural gate, node checklist
    agent_flow_adapter  — editor ⇄ backend conversion
    templates           — pre-built editor graphs
"""

from flow_editor.workflow.nodes import create_node, get_node_registry
from flow_editor.workflow.nodes.base import BaseNode, NodeCheckResult, NodeRegistry
from flow_editor.workflow.workflow_model import (
    EditorEdge,
    EditorGraph,
    EditorNode,
    EditorNodeData,
    WorkflowDraft,
)
from flow_editor.workflow.agent_flow_model import (
    AgentFlowEdge,
    AgentFlowNode,
    AgentFlowResponse,
    AgentFlowWorkflow,
    CreateAgentFlowRequest,
    UpdateAgentFlowRequest,
)
from flow_editor.workflow.validation import (
    StructureValidation,
    WorkflowStructureError,
    check_node_configs,
    validate_workflow_structure,
)
from flow_editor.workflow.agent_flow_adapter import (
    agent_flow_to_draft,
    agent_flow_to_workflow,
    workflow_to_agent_flow_create,
    workflow_to_agent_flow_workflow,
)
from flow_editor.workflow.templates import get_template, list_templates

__all__ = [
    "create_node",
    "get_node_registry",
    "BaseNode",
    "NodeCheckResult",
    "NodeRegistry",
    "EditorEdge",
    "EditorGraph",
    "EditorNode",
    "EditorNodeData",
    "WorkflowDraft",
    "AgentFlowEdge",
    "AgentFlowNode",
    "AgentFlowResponse",
    "AgentFlowWorkflow",
    "CreateAgentFlowRequest",
    "UpdateAgentFlowRequest",
    "StructureValidation",
    "WorkflowStructureError",
    "check_node_configs",
    "validate_workflow_structure",
    "agent_flow_to_draft",
    "agent_flow_to_workflow",
    "workflow_to_agent_flow_create",
    "workflow_to_agent_flow_workflow",
    "get_template",
    "list_templates",
]
