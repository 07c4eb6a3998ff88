"""
Workflow Validation — structural gate and node checklist.

``validate_workflow_structure`` is the START/END cardinality check
that must pass before an editor graph is sent to the agent-flow
backend. ``check_node_configs`` runs each node kind's own rule and
only reports; it never blocks conversion.
"""

from __future__ import annotations

from logging import getLogger
from typing import Iterable, List, Optional

from pydantic import BaseModel

from flow_editor.workflow.nodes import get_node_registry
from flow_editor.workflow.nodes.base import NodeRegistry
from flow_editor.workflow.workflow_model import EditorNode

logger = getLogger(__name__)

_START_TYPE = "start"
_END_TYPE = "end"


class WorkflowStructureError(ValueError):
    """The graph does not have exactly one START and one END node."""


class StructureValidation(BaseModel):
    valid: bool
    error: Optional[str] = None


def validate_workflow_structure(nodes: Iterable[EditorNode]) -> StructureValidation:
    """Check that the graph has exactly one START and one END node.

    The first failing check is returned; errors are not aggregated.
    """
    nodes = list(nodes)
    start_count = sum(1 for n in nodes if n.node_type == _START_TYPE)
    end_count = sum(1 for n in nodes if n.node_type == _END_TYPE)

    if start_count == 0:
        return StructureValidation(valid=False, error="Workflow must have exactly one START node")
    if start_count > 1:
        return StructureValidation(
            valid=False,
            error="Workflow must have exactly one START node (found multiple)",
        )
    if end_count == 0:
        return StructureValidation(valid=False, error="Workflow must have exactly one END node")
    if end_count > 1:
        return StructureValidation(
            valid=False,
            error="Workflow must have exactly one END node (found multiple)",
        )

    return StructureValidation(valid=True)


def assert_workflow_structure(nodes: Iterable[EditorNode]) -> None:
    """Raise ``WorkflowStructureError`` unless the structure is valid."""
    result = validate_workflow_structure(nodes)
    if not result.valid:
        logger.warning(f"Workflow structure rejected: {result.error}")
        raise WorkflowStructureError(result.error)


def check_node_configs(
    nodes: Iterable[EditorNode],
    registry: Optional[NodeRegistry] = None,
) -> List[str]:
    """Run every node kind's ``check_valid`` over the graph.

    Nodes whose tag has no registered kind are skipped.
    Returns a list of messages (empty = all nodes configured).
    """
    reg = registry or get_node_registry()
    problems: List[str] = []

    for node in nodes:
        kind = reg.get(node.node_type)
        if kind is None:
            continue
        result = kind.check_valid(node.data.model_dump())
        if not result.is_valid:
            title = node.data.title or kind.label
            problems.append(f"Node '{title}' ({node.id}): {result.error_message}")

    return problems
