"""
Workflow Nodes Package.

Auto-registers all editor node kinds into the global NodeRegistry.
Import this package to ensure all kinds are available.
"""

from __future__ import annotations

import uuid
from typing import Dict, Optional

from flow_editor.workflow.nodes.base import get_node_registry

# Import all node modules to trigger registration
from flow_editor.workflow.nodes import marker_nodes  # noqa: F401
from flow_editor.workflow.nodes import model_nodes   # noqa: F401
from flow_editor.workflow.workflow_model import EditorNode, EditorNodeData, Position


def create_node(
    node_type: str,
    node_id: Optional[str] = None,
    position: Optional[Dict[str, float]] = None,
    title: Optional[str] = None,
) -> EditorNode:
    """Create an editor node seeded with its kind's default payload.

    Raises:
        ValueError: If ``node_type`` is not a registered kind.
    """
    kind = get_node_registry().get(node_type)
    if kind is None:
        raise ValueError(f"Unknown node type '{node_type}'")

    data = EditorNodeData(
        type=node_type,
        title=title or kind.label,
        **kind.get_default_value(),
    )
    return EditorNode(
        id=node_id or str(uuid.uuid4())[:8],
        data=data,
        position=Position(**(position or {})),
    )


__all__ = ["create_node", "get_node_registry"]
