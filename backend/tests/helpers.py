"""
Editor-graph builders shared by the adapter, model, and validation tests.
"""

from typing import Any, Dict, List, Optional

from flow_editor.workflow.workflow_model import EditorGraph


def node(node_id: str, node_type: str, title: str = "", **fields: Any) -> Dict[str, Any]:
    """Raw canvas node as the editor state holds it."""
    return {
        "id": node_id,
        "type": "custom",
        "data": {"type": node_type, "title": title, **fields},
        "position": {"x": 0, "y": 0},
    }


def edge(edge_id: str, source: str, target: str, **extra: Any) -> Dict[str, Any]:
    return {"id": edge_id, "source": source, "target": target, **extra}


def graph(nodes: List[Dict[str, Any]], edges: Optional[List[Dict[str, Any]]] = None) -> EditorGraph:
    return EditorGraph.model_validate({"nodes": nodes, "edges": edges or []})
