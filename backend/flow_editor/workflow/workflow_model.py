"""
Editor Graph Models — nodes, edges, and viewport of the visual canvas.

These are the serializable data structures the visual editor holds
in its state. They are converted to and from the agent-flow backend
document by ``agent_flow_adapter``.

Node payloads are a tagged union keyed by ``data.type``. Fields that
belong to a specific node kind (``message``, ``slot_name`` …) and
legacy fields from older node panels are kept as extra fields on
``EditorNodeData`` so nothing the canvas produced is lost.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    x: float = 0
    y: float = 0


class Viewport(BaseModel):
    x: float = 0
    y: float = 0
    zoom: float = 1


class EditorNodeData(BaseModel):
    """Node configuration as edited in the node panel.

    ``type`` is the editor tag (``start``, ``message``, ``if-else`` …).
    Every other key is type-specific and stored as an extra field.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    title: str = ""

    def get(self, key: str, default: Any = None) -> Any:
        """Read a declared or extra field, like ``dict.get``."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)


class EditorNode(BaseModel):
    """A single node placed on the editor canvas."""

    model_config = ConfigDict(extra="allow")

    id: str
    data: EditorNodeData
    position: Position = Field(default_factory=Position)

    @property
    def node_type(self) -> str:
        return self.data.type


class EditorEdge(BaseModel):
    """A directed edge between two canvas nodes.

    UI-only keys (``sourceHandle``, ``type`` …) are allowed and ignored
    by the adapter.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    source: str
    target: str
    data: Dict[str, Any] = Field(default_factory=dict)


class EditorGraph(BaseModel):
    """The node/edge document manipulated by the canvas."""

    nodes: List[EditorNode] = Field(default_factory=list)
    edges: List[EditorEdge] = Field(default_factory=list)
    viewport: Viewport = Field(default_factory=Viewport)

    def get_node(self, node_id: str) -> Optional[EditorNode]:
        """Find a node by ID."""
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def get_edges_from(self, node_id: str) -> List[EditorEdge]:
        """Get all edges originating from a node."""
        return [e for e in self.edges if e.source == node_id]

    def get_start_nodes(self) -> List[EditorNode]:
        return [n for n in self.nodes if n.node_type == "start"]

    def get_end_nodes(self) -> List[EditorNode]:
        return [n for n in self.nodes if n.node_type == "end"]

    def has_connected_start(self) -> bool:
        """True when at least one start node has an outgoing edge."""
        start_ids = {n.id for n in self.get_start_nodes()}
        if not start_ids:
            return False
        return any(e.source in start_ids for e in self.edges)

    def find_integrity_issues(self) -> List[str]:
        """Report duplicate node IDs and edges with unknown endpoints.

        Returns a list of messages (empty = no issues). The agent-flow
        conversion never calls this; callers opt in.
        """
        issues: List[str] = []

        counts = Counter(n.id for n in self.nodes)
        for node_id, count in counts.items():
            if count > 1:
                issues.append(f"Duplicate node id: {node_id} ({count} nodes)")

        node_ids = set(counts)
        for edge in self.edges:
            if edge.source not in node_ids:
                issues.append(f"Edge {edge.id} references unknown source node: {edge.source}")
            if edge.target not in node_ids:
                issues.append(f"Edge {edge.id} references unknown target node: {edge.target}")

        return issues


class WorkflowDraft(BaseModel):
    """Editor draft record built from a fetched agent flow.

    ``marked_name`` / ``marked_comment`` carry the flow's name and goal,
    timestamps are unix seconds.
    """

    id: str
    graph: EditorGraph
    marked_name: str = ""
    marked_comment: str = ""
    created_at: int = 0
    updated_at: int = 0
