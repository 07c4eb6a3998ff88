"""
Pre-built Agent Flow Templates.

Factory functions returning ready-made ``EditorGraph`` objects that
the editor can open as a starting point. Every template passes the
structural validator and the node checklist.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from flow_editor.workflow.nodes import create_node
from flow_editor.workflow.workflow_model import EditorEdge, EditorGraph, EditorNode


# ============================================================================
# Blank Template
# ============================================================================


def create_blank_template() -> EditorGraph:
    """START → END, the graph a new agent flow opens with."""
    nodes = [
        create_node("start", node_id="start", position={"x": 80, "y": 282}),
        create_node("end", node_id="end", position={"x": 480, "y": 282}),
    ]
    edges = [EditorEdge(id="start-end", source="start", target="end")]
    return EditorGraph(nodes=nodes, edges=edges)


# ============================================================================
# Slot Filling Template
# ============================================================================


def create_slot_filling_template() -> EditorGraph:
    """Collect an email address, confirm it, and finish.

    Topology::
        START → ask_email → has_email → [yes → confirm → END | no → END]
    """

    nodes: List[EditorNode] = []
    edges: List[EditorEdge] = []

    def _add(ntype: str, nid: str, x: float, y: float, **fields) -> None:
        node = create_node(ntype, node_id=nid, position={"x": x, "y": y})
        for key, value in fields.items():
            setattr(node.data, key, value)
        nodes.append(node)

    def _edge(src: str, tgt: str) -> None:
        edges.append(EditorEdge(id=f"{src}-{tgt}", source=src, target=tgt))

    _add("start", "start", 80, 282)
    _add("slot-filling", "ask_email", 380, 282,
         slot_name="email",
         question="What email address should we use to reach you?",
         validation={"criteria": "A syntactically valid email address"})
    _add("if-else", "has_email", 680, 282,
         condition="The user provided an email address",
         model={"name": "gpt-4o-mini", "parameters": {"temperature": 0}})
    _add("message", "confirm", 980, 182,
         message="Thanks! We'll be in touch at {{email}}.")
    _add("end", "end", 1280, 282)

    _edge("start", "ask_email")
    _edge("ask_email", "has_email")
    _edge("has_email", "confirm")
    _edge("has_email", "end")
    _edge("confirm", "end")

    return EditorGraph(nodes=nodes, edges=edges)


# ============================================================================
# Template Registry
# ============================================================================

ALL_TEMPLATES: Dict[str, Callable[[], EditorGraph]] = {
    "blank": create_blank_template,
    "slot_filling": create_slot_filling_template,
}


def list_templates() -> List[str]:
    return list(ALL_TEMPLATES)


def get_template(name: str) -> EditorGraph:
    """Build a fresh copy of the named template.

    Raises:
        KeyError: If no template has that name.
    """
    return ALL_TEMPLATES[name]()
