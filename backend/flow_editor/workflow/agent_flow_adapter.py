"""
Agent Flow Adapter — convert between the editor graph and the
agent-flow backend document.

Outbound (editor → backend) runs the structural validator first and
raises ``WorkflowStructureError`` before any node is mapped. Inbound
(backend → editor) trusts the backend and performs no validation.

Both directions pick a per-type converter from a lookup table. Tags
missing from the tables fall back to ``message`` instead of failing.
The two tables are not inverses: ``llm``, ``answer`` and ``message``
all become backend ``message``, which comes back only as ``message``.

Fallbacks treat empty strings, zero and missing values alike, so a
``max_turns`` of 0 becomes 3 and an empty ``message`` falls through
to the legacy ``context.value``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from logging import getLogger
from typing import Any, Callable, Dict, Mapping, Optional, Union

from flow_editor.workflow.agent_flow_model import (
    AgentFlowEdge,
    AgentFlowEndNode,
    AgentFlowMessageNode,
    AgentFlowNode,
    AgentFlowResponse,
    AgentFlowRouterNode,
    AgentFlowSlotFillingNode,
    AgentFlowStartNode,
    AgentFlowWorkflow,
    CreateAgentFlowRequest,
    ModelConfig,
    ValidationConfig,
)
from flow_editor.workflow.validation import assert_workflow_structure
from flow_editor.workflow.workflow_model import (
    EditorEdge,
    EditorGraph,
    EditorNode,
    EditorNodeData,
    WorkflowDraft,
)

logger = getLogger(__name__)

GraphLike = Union[EditorGraph, Mapping[str, Any]]
AgentFlowWorkflowLike = Union[AgentFlowWorkflow, Mapping[str, Any]]

# ====================================================================
# Node type mapping
# ====================================================================

AGENT_FLOW_TYPE_MAP: Dict[str, str] = {
    "start": "start",
    "end": "end",
    "message": "message",
    "llm": "message",
    "question-classifier": "router",
    "if-else": "router",
    "answer": "message",
    "slot-filling": "slot_filling",
}

EDITOR_TYPE_MAP: Dict[str, str] = {
    "start": "start",
    "end": "end",
    "message": "message",
    "router": "if-else",
    "slot_filling": "slot-filling",
}

_FALLBACK_TYPE = "message"

DEFAULT_SLOT_FILLING_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TURNS = 3


def map_node_type_to_agent_flow(editor_type: str) -> str:
    """Editor tag → backend tag, ``message`` when unmapped."""
    return AGENT_FLOW_TYPE_MAP.get(editor_type, _FALLBACK_TYPE)


def map_node_type_from_agent_flow(agent_flow_type: str) -> str:
    """Backend tag → editor tag, ``message`` when unmapped."""
    return EDITOR_TYPE_MAP.get(agent_flow_type, _FALLBACK_TYPE)


# ====================================================================
# Field helpers
# ====================================================================


def _mapping(value: Any) -> Optional[Dict[str, Any]]:
    return value if isinstance(value, dict) else None


def _dig(value: Any, *path: Any) -> Any:
    """Follow dict keys / list indexes, returning None on any miss."""
    for key in path:
        if isinstance(key, int):
            if not isinstance(value, list) or len(value) <= key:
                return None
            value = value[key]
        else:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
    return value


def _first(*candidates: Any, default: Any) -> Any:
    for candidate in candidates:
        if candidate:
            return candidate
    return default


def _model_to_agent_flow(model: Optional[Dict[str, Any]]) -> Optional[ModelConfig]:
    # Node panels store temperature nested under ``parameters``; it wins.
    if model is None:
        return None
    return ModelConfig(
        name=model.get("name") or "",
        temperature=_first(
            _dig(model, "parameters", "temperature"),
            model.get("temperature"),
            default=0,
        ),
    )


def _flat_model_to_agent_flow(
    model: Optional[Dict[str, Any]],
    default_name: str = "",
) -> ModelConfig:
    # Slot-filling panels store temperature flat; it wins here.
    return ModelConfig(
        name=_first(_dig(model, "name"), default=default_name),
        temperature=_first(
            _dig(model, "temperature"),
            _dig(model, "parameters", "temperature"),
            default=0,
        ),
    )


# ====================================================================
# Outbound node converters (editor → backend)
# ====================================================================


def _start_to_agent_flow(node_id: str, data: Dict[str, Any]) -> AgentFlowStartNode:
    return AgentFlowStartNode(id=node_id)


def _end_to_agent_flow(node_id: str, data: Dict[str, Any]) -> AgentFlowEndNode:
    return AgentFlowEndNode(id=node_id)


def _message_to_agent_flow(node_id: str, data: Dict[str, Any]) -> AgentFlowMessageNode:
    return AgentFlowMessageNode(
        id=node_id,
        message=_first(
            data.get("message"),
            _dig(data, "context", "value"),
            _dig(data, "prompt_template", 0, "text"),
            default="",
        ),
        mode=data.get("mode") or "llm",
        model=_model_to_agent_flow(_mapping(data.get("model"))),
    )


def _router_to_agent_flow(node_id: str, data: Dict[str, Any]) -> AgentFlowRouterNode:
    return AgentFlowRouterNode(
        id=node_id,
        condition=_first(data.get("conditions"), data.get("condition"), default=""),
        model=_model_to_agent_flow(_mapping(data.get("model"))),
    )


def _slot_filling_to_agent_flow(
    node_id: str, data: Dict[str, Any],
) -> AgentFlowSlotFillingNode:
    validation = _mapping(data.get("validation"))
    validation_config = None
    if validation is not None:
        validation_model = _mapping(validation.get("model"))
        validation_config = ValidationConfig(
            criteria=validation.get("criteria") or "",
            model=(
                _flat_model_to_agent_flow(validation_model)
                if validation_model is not None
                else None
            ),
        )

    return AgentFlowSlotFillingNode(
        id=node_id,
        slot_name=_first(data.get("slot_name"), data.get("variable"), default=""),
        question=_first(data.get("question"), data.get("prompt"), default=""),
        model=_flat_model_to_agent_flow(
            _mapping(data.get("model")),
            default_name=DEFAULT_SLOT_FILLING_MODEL,
        ),
        max_turns=data.get("max_turns") or DEFAULT_MAX_TURNS,
        validation=validation_config,
    )


_OUTBOUND_CONVERTERS: Dict[str, Callable[[str, Dict[str, Any]], AgentFlowNode]] = {
    "start": _start_to_agent_flow,
    "end": _end_to_agent_flow,
    "message": _message_to_agent_flow,
    "router": _router_to_agent_flow,
    "slot_filling": _slot_filling_to_agent_flow,
}


def convert_node_to_agent_flow(node: EditorNode) -> AgentFlowNode:
    """Convert one editor node; START/END keep only ``id`` and ``type``."""
    agent_flow_type = map_node_type_to_agent_flow(node.node_type)
    converter = _OUTBOUND_CONVERTERS[agent_flow_type]
    return converter(node.id, node.data.model_dump())


def convert_edge_to_agent_flow(edge: EditorEdge) -> AgentFlowEdge:
    return AgentFlowEdge(id=edge.id, source=edge.source, target=edge.target)


# ====================================================================
# Inbound node converters (backend → editor)
# ====================================================================


def _editor_node(node_id: str, **data: Any) -> EditorNode:
    # Layout is left to the canvas; every node starts at the origin.
    return EditorNode(id=node_id, data=EditorNodeData(**data))


def _start_from_agent_flow(node: AgentFlowStartNode) -> EditorNode:
    # Marker only: no ``variables`` field in agent-flow mode.
    return _editor_node(node.id, type="start", title="START")


def _end_from_agent_flow(node: AgentFlowEndNode) -> EditorNode:
    # Marker only: no ``outputs`` field in agent-flow mode.
    return _editor_node(node.id, type="end", title="END")


def _message_from_agent_flow(node: AgentFlowMessageNode) -> EditorNode:
    data: Dict[str, Any] = {
        "type": "message",
        "title": "Message",
        "message": node.message or "",
        "mode": node.mode or "llm",
    }
    if node.model is not None:
        data["model"] = {
            "name": node.model.name,
            "temperature": node.model.temperature or 0,
        }
    return _editor_node(node.id, **data)


def _router_from_agent_flow(node: AgentFlowRouterNode) -> EditorNode:
    # The router panel reads temperature from ``model.parameters``.
    data: Dict[str, Any] = {
        "type": "if-else",
        "title": "Router",
        "conditions": node.condition or "",
    }
    if node.model is not None:
        data["model"] = {
            "name": node.model.name,
            "parameters": {"temperature": node.model.temperature or 0},
        }
    return _editor_node(node.id, **data)


def _slot_filling_from_agent_flow(node: AgentFlowSlotFillingNode) -> EditorNode:
    data: Dict[str, Any] = {
        "type": "slot-filling",
        "title": "Slot Filling",
        "slot_name": node.slot_name or "",
        "question": node.question or "",
        "model": {
            "name": node.model.name,
            "temperature": node.model.temperature or 0,
        },
        "max_turns": node.max_turns or DEFAULT_MAX_TURNS,
    }
    if node.validation is not None:
        validation: Dict[str, Any] = {"criteria": node.validation.criteria}
        if node.validation.model is not None:
            validation["model"] = {
                "name": node.validation.model.name,
                "temperature": node.validation.model.temperature or 0,
            }
        data["validation"] = validation
    return _editor_node(node.id, **data)


_INBOUND_CONVERTERS: Dict[str, Callable[[Any], EditorNode]] = {
    "start": _start_from_agent_flow,
    "end": _end_from_agent_flow,
    "message": _message_from_agent_flow,
    "router": _router_from_agent_flow,
    "slot_filling": _slot_filling_from_agent_flow,
}


def convert_node_from_agent_flow(node: AgentFlowNode) -> EditorNode:
    """Convert one backend node; unknown tags become bare message nodes."""
    converter = _INBOUND_CONVERTERS.get(node.type)
    if converter is None:
        return _editor_node(
            node.id,
            type=map_node_type_from_agent_flow(node.type),
            title=node.type,
        )
    return converter(node)


def convert_edge_from_agent_flow(edge: AgentFlowEdge) -> EditorEdge:
    return EditorEdge(id=edge.id, source=edge.source, target=edge.target, data={})


# ====================================================================
# Public API
# ====================================================================


def _coerce_graph(graph: GraphLike) -> EditorGraph:
    if isinstance(graph, EditorGraph):
        return graph
    # Accept a whole draft record as well as a bare graph.
    if "graph" in graph:
        graph = graph["graph"]
    return EditorGraph.model_validate(graph)


def workflow_to_agent_flow_workflow(graph: GraphLike) -> AgentFlowWorkflow:
    """Convert an editor graph to the backend workflow document.

    Raises:
        WorkflowStructureError: If the graph does not have exactly one
            START and one END node. Nothing is converted in that case.
        pydantic.ValidationError: If a raw graph is malformed, e.g. a
            node or edge without an id.
    """
    editor_graph = _coerce_graph(graph)
    assert_workflow_structure(editor_graph.nodes)

    workflow = AgentFlowWorkflow(
        nodes=[convert_node_to_agent_flow(n) for n in editor_graph.nodes],
        edges=[convert_edge_to_agent_flow(e) for e in editor_graph.edges],
    )
    logger.debug(
        f"Converted editor graph to agent flow: "
        f"{len(workflow.nodes)} nodes, {len(workflow.edges)} edges"
    )
    return workflow


def workflow_to_agent_flow_create(
    graph: GraphLike,
    agent_flow_id: str,
    name: str,
    goal: str,
) -> CreateAgentFlowRequest:
    """Build the create request for a new agent flow.

    Raises:
        WorkflowStructureError: See ``workflow_to_agent_flow_workflow``.
    """
    workflow = workflow_to_agent_flow_workflow(graph)
    return CreateAgentFlowRequest(
        agent_flow_id=agent_flow_id,
        name=name,
        goal=goal,
        workflow=workflow,
    )


def agent_flow_to_workflow(workflow: AgentFlowWorkflowLike) -> EditorGraph:
    """Convert a backend workflow document to an editor graph.

    All nodes are placed at the origin; the caller lays them out.
    """
    if not isinstance(workflow, AgentFlowWorkflow):
        workflow = AgentFlowWorkflow.model_validate(workflow)

    graph = EditorGraph(
        nodes=[convert_node_from_agent_flow(n) for n in workflow.nodes],
        edges=[convert_edge_from_agent_flow(e) for e in workflow.edges],
    )
    logger.debug(
        f"Converted agent flow to editor graph: "
        f"{len(graph.nodes)} nodes, {len(graph.edges)} edges"
    )
    return graph


def _to_unix_seconds(timestamp: Optional[str]) -> int:
    if not timestamp:
        return 0
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable agent flow timestamp {timestamp!r}, using 0")
        return 0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


def agent_flow_to_draft(response: Union[AgentFlowResponse, Mapping[str, Any]]) -> WorkflowDraft:
    """Build the editor draft for a fetched agent flow.

    The flow's name and goal become ``marked_name`` / ``marked_comment``.
    """
    if not isinstance(response, AgentFlowResponse):
        response = AgentFlowResponse.model_validate(response)

    return WorkflowDraft(
        id=response.agent_flow_id,
        graph=agent_flow_to_workflow(response.workflow),
        marked_name=response.name,
        marked_comment=response.goal,
        created_at=_to_unix_seconds(response.created_at),
        updated_at=_to_unix_seconds(response.updated_at),
    )
