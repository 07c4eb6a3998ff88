"""
Agent Flow Data Models — backend workflow document and API records.

Mirror the agent-flow backend contract. Nodes form a discriminated
union on ``type``; a tag the backend knows but this client does not
is parsed as ``AgentFlowGenericNode`` instead of being rejected.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

KNOWN_NODE_TYPES = ("start", "end", "message", "router", "slot_filling")


# =============================================================================
# Node payloads
# =============================================================================

class ModelConfig(BaseModel):
    """LLM settings attached to a node."""
    name: str = ""
    temperature: Optional[float] = None


class ValidationConfig(BaseModel):
    """Answer validation for a slot-filling node."""
    criteria: str = ""
    model: Optional[ModelConfig] = None


class AgentFlowStartNode(BaseModel):
    id: str
    type: Literal["start"] = "start"


class AgentFlowEndNode(BaseModel):
    id: str
    type: Literal["end"] = "end"


class AgentFlowMessageNode(BaseModel):
    """Send a message, verbatim (``strict``) or rephrased by a model (``llm``)."""
    id: str
    type: Literal["message"] = "message"
    message: Optional[str] = ""
    mode: Optional[str] = "llm"
    model: Optional[ModelConfig] = None


class AgentFlowRouterNode(BaseModel):
    """Branch on a natural-language condition."""
    id: str
    type: Literal["router"] = "router"
    condition: Optional[str] = ""
    model: Optional[ModelConfig] = None


class AgentFlowSlotFillingNode(BaseModel):
    """Ask a question until the named slot is filled or turns run out."""
    id: str
    type: Literal["slot_filling"] = "slot_filling"
    slot_name: Optional[str] = ""
    question: Optional[str] = ""
    model: ModelConfig
    max_turns: Optional[int] = 3
    validation: Optional[ValidationConfig] = None


class AgentFlowGenericNode(BaseModel):
    """A node whose tag is outside ``KNOWN_NODE_TYPES``."""
    model_config = ConfigDict(extra="allow")

    id: str
    type: str


def _node_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    return tag if tag in KNOWN_NODE_TYPES else "generic"


AgentFlowNode = Annotated[
    Union[
        Annotated[AgentFlowStartNode, Tag("start")],
        Annotated[AgentFlowEndNode, Tag("end")],
        Annotated[AgentFlowMessageNode, Tag("message")],
        Annotated[AgentFlowRouterNode, Tag("router")],
        Annotated[AgentFlowSlotFillingNode, Tag("slot_filling")],
        Annotated[AgentFlowGenericNode, Tag("generic")],
    ],
    Discriminator(_node_tag),
]


class AgentFlowEdge(BaseModel):
    id: str
    source: str
    target: str


class AgentFlowWorkflow(BaseModel):
    """The normalized node/edge document accepted by the backend."""
    nodes: List[AgentFlowNode] = Field(default_factory=list)
    edges: List[AgentFlowEdge] = Field(default_factory=list)


# =============================================================================
# API records
# =============================================================================

class CreateAgentFlowRequest(BaseModel):
    agent_flow_id: str
    name: str
    goal: str
    workflow: AgentFlowWorkflow


class UpdateAgentFlowRequest(BaseModel):
    """Partial update; ``None`` fields are left out of the request body."""
    name: Optional[str] = None
    goal: Optional[str] = None
    workflow: Optional[AgentFlowWorkflow] = None

    def to_payload(self) -> dict:
        return {
            key: value
            for key, value in self.model_dump().items()
            if value is not None
        }


class AgentFlowResponse(BaseModel):
    id: Optional[int] = None
    agent_flow_id: str
    name: str = ""
    goal: str = ""
    workflow: AgentFlowWorkflow = Field(default_factory=AgentFlowWorkflow)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AgentFlowSummary(BaseModel):
    id: int
    agent_flow_id: str
    name: str = ""
    goal: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AgentFlowListResponse(BaseModel):
    items: List[AgentFlowSummary] = Field(default_factory=list)
    total_count: int = 0
