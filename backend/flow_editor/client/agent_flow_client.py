"""
Agent Flow Client — thin HTTP client for the agent-flow REST API.

Wraps ``httpx.Client`` for the CRUD endpoints and composes the
adapter for the two editor-level operations: publishing an editor
graph (create or update) and loading a flow back into the editor.
"""

from __future__ import annotations

import random
import string
import time
from logging import getLogger
from typing import Any, Dict, Optional

import httpx

from flow_editor.config import AgentFlowAPIConfig, get_config
from flow_editor.workflow.agent_flow_adapter import (
    GraphLike,
    agent_flow_to_draft,
    workflow_to_agent_flow_create,
    workflow_to_agent_flow_workflow,
)
from flow_editor.workflow.agent_flow_model import (
    AgentFlowListResponse,
    AgentFlowResponse,
    CreateAgentFlowRequest,
    UpdateAgentFlowRequest,
)
from flow_editor.workflow.workflow_model import WorkflowDraft

logger = getLogger(__name__)

DEFAULT_FLOW_NAME = "New Agent Flow"
DEFAULT_FLOW_GOAL = "Agent flow created from workflow editor"

_ID_ALPHABET = string.ascii_lowercase + string.digits


class AgentFlowAPIError(Exception):
    """The agent-flow backend answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def generate_agent_flow_id() -> str:
    """``agent_flow_<epoch ms>_<9 random base36 chars>``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"agent_flow_{int(time.time() * 1000)}_{suffix}"


def _raise_for_status(response: httpx.Response, action: str) -> None:
    if response.is_success:
        return
    try:
        body = response.json()
    except ValueError:
        message = f"Failed to {action}"
    else:
        message = None
        if isinstance(body, dict):
            message = body.get("message")
        message = message or f"HTTP {response.status_code}: Failed to {action}"
    logger.error(f"[Agent Flow] {action} failed ({response.status_code}): {message}")
    raise AgentFlowAPIError(message, response.status_code)


class AgentFlowClient:
    """Synchronous client for ``{prefix}/agent-flows``.

    Usage::

        with AgentFlowClient() as client:
            created = client.publish_graph(graph, name="Support intake")
            draft = client.load_graph(created.agent_flow_id)

    An injected ``http_client`` is used as-is and never closed here.
    """

    def __init__(
        self,
        config: Optional[AgentFlowAPIConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config or get_config("agent_flow")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self._config.timeout)
        self._endpoint = f"{self._config.endpoint}/agent-flows"

    # ── Lifecycle ──

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "AgentFlowClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ── CRUD ──

    def create_agent_flow(self, request: CreateAgentFlowRequest) -> AgentFlowResponse:
        logger.info(f"[Agent Flow] Creating agent flow {request.agent_flow_id}")
        response = self._http.post(self._endpoint, json=request.model_dump())
        _raise_for_status(response, "create agent flow")
        return AgentFlowResponse.model_validate(response.json())

    def get_agent_flow(self, agent_flow_id: str) -> AgentFlowResponse:
        logger.info(f"[Agent Flow] Fetching agent flow {agent_flow_id}")
        response = self._http.get(f"{self._endpoint}/{agent_flow_id}")
        _raise_for_status(response, "fetch agent flow")
        return AgentFlowResponse.model_validate(response.json())

    def update_agent_flow(
        self, agent_flow_id: str, request: UpdateAgentFlowRequest,
    ) -> AgentFlowResponse:
        logger.info(f"[Agent Flow] Updating agent flow {agent_flow_id}")
        response = self._http.put(
            f"{self._endpoint}/{agent_flow_id}", json=request.to_payload(),
        )
        _raise_for_status(response, "update agent flow")
        return AgentFlowResponse.model_validate(response.json())

    def delete_agent_flow(self, agent_flow_id: str) -> None:
        logger.info(f"[Agent Flow] Deleting agent flow {agent_flow_id}")
        response = self._http.delete(f"{self._endpoint}/{agent_flow_id}")
        _raise_for_status(response, "delete agent flow")

    def list_agent_flows(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        search: Optional[str] = None,
    ) -> AgentFlowListResponse:
        """List flows; falsy filters are not sent."""
        params: Dict[str, Any] = {}
        if limit:
            params["limit"] = limit
        if offset:
            params["offset"] = offset
        if search:
            params["search"] = search
        response = self._http.get(self._endpoint, params=params)
        _raise_for_status(response, "list agent flows")
        return AgentFlowListResponse.model_validate(response.json())

    # ── Editor operations ──

    def publish_graph(
        self,
        graph: GraphLike,
        agent_flow_id: Optional[str] = None,
        name: Optional[str] = None,
        goal: Optional[str] = None,
    ) -> AgentFlowResponse:
        """Create a new flow from ``graph`` or update an existing one.

        Without ``agent_flow_id`` a fresh id is generated and the flow is
        created with default name and goal where none are given.

        Raises:
            WorkflowStructureError: Before any request is sent, if the
                graph does not have exactly one START and one END node.
            AgentFlowAPIError: If the backend rejects the request.
        """
        if agent_flow_id is None:
            request = workflow_to_agent_flow_create(
                graph,
                agent_flow_id=generate_agent_flow_id(),
                name=name or DEFAULT_FLOW_NAME,
                goal=goal or DEFAULT_FLOW_GOAL,
            )
            result = self.create_agent_flow(request)
            logger.info(f"[Agent Flow] Created successfully: {result.agent_flow_id}")
            return result

        workflow = workflow_to_agent_flow_workflow(graph)
        result = self.update_agent_flow(
            agent_flow_id,
            UpdateAgentFlowRequest(name=name or None, goal=goal or None, workflow=workflow),
        )
        logger.info(f"[Agent Flow] Updated successfully: {agent_flow_id}")
        return result

    def load_graph(self, agent_flow_id: str) -> WorkflowDraft:
        """Fetch a flow and convert it into an editor draft."""
        return agent_flow_to_draft(self.get_agent_flow(agent_flow_id))
