"""
Agent Flow Client Package.

HTTP access to the agent-flow backend.
"""

from flow_editor.client.agent_flow_client import (
    AgentFlowAPIError,
    AgentFlowClient,
    generate_agent_flow_id,
)

__all__ = ["AgentFlowAPIError", "AgentFlowClient", "generate_agent_flow_id"]
