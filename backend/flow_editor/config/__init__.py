"""
Configuration Package.

Dataclass-based configs seeded from environment variables.
"""

from flow_editor.config.base import BaseConfig, get_config, register_config
from flow_editor.config.sub_config.general.agent_flow_config import AgentFlowAPIConfig

__all__ = ["BaseConfig", "get_config", "register_config", "AgentFlowAPIConfig"]
