"""
Agent Flow API Configuration.

Controls where the agent-flow backend lives and how long the
client waits for it.
"""

from __future__ import annotations

from dataclasses import dataclass

from flow_editor.config.base import BaseConfig, register_config
from flow_editor.config.sub_config.general.env_utils import read_env_defaults

PRODUCTION_API_BASE_URL = "https://api.alignon.ai"
DEVELOPMENT_API_BASE_URL = "http://localhost:8000"


@register_config
@dataclass
class AgentFlowAPIConfig(BaseConfig):
    """Agent-flow backend endpoint settings."""

    api_base_url: str = ""
    environment: str = "development"
    api_prefix: str = "/api/v2"
    timeout: float = 30.0

    _ENV_MAP = {
        "api_base_url": "AGENT_FLOW_API_BASE_URL",
        "environment": "AGENT_FLOW_ENV",
        "api_prefix": "AGENT_FLOW_API_PREFIX",
        "timeout": "AGENT_FLOW_API_TIMEOUT",
    }

    @classmethod
    def get_default_instance(cls) -> "AgentFlowAPIConfig":
        defaults = read_env_defaults(cls._ENV_MAP, cls.__dataclass_fields__)
        return cls(**defaults)

    @classmethod
    def get_config_name(cls) -> str:
        return "agent_flow"

    @classmethod
    def get_display_name(cls) -> str:
        return "Agent Flow API"

    @classmethod
    def get_description(cls) -> str:
        return "Base URL, path prefix, and timeout of the agent-flow backend."

    def resolve_base_url(self) -> str:
        """Explicit URL first, then the environment's default host."""
        if self.api_base_url:
            return self.api_base_url.rstrip("/")
        if self.environment == "production":
            return PRODUCTION_API_BASE_URL
        return DEVELOPMENT_API_BASE_URL

    @property
    def endpoint(self) -> str:
        """Base URL joined with the API prefix."""
        return f"{self.resolve_base_url()}{self.api_prefix}"
