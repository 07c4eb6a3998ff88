"""
Node Kind Base — defaults and checklist rules for editor node types.

Each concrete node kind declares the editor tag it handles, the
default payload a freshly dropped node receives, and a
``check_valid`` rule used to build the editor's checklist.
Kinds self-register through ``@register_node``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Dict, List, Optional, Type

logger = getLogger(__name__)


@dataclass
class NodeCheckResult:
    """Outcome of a node kind's ``check_valid``."""

    is_valid: bool
    error_message: str = ""


VALID = NodeCheckResult(is_valid=True)


def invalid(message: str) -> NodeCheckResult:
    return NodeCheckResult(is_valid=False, error_message=message)


def is_blank(value: Any) -> bool:
    """True for missing values and whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class BaseNode:
    """A node kind offered by the editor's block selector.

    Subclasses override the class attributes and ``check_valid``.
    """

    node_type: str = ""
    label: str = ""
    description: str = ""
    sort: float = 0
    is_singleton: bool = False
    default_value: Dict[str, Any] = {}

    def get_default_value(self) -> Dict[str, Any]:
        """Return a fresh copy of the default payload."""
        return copy.deepcopy(self.default_value)

    def check_valid(self, data: Dict[str, Any]) -> NodeCheckResult:
        return VALID


class NodeRegistry:
    """Editor tag → node kind instance."""

    def __init__(self) -> None:
        self._nodes: Dict[str, BaseNode] = {}

    def register(self, node: BaseNode) -> None:
        if node.node_type in self._nodes:
            logger.warning(f"Node kind '{node.node_type}' re-registered")
        self._nodes[node.node_type] = node

    def get(self, node_type: str) -> Optional[BaseNode]:
        return self._nodes.get(node_type)

    def list_all(self) -> List[BaseNode]:
        return sorted(self._nodes.values(), key=lambda n: n.sort)


_registry = NodeRegistry()


def get_node_registry() -> NodeRegistry:
    """Return the global NodeRegistry."""
    return _registry


def register_node(cls: Type[BaseNode]) -> Type[BaseNode]:
    """Class decorator: instantiate and register a node kind."""
    _registry.register(cls())
    return cls
