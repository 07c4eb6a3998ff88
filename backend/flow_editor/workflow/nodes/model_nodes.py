"""
Model Nodes — message, router, and slot-filling.

The conversational node kinds of an agent flow. Each may carry a
``model`` block naming the LLM that renders, routes, or extracts.
"""

from __future__ import annotations

from typing import Any, Dict

from flow_editor.workflow.nodes.base import (
    VALID,
    BaseNode,
    NodeCheckResult,
    invalid,
    is_blank,
    register_node,
)


def _model_name(data: Dict[str, Any]) -> Any:
    model = data.get("model")
    if not isinstance(model, dict):
        return None
    return model.get("name")


# ============================================================================
# Message
# ============================================================================


@register_node
class MessageNode(BaseNode):
    """Send a message to the user.

    ``strict`` mode sends the text verbatim; ``llm`` mode lets the
    configured model phrase it, so a model name is required.
    """

    node_type = "message"
    label = "Message"
    description = "Send a fixed or model-generated message"
    sort = 4
    default_value = {
        "message": "",
        "mode": "strict",
    }

    def check_valid(self, data: Dict[str, Any]) -> NodeCheckResult:
        if is_blank(data.get("message")):
            return invalid("Message content is required")

        if data.get("mode") == "llm" and not _model_name(data):
            return invalid("Model name is required in LLM mode")

        return VALID


# ============================================================================
# Router
# ============================================================================


@register_node
class RouterNode(BaseNode):
    """Branch on a natural-language condition evaluated by a model."""

    node_type = "if-else"
    label = "Router"
    description = "Route the conversation on a condition"
    sort = 6
    default_value = {
        "condition": "",
    }

    def check_valid(self, data: Dict[str, Any]) -> NodeCheckResult:
        condition = data.get("conditions") or data.get("condition")
        if is_blank(condition):
            return invalid("Condition is required")

        if isinstance(data.get("model"), dict) and not _model_name(data):
            return invalid("Model name is required when model is specified")

        return VALID


# ============================================================================
# Slot Filling
# ============================================================================


@register_node
class SlotFillingNode(BaseNode):
    """Ask a question until the named slot has a value."""

    node_type = "slot-filling"
    label = "Slot Filling"
    description = "Collect a named value from the user"
    sort = 5
    default_value = {
        "slot_name": "",
        "question": "",
        "model": {
            "name": "gpt-4.1",
            "temperature": 0.0,
        },
        "max_turns": 3,
    }

    def check_valid(self, data: Dict[str, Any]) -> NodeCheckResult:
        if is_blank(data.get("slot_name")):
            return invalid("Slot name is required")

        if is_blank(data.get("question")):
            return invalid("Question is required")

        if not _model_name(data):
            return invalid("Model name is required")

        max_turns = data.get("max_turns")
        if max_turns is None or max_turns < 1:
            return invalid("Max turns must be at least 1")

        validation = data.get("validation")
        if isinstance(validation, dict):
            criteria = validation.get("criteria")
            if isinstance(criteria, str) and criteria and not criteria.strip():
                return invalid("Validation criteria cannot be empty")

        return VALID
