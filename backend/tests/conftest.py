"""
Pytest Configuration

Shared editor-graph fixtures for the adapter and validation tests.
"""

import pytest

from flow_editor.workflow.workflow_model import EditorGraph
from tests.helpers import edge, graph, node


@pytest.fixture
def scenario_a_graph() -> EditorGraph:
    """START → message ('hi', strict) → END."""
    return graph(
        [
            node("1", "start", "START"),
            node("2", "message", "Message", message="hi", mode="strict"),
            node("3", "end", "END"),
        ],
        [edge("e1", "1", "2"), edge("e2", "2", "3")],
    )


@pytest.fixture
def full_graph() -> EditorGraph:
    """One node of every convertible kind, wired in a line."""
    return graph(
        [
            node("s", "start", "START"),
            node("m", "message", "Message", message="Welcome!", mode="llm",
                 model={"name": "gpt-4.1", "temperature": 0.3}),
            node("sf", "slot-filling", "Slot Filling", slot_name="email",
                 question="Your email?", model={"name": "gpt-4o", "temperature": 0.2},
                 max_turns=5,
                 validation={"criteria": "valid email",
                             "model": {"name": "gpt-4o-mini", "temperature": 0.1}}),
            node("r", "if-else", "Router", conditions="user gave email",
                 model={"name": "gpt-4.1", "parameters": {"temperature": 0.7}}),
            node("e", "end", "END"),
        ],
        [
            edge("e1", "s", "m"),
            edge("e2", "m", "sf"),
            edge("e3", "sf", "r"),
            edge("e4", "r", "e", sourceHandle="true"),
        ],
    )
