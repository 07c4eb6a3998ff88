"""
Marker Nodes — START and END.

Markers delimit the graph's entry and exit. They carry no payload
and are always valid; the one-of-each rule lives in the structural
validator, not here.
"""

from __future__ import annotations

from flow_editor.workflow.nodes.base import BaseNode, register_node


@register_node
class StartNode(BaseNode):
    node_type = "start"
    label = "START"
    description = "Entry point of the agent flow"
    sort = 0.1
    is_singleton = True


@register_node
class EndNode(BaseNode):
    node_type = "end"
    label = "END"
    description = "Exit point of the agent flow"
    sort = 2.1
