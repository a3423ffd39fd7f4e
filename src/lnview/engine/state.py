"""
Interactive session state.

``ViewState`` is an immutable snapshot: every event produces a new one.
Its ``nodes`` tuple mirrors ``graph.nodes`` position for position and
differs only in the ``visible`` flag.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from ..core.graph import Graph
from ..core.types import Node, Position


@dataclass(frozen=True)
class ViewState:
    graph: Graph
    nodes: Tuple[Node, ...]
    threshold: int
    default_threshold: int
    hovered: Optional[str] = None
    pinned: Dict[str, Position] = field(default_factory=dict)

    def node(self, node_id: str) -> Node:
        return self.nodes[self.graph.position(node_id)]

    def is_visible(self, node_id: str) -> bool:
        return self.node(node_id).visible

    @property
    def visible_ids(self) -> Tuple[str, ...]:
        return tuple(node.id for node in self.nodes if node.visible)

    @property
    def shows_all(self) -> bool:
        return self.threshold == 0

    def evolve(self, **changes) -> "ViewState":
        return replace(self, **changes)
