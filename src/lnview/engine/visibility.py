"""
Visibility Engine.

Decides which nodes and channels are drawn. Everything here is a pure,
full recomputation: callers pass the current records in and get new ones
back. Nothing is cached between calls.
"""

from typing import Iterable, Sequence, Tuple

from ..config import SHOW_ALL_THRESHOLD
from ..core.adjacency import AdjacencyIndex
from ..core.types import Edge, Node, PrunedView
from .state import ViewState


def clamp_threshold(threshold: int) -> int:
    """Negative thresholds mean "show all"."""
    return max(SHOW_ALL_THRESHOLD, int(threshold))


def compute_visibility(
    nodes: Iterable[Node], index: AdjacencyIndex, threshold: int
) -> Tuple[Node, ...]:
    """Mark each node visible iff its degree is at least ``threshold``."""
    threshold = clamp_threshold(threshold)
    return tuple(node.with_visibility(index.degree(node.id) >= threshold) for node in nodes)


def derive_pruned_view(nodes: Sequence[Node], edges: Iterable[Edge]) -> PrunedView:
    """
    Select the visible nodes, and the edges whose endpoints are both visible.
    """
    visible_nodes = tuple(node for node in nodes if node.visible)
    visible_ids = {node.id for node in visible_nodes}
    visible_edges = tuple(
        edge for edge in edges
        if edge.endpoint_a in visible_ids and edge.endpoint_b in visible_ids
    )
    return PrunedView(nodes=visible_nodes, edges=visible_edges)


def recompute(state: ViewState) -> PrunedView:
    return derive_pruned_view(state.nodes, state.graph.edges)
