"""
Canonical in-memory channel graph.

A ``Graph`` is produced by the normalizer once per raw-data load and is
never patched afterwards: a changed input means a new ``Graph``. It owns
its ``AdjacencyIndex``, so two loads never share degree state.
"""

from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

from .adjacency import AdjacencyIndex
from .exceptions import UnknownNodeError
from .types import Edge, Node, NodeInfo


class Graph:
    """
    Nodes, edges and the adjacency index built from them.

    Features:
    - O(1) node lookup by id
    - Degree and neighborhood queries backed by the index
    - Summary statistics for the CLI
    """

    def __init__(self, nodes: Sequence[Node], edges: Sequence[Edge], index: AdjacencyIndex):
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._by_id: Dict[str, Node] = {node.id: node for node in self._nodes}
        self._position: Dict[str, int] = {node.id: i for i, node in enumerate(self._nodes)}
        self.index = index

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by ID."""
        return self._by_id.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._by_id

    def position(self, node_id: str) -> int:
        """Index of the node in ``nodes``; stable for the life of the graph."""
        try:
            return self._position[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def degree(self, node_id: str) -> int:
        return self.index.degree(node_id)

    def neighbors(self, node_id: str):
        return self.index.neighbors(node_id)

    def describe(self, node_id: str) -> NodeInfo:
        """Build the hover overlay summary for a node."""
        node = self._by_id.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        channels = self.index.incident(node_id)
        return NodeInfo(
            id=node.id,
            display_name=node.display_name,
            color=node.color,
            degree=len(channels),
            total_capacity=sum(edge.capacity for edge in channels),
        )

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._nodes)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def count_at_threshold(self, threshold: int) -> int:
        """Number of nodes with at least ``threshold`` channels."""
        return sum(1 for node in self._nodes if self.index.degree(node.id) >= threshold)

    def get_stats(self) -> Dict[str, Any]:
        degrees = [self.index.degree(node.id) for node in self._nodes]
        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "total_capacity": sum(edge.capacity for edge in self._edges),
            "max_degree": max(degrees, default=0),
            "mean_degree": (sum(degrees) / len(degrees)) if degrees else 0.0,
            "isolated_nodes": sum(1 for d in degrees if d == 0),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.model_dump() for node in self._nodes],
            "edges": [edge.model_dump() for edge in self._edges],
            "stats": self.get_stats(),
        }
