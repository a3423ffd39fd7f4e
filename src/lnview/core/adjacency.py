"""
Adjacency index for the channel graph.

Maps every node id to the channels incident to it. This is the single
source of truth for degree queries: visibility filtering, click handling
and the hover overlay all ask the index, never the raw data.
"""

from typing import Dict, Iterable, Iterator, List, Tuple

from .exceptions import UnknownNodeError
from .types import Edge


class AdjacencyIndex:
    """
    Mapping from node id to its ordered incident edges.

    Enables O(1) lookup of a node's channels and degree. Each edge is
    registered exactly once under each of its two endpoints.

    ``build`` always starts from an empty index, so rebuilding from the
    same data any number of times yields the same degrees.
    """

    def __init__(self):
        self._incident: Dict[str, List[Edge]] = {}
        self._edge_count = 0

    def reset(self) -> None:
        """Drop every registration."""
        self._incident = {}
        self._edge_count = 0

    def build(self, node_ids: Iterable[str], edges: Iterable[Edge]) -> "AdjacencyIndex":
        """
        Rebuild the index from scratch in a single pass over ``edges``.

        Every node id gets an entry, so isolated nodes report degree 0.
        Returns ``self`` for chaining.
        """
        self.reset()
        for node_id in node_ids:
            self._incident[node_id] = []
        for edge in edges:
            self.register(edge)
        return self

    def register(self, edge: Edge) -> None:
        """Register an edge under both of its endpoints."""
        for node_id in edge.endpoints:
            if node_id not in self._incident:
                raise UnknownNodeError(node_id)
        self._incident[edge.endpoint_a].append(edge)
        self._incident[edge.endpoint_b].append(edge)
        self._edge_count += 1

    def incident(self, node_id: str) -> Tuple[Edge, ...]:
        """Return the edges touching ``node_id``, in registration order."""
        try:
            return tuple(self._incident[node_id])
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def degree(self, node_id: str) -> int:
        try:
            return len(self._incident[node_id])
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def neighbors(self, node_id: str) -> List[str]:
        """Distinct neighbor ids of ``node_id``, in first-seen order."""
        seen: Dict[str, None] = {}
        for edge in self.incident(node_id):
            seen.setdefault(edge.other(node_id), None)
        return list(seen)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._incident

    def __iter__(self) -> Iterator[str]:
        return iter(self._incident)

    def __len__(self) -> int:
        return len(self._incident)

    @property
    def edge_count(self) -> int:
        """Number of edges registered since the last reset."""
        return self._edge_count

    @property
    def total_degree(self) -> int:
        """Sum of all degrees. Always twice ``edge_count``."""
        return sum(len(edges) for edges in self._incident.values())
