"""
Graph normalization.

Turns a raw graph dump into the canonical ``Graph``:

1. Validate the payload shape (pydantic).
2. Canonicalize node records (display name and color fallbacks).
3. Canonicalize channels, assigning each a palette color.
4. Build a fresh adjacency index.

Any structural inconsistency aborts the whole pass with
``DataIntegrityError``; no channel is ever dropped silently.
"""

import hashlib
import logging
from typing import Any, Mapping, Optional, Sequence, Set

from pydantic import ValidationError

from ..config import CHANNEL_PALETTE, NO_COLOR_SENTINEL, Settings
from .adjacency import AdjacencyIndex
from .exceptions import DataIntegrityError, InvalidGraphError
from .graph import Graph
from .types import Edge, Node, RawChannel, RawGraph, RawNode

logger = logging.getLogger(__name__)


def palette_color(edge_id: str, palette: Sequence[str] = CHANNEL_PALETTE) -> str:
    """Pick a palette entry from a stable hash of the channel id."""
    digest = hashlib.sha1(edge_id.encode("utf-8")).digest()
    return palette[int.from_bytes(digest[:4], "big") % len(palette)]


class GraphNormalizer:
    """
    Converts raw graph payloads into canonical graphs.

    The normalizer keeps no state between calls: each ``normalize``
    builds and returns a brand new ``Graph`` with its own index.
    """

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or Settings()
        self.neutral_color = settings.neutral_color
        self.palette = tuple(settings.palette) or CHANNEL_PALETTE

    def normalize(self, raw: Mapping[str, Any] | RawGraph) -> Graph:
        """
        Normalize a raw graph.

        Raises:
            InvalidGraphError: The payload does not have the expected shape.
            DataIntegrityError: Duplicate ids, self-loops, or channels
                referencing undeclared nodes.
        """
        parsed = self._parse(raw)

        nodes = [self._node(raw_node) for raw_node in parsed.nodes]
        node_ids: Set[str] = set()
        for node in nodes:
            if node.id in node_ids:
                raise DataIntegrityError(f"Duplicate node id: {node.id}")
            node_ids.add(node.id)

        edges = []
        edge_ids: Set[str] = set()
        for raw_channel in parsed.links:
            edge = self._edge(raw_channel)
            if edge.id in edge_ids:
                raise DataIntegrityError(f"Duplicate channel id: {edge.id}")
            for endpoint in edge.endpoints:
                if endpoint not in node_ids:
                    raise DataIntegrityError(
                        f"Channel {edge.id} references unknown node {endpoint}"
                    )
            edge_ids.add(edge.id)
            edges.append(edge)

        index = AdjacencyIndex()
        index.build((node.id for node in nodes), edges)

        logger.debug(f"Normalized graph: {len(nodes)} nodes, {len(edges)} channels")
        return Graph(nodes, edges, index)

    @staticmethod
    def _parse(raw: Mapping[str, Any] | RawGraph) -> RawGraph:
        if isinstance(raw, RawGraph):
            return raw
        try:
            return RawGraph.model_validate(raw)
        except ValidationError as e:
            raise InvalidGraphError(f"Malformed graph payload: {e}") from e

    def _node(self, raw: RawNode) -> Node:
        color = raw.color
        if not color or color.lower() == NO_COLOR_SENTINEL:
            color = self.neutral_color
        return Node(
            id=raw.id,
            display_name=raw.alias or raw.id,
            color=color,
            visible=False,
        )

    def _edge(self, raw: RawChannel) -> Edge:
        endpoint_a, endpoint_b = raw.endpoints()
        if endpoint_a == endpoint_b:
            raise DataIntegrityError(f"Channel {raw.id} is a self-loop on {endpoint_a}")
        return Edge(
            id=raw.id,
            endpoint_a=endpoint_a,
            endpoint_b=endpoint_b,
            capacity=raw.capacity,
            color=palette_color(raw.id, self.palette),
        )


def normalize_graph(raw: Mapping[str, Any] | RawGraph, settings: Optional[Settings] = None) -> Graph:
    """Normalize ``raw`` with a one-off ``GraphNormalizer``."""
    return GraphNormalizer(settings).normalize(raw)
