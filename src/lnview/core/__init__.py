"""Canonical graph model: types, adjacency index, normalization."""

from .adjacency import AdjacencyIndex
from .exceptions import (
    DataIntegrityError,
    GraphFileError,
    InvalidGraphError,
    LnviewError,
    UnknownNodeError,
)
from .graph import Graph
from .normalizer import GraphNormalizer, normalize_graph
from .types import Edge, Node, NodeInfo, Position, PrunedView

__all__ = [
    "AdjacencyIndex",
    "DataIntegrityError",
    "Edge",
    "Graph",
    "GraphFileError",
    "GraphNormalizer",
    "InvalidGraphError",
    "LnviewError",
    "Node",
    "NodeInfo",
    "Position",
    "PrunedView",
    "UnknownNodeError",
    "normalize_graph",
]
