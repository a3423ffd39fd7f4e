"""
lnview: interactive visibility engine for large channel graphs.

Normalizes a raw graph dump, derives a degree-based adjacency index, and
keeps a small, renderable subset of the graph visible as the user clicks
through it.
"""

from .core import Graph, GraphNormalizer, PrunedView, normalize_graph
from .engine import InteractionController, advise

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "GraphNormalizer",
    "InteractionController",
    "PrunedView",
    "advise",
    "normalize_graph",
]
