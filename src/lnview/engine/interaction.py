"""
Interaction Controller.

User actions are modeled as small event records. ``reduce`` applies one
event to a ``ViewState`` and returns the next state; it never mutates its
input. ``InteractionController`` owns the current state for a session and
recomputes the pruned view after every event that changes visibility.

Click semantics:
- A node with at most one channel is *collapsed*: it alone is hidden.
- Any other node is *expanded*: it and every neighbor become visible,
  regardless of the threshold.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, Mapping, Optional, Union

from ..config import DEFAULT_MIN_CHANNELS, SHOW_ALL_THRESHOLD, Settings
from ..core.exceptions import LnviewError, UnknownNodeError
from ..core.graph import Graph
from ..core.normalizer import GraphNormalizer
from ..core.types import NodeInfo, Position, PrunedView
from .state import ViewState
from .visibility import clamp_threshold, compute_visibility, recompute

logger = logging.getLogger(__name__)


# --- Events ---
@dataclass(frozen=True)
class NodeClicked:
    node_id: str


@dataclass(frozen=True)
class NodeHovered:
    node_id: Optional[str]


@dataclass(frozen=True)
class ShowAllToggled:
    pass


@dataclass(frozen=True)
class ThresholdChanged:
    threshold: int


@dataclass(frozen=True)
class NodeDragEnded:
    node_id: str
    x: float
    y: float
    z: float


Event = Union[NodeClicked, NodeHovered, ShowAllToggled, ThresholdChanged, NodeDragEnded]

# Events after which the pruned view must be recomputed
VISIBILITY_EVENTS = (NodeClicked, ShowAllToggled, ThresholdChanged)


class ClickOutcome(StrEnum):
    EXPAND = "expand"
    COLLAPSE = "collapse"


def affects_visibility(event: Event) -> bool:
    return isinstance(event, VISIBILITY_EVENTS)


def initial_state(
    graph: Graph,
    threshold: Optional[int] = None,
    default_threshold: int = DEFAULT_MIN_CHANNELS,
) -> ViewState:
    """Fresh session state with visibility computed from the threshold."""
    default_threshold = clamp_threshold(default_threshold)
    threshold = default_threshold if threshold is None else clamp_threshold(threshold)
    return ViewState(
        graph=graph,
        nodes=compute_visibility(graph.nodes, graph.index, threshold),
        threshold=threshold,
        default_threshold=default_threshold,
    )


def classify_click(graph: Graph, node_id: str) -> ClickOutcome:
    if graph.degree(node_id) <= 1:
        return ClickOutcome.COLLAPSE
    return ClickOutcome.EXPAND


def apply_click(state: ViewState, node_id: str) -> ViewState:
    graph = state.graph
    outcome = classify_click(graph, node_id)
    nodes = list(state.nodes)

    if outcome is ClickOutcome.COLLAPSE:
        pos = graph.position(node_id)
        nodes[pos] = nodes[pos].with_visibility(False)
    else:
        for edge in graph.index.incident(node_id):
            for endpoint in edge.endpoints:
                pos = graph.position(endpoint)
                nodes[pos] = nodes[pos].with_visibility(True)

    logger.debug(f"Click on {node_id}: {outcome}")
    return state.evolve(nodes=tuple(nodes))


def apply_threshold(state: ViewState, threshold: int) -> ViewState:
    threshold = clamp_threshold(threshold)
    logger.debug(f"Threshold {state.threshold} -> {threshold}")
    return state.evolve(
        threshold=threshold,
        nodes=compute_visibility(state.nodes, state.graph.index, threshold),
    )


def toggle_show_all(state: ViewState) -> ViewState:
    """Flip between showing everything and the default threshold."""
    if state.threshold == SHOW_ALL_THRESHOLD:
        return apply_threshold(state, state.default_threshold)
    return apply_threshold(state, SHOW_ALL_THRESHOLD)


def reduce(state: ViewState, event: Event) -> ViewState:
    """Apply a single event and return the next state."""
    if isinstance(event, NodeClicked):
        return apply_click(state, event.node_id)

    if isinstance(event, ThresholdChanged):
        return apply_threshold(state, event.threshold)

    if isinstance(event, ShowAllToggled):
        return toggle_show_all(state)

    if isinstance(event, NodeHovered):
        if event.node_id is not None and not state.graph.has_node(event.node_id):
            raise UnknownNodeError(event.node_id)
        return state.evolve(hovered=event.node_id)

    if isinstance(event, NodeDragEnded):
        if not state.graph.has_node(event.node_id):
            raise UnknownNodeError(event.node_id)
        pinned = dict(state.pinned)
        pinned[event.node_id] = Position(x=event.x, y=event.y, z=event.z)
        return state.evolve(pinned=pinned)

    raise TypeError(f"Unsupported event: {event!r}")


class InteractionController:
    """
    Owns the session state and the current pruned view.

    Only this object replaces ``state``; each ``dispatch`` runs to
    completion before the next one starts.
    """

    def __init__(self, graph: Optional[Graph] = None, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._normalizer = GraphNormalizer(self.settings)
        self._state: Optional[ViewState] = None
        self._view: Optional[PrunedView] = None
        if graph is not None:
            self.load_graph(graph)

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self, raw: Mapping[str, Any]) -> PrunedView:
        """Normalize a raw graph and start a fresh session on it."""
        return self.load_graph(self._normalizer.normalize(raw))

    def load_graph(self, graph: Graph, threshold: Optional[int] = None) -> PrunedView:
        self._state = initial_state(graph, threshold, self.settings.default_threshold)
        self._view = recompute(self._state)
        return self._view

    # =========================================================================
    # Events
    # =========================================================================

    def dispatch(self, event: Event) -> PrunedView:
        """Apply ``event`` and return the (possibly unchanged) pruned view."""
        self._state = reduce(self.state, event)
        if affects_visibility(event):
            self._view = recompute(self._state)
        return self.view

    def click(self, node_id: str) -> PrunedView:
        return self.dispatch(NodeClicked(node_id))

    def hover(self, node_id: Optional[str]) -> PrunedView:
        return self.dispatch(NodeHovered(node_id))

    def toggle_show_all(self) -> PrunedView:
        return self.dispatch(ShowAllToggled())

    def set_threshold(self, threshold: int) -> PrunedView:
        return self.dispatch(ThresholdChanged(threshold))

    def pin(self, node_id: str, x: float, y: float, z: float) -> PrunedView:
        return self.dispatch(NodeDragEnded(node_id, x, y, z))

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def loaded(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> ViewState:
        if self._state is None:
            raise LnviewError("No graph loaded")
        return self._state

    @property
    def view(self) -> PrunedView:
        if self._view is None:
            raise LnviewError("No graph loaded")
        return self._view

    @property
    def graph(self) -> Graph:
        return self.state.graph

    @property
    def hover_info(self) -> Optional[NodeInfo]:
        hovered = self.state.hovered
        if hovered is None:
            return None
        return self.graph.describe(hovered)

    @property
    def pinned(self) -> Dict[str, Position]:
        return dict(self.state.pinned)
