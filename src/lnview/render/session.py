"""
Renderer contract and session lifecycle.

The engine never draws anything. A ``VisualizationSession`` connects an
``InteractionController`` to an external ``Renderer``:

- it hands the renderer a ``RenderBundle`` (pruned view, field accessors,
  callbacks and tuning) after load and after every visibility change,
- it routes the renderer's click/hover/drag callbacks back into the
  controller,
- it holds the window-resize subscription for as long as it is mounted.

The subscription is released on every exit path, including exceptions
raised from inside a ``with`` block.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple

from ..core.types import NodeInfo, Position, PrunedView
from ..engine.interaction import InteractionController
from ..engine.performance import PerformanceOptions, advise

logger = logging.getLogger(__name__)

DEFAULT_SIZE: Tuple[int, int] = (1280, 720)

ResizeCallback = Callable[[int, int], None]
Unsubscribe = Callable[[], None]


class Renderer(Protocol):
    """What the session needs from a rendering backend."""

    def render(self, bundle: "RenderBundle") -> None:
        """Draw (or redraw) the given bundle."""
        ...

    def show_info(self, info: Optional[NodeInfo]) -> None:
        """Show or clear the hover overlay."""
        ...

    def zoom_to_fit(self) -> None:
        """Reset the camera so the whole view fits."""
        ...


class ResizeSource(Protocol):
    def subscribe(self, callback: ResizeCallback) -> Unsubscribe:
        ...


class ResizeEvents:
    """In-process resize broadcaster."""

    def __init__(self):
        self._subscribers: List[ResizeCallback] = []

    def subscribe(self, callback: ResizeCallback) -> Unsubscribe:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, width: int, height: int) -> None:
        for callback in list(self._subscribers):
            callback(width, height)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


@dataclass(frozen=True)
class RenderBundle:
    """Everything the renderer consumes for one frame of the session."""
    view: PrunedView
    performance: PerformanceOptions
    on_node_click: Callable[[Any], None]
    on_node_hover: Callable[[Any], None]
    on_node_drag_end: Callable[..., None]
    reset_camera: Callable[[], None]
    width: int = DEFAULT_SIZE[0]
    height: int = DEFAULT_SIZE[1]
    pinned: Dict[str, Position] = field(default_factory=dict)
    hover_info: Optional[NodeInfo] = None
    node_id_field: str = "id"
    link_source_field: str = "endpoint_a"
    link_target_field: str = "endpoint_b"

    def to_payload(self) -> Dict[str, Any]:
        """Serializable subset of the bundle (no callbacks)."""
        nodes = []
        for node in self.view.nodes:
            record = node.model_dump()
            pin = self.pinned.get(node.id)
            if pin is not None:
                record.update(fx=pin.x, fy=pin.y, fz=pin.z)
            nodes.append(record)
        return {
            "nodes": nodes,
            "links": [edge.model_dump() for edge in self.view.edges],
            "nodeId": self.node_id_field,
            "linkSource": self.link_source_field,
            "linkTarget": self.link_target_field,
            "cooldownTicks": self.performance.cooldown_ticks,
            "warmupTicks": self.performance.warmup_ticks,
            "nodeResolution": self.performance.resolution,
            "width": self.width,
            "height": self.height,
        }


def _node_id(node: Any, id_field: str = "id") -> str:
    """Accept a node record, a renderer-side mapping or a bare id."""
    if isinstance(node, str):
        return node
    if isinstance(node, Mapping):
        return str(node[id_field])
    return str(getattr(node, id_field))


def build_bundle(
    controller: InteractionController,
    on_node_click: Callable[[Any], None],
    on_node_hover: Callable[[Any], None],
    on_node_drag_end: Callable[..., None],
    reset_camera: Callable[[], None],
    size: Tuple[int, int] = DEFAULT_SIZE,
) -> RenderBundle:
    width, height = size
    return RenderBundle(
        view=controller.view,
        performance=advise(controller.graph.node_count),
        on_node_click=on_node_click,
        on_node_hover=on_node_hover,
        on_node_drag_end=on_node_drag_end,
        reset_camera=reset_camera,
        width=width,
        height=height,
        pinned=controller.pinned,
        hover_info=controller.hover_info,
    )


class VisualizationSession:
    """
    A mounted visualization.

    Usage:
        with VisualizationSession(controller, renderer, resize_events):
            ...  # renderer callbacks drive the controller
    """

    def __init__(
        self,
        controller: InteractionController,
        renderer: Renderer,
        resize_source: ResizeSource,
        size: Tuple[int, int] = DEFAULT_SIZE,
    ):
        self.controller = controller
        self.renderer = renderer
        self.resize_source = resize_source
        self.size = size
        self._unsubscribe: Optional[Unsubscribe] = None
        self.last_bundle: Optional[RenderBundle] = None

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def mount(self) -> "VisualizationSession":
        if self.mounted:
            return self
        self._unsubscribe = self.resize_source.subscribe(self.on_resize)
        logger.debug("Visualization mounted")
        try:
            self.push()
        except Exception:
            self.unmount()
            raise
        return self

    def unmount(self) -> None:
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()
            logger.debug("Visualization unmounted")

    def __enter__(self) -> "VisualizationSession":
        return self.mount()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()

    # =========================================================================
    # Renderer callbacks
    # =========================================================================

    def on_node_click(self, node: Any) -> None:
        self.controller.click(_node_id(node))
        self.push()

    def on_node_hover(self, node: Any) -> None:
        self.controller.hover(None if node is None else _node_id(node))
        self.renderer.show_info(self.controller.hover_info)

    def on_node_drag_end(self, node: Any, x: Optional[float] = None,
                         y: Optional[float] = None, z: Optional[float] = None) -> None:
        """Pin a node where the user dropped it."""
        if x is None or y is None or z is None:
            node_x, node_y, node_z = _coords(node)
            x = node_x if x is None else x
            y = node_y if y is None else y
            z = node_z if z is None else z
        self.controller.pin(_node_id(node), x, y, z)

    def on_resize(self, width: int, height: int) -> None:
        self.size = (width, height)
        self.push()

    def reset_camera(self) -> None:
        self.renderer.zoom_to_fit()

    # =========================================================================
    # Output
    # =========================================================================

    def bundle(self) -> RenderBundle:
        return build_bundle(
            self.controller,
            on_node_click=self.on_node_click,
            on_node_hover=self.on_node_hover,
            on_node_drag_end=self.on_node_drag_end,
            reset_camera=self.reset_camera,
            size=self.size,
        )

    def push(self) -> RenderBundle:
        self.last_bundle = self.bundle()
        self.renderer.render(self.last_bundle)
        return self.last_bundle


def _coords(node: Any) -> Tuple[float, float, float]:
    if isinstance(node, Mapping):
        return float(node["x"]), float(node["y"]), float(node["z"])
    return float(node.x), float(node.y), float(node.z)
