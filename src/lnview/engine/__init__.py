"""Visibility engine, interaction state machine and renderer tuning."""

from .interaction import (
    ClickOutcome,
    InteractionController,
    NodeClicked,
    NodeDragEnded,
    NodeHovered,
    ShowAllToggled,
    ThresholdChanged,
    initial_state,
    reduce,
)
from .performance import PerformanceOptions, advise
from .state import ViewState
from .visibility import clamp_threshold, compute_visibility, derive_pruned_view, recompute

__all__ = [
    "ClickOutcome",
    "InteractionController",
    "NodeClicked",
    "NodeDragEnded",
    "NodeHovered",
    "PerformanceOptions",
    "ShowAllToggled",
    "ThresholdChanged",
    "ViewState",
    "advise",
    "clamp_threshold",
    "compute_visibility",
    "derive_pruned_view",
    "initial_state",
    "recompute",
    "reduce",
]
