"""
Global Configuration and Viewer Defaults.

This module centralizes the defaults that shape what the viewer shows on
first load: the minimum channel count for a node to be drawn, the color
fallbacks, the channel palette and the renderer tuning tiers.

A project can override a subset of them in ``.lnview/config.yaml``::

    default_threshold: 15
"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

# --- Visibility ---
# Nodes with fewer channels than this are hidden until expanded
DEFAULT_MIN_CHANNELS = 30

# Threshold value meaning "show every node"
SHOW_ALL_THRESHOLD = 0

# --- Colors ---
# Raw graphs use pure black when a node never announced a color
NO_COLOR_SENTINEL = "#000000"
NEUTRAL_NODE_COLOR = "#808080"

CHANNEL_PALETTE: Tuple[str, ...] = ("red", "white", "blue", "green")

# --- Renderer tuning ---
# (exclusive lower bound on node count, cooldown ticks, sphere resolution)
PERFORMANCE_TIERS: Tuple[Tuple[int, int, int], ...] = (
    (2500, 0, 4),
    (1000, 5, 6),
)
FALLBACK_COOLDOWN_TICKS = 20
FALLBACK_RESOLUTION = 8
WARMUP_TICKS = 20

# --- Files ---
CONFIG_PATH = Path(".lnview/config.yaml")
GRAPH_FILENAMES: Tuple[str, ...] = ("graph.json", "describegraph.json")


class Settings(BaseModel):
    """User-tunable settings, read from YAML and the environment."""

    default_threshold: int = DEFAULT_MIN_CHANNELS
    neutral_color: str = NEUTRAL_NODE_COLOR
    palette: Tuple[str, ...] = CHANNEL_PALETTE

    @field_validator("default_threshold")
    @classmethod
    def clamp_threshold(cls, value: int) -> int:
        # Negative thresholds show everything, same as 0
        return max(value, 0)


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from the YAML config file, then apply environment overrides.

    Resolution order (last wins):
    1. Built-in defaults
    2. ``.lnview/config.yaml`` (or ``$LNVIEW_CONFIG``)
    3. ``$LNVIEW_DEFAULT_THRESHOLD``

    A missing file is not an error. A malformed one is logged and ignored.
    """
    path = config_path or Path(os.getenv("LNVIEW_CONFIG", str(CONFIG_PATH)))
    data = {}

    if path.exists():
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read config {path}: {e}")
            data = {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {path}: expected a mapping")
            data = {}

    env_threshold = os.getenv("LNVIEW_DEFAULT_THRESHOLD")
    if env_threshold:
        data["default_threshold"] = env_threshold

    try:
        return Settings(**data)
    except ValidationError as e:
        logger.warning(f"Invalid settings, using defaults: {e}")
        return Settings()
