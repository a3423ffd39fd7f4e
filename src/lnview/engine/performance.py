"""
Performance Advisor.

Maps the size of the loaded graph to renderer tuning so that large graphs
stay responsive: fewer layout ticks after interaction and coarser spheres.
"""

from pydantic import BaseModel, ConfigDict

from ..config import FALLBACK_COOLDOWN_TICKS, FALLBACK_RESOLUTION, PERFORMANCE_TIERS, WARMUP_TICKS


class PerformanceOptions(BaseModel):
    """Renderer tuning derived from the node count."""
    cooldown_ticks: int
    resolution: int
    warmup_ticks: int = WARMUP_TICKS

    model_config = ConfigDict(frozen=True)


def advise(node_count: int) -> PerformanceOptions:
    """
    Pick renderer options for a graph of ``node_count`` nodes.

    | node count | cooldown | resolution |
    |------------|----------|------------|
    | > 2500     | 0        | 4          |
    | > 1000     | 5        | 6          |
    | otherwise  | 20       | 8          |
    """
    for lower_bound, cooldown_ticks, resolution in PERFORMANCE_TIERS:
        if node_count > lower_bound:
            return PerformanceOptions(cooldown_ticks=cooldown_ticks, resolution=resolution)
    return PerformanceOptions(
        cooldown_ticks=FALLBACK_COOLDOWN_TICKS,
        resolution=FALLBACK_RESOLUTION,
    )
