"""
Stats Command - Summarize a channel graph.

Shows size, degree distribution, how many nodes the default threshold
would show, and the renderer tuning that graph size selects.
"""

import logging
import sys

import click
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ...config import load_settings
from ...core.exceptions import LnviewError
from ...core.normalizer import GraphNormalizer
from ...engine.performance import advise
from ..utils import echo_error, load_raw_graph

logger = logging.getLogger(__name__)


# --- API Models ---
class StatsResponse(BaseModel):
    total_nodes: int
    total_edges: int
    total_capacity: int | float
    max_degree: int
    mean_degree: float
    isolated_nodes: int
    default_threshold: int
    visible_at_default: int
    cooldown_ticks: int
    resolution: int


@click.command()
@click.argument("graph_file", default=".")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(graph_file: str, as_json: bool):
    """
    Show statistics for a graph file.
    """
    settings = load_settings()
    try:
        graph = GraphNormalizer(settings).normalize(load_raw_graph(graph_file))
    except LnviewError as e:
        echo_error(str(e))
        sys.exit(1)

    perf = advise(graph.node_count)
    logger.debug(f"Performance tier for {graph.node_count} nodes: {perf}")
    response = StatsResponse(
        **graph.get_stats(),
        default_threshold=settings.default_threshold,
        visible_at_default=graph.count_at_threshold(settings.default_threshold),
        cooldown_ticks=perf.cooldown_ticks,
        resolution=perf.resolution,
    )

    if as_json:
        click.echo(response.model_dump_json(indent=2))
        return

    table = Table(title="Graph Statistics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(response.total_nodes))
    table.add_row("Channels", str(response.total_edges))
    table.add_row("Total capacity", f"{response.total_capacity:,}")
    table.add_row("Max degree", str(response.max_degree))
    table.add_row("Mean degree", f"{response.mean_degree:.2f}")
    table.add_row("Isolated nodes", str(response.isolated_nodes))
    table.add_row(
        f"Visible at threshold {response.default_threshold}",
        str(response.visible_at_default),
    )
    table.add_row("Cooldown ticks", str(response.cooldown_ticks))
    table.add_row("Sphere resolution", str(response.resolution))
    Console().print(table)
