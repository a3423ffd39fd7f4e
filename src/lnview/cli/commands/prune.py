"""
Prune Command - Compute the visible subset of a graph.

Loads a graph, applies the threshold and any clicks given on the command
line, and prints the resulting pruned view.
"""

import logging
import sys
from typing import List, Optional

import click
from pydantic import BaseModel

from ...core.exceptions import LnviewError
from ...core.types import Edge, Node
from ..utils import build_controller, echo_error, echo_info, echo_success, echo_warning

logger = logging.getLogger(__name__)


# --- API Models ---
class PruneResponse(BaseModel):
    threshold: int
    total_nodes: int
    total_edges: int
    nodes: List[Node]
    edges: List[Edge]


@click.command()
@click.argument("graph_file", default=".")
@click.option("-t", "--threshold", type=int, default=None,
              help="Minimum channel count for a node to be shown")
@click.option("--show-all", is_flag=True, help="Show every node (threshold 0)")
@click.option("-c", "--click", "clicks", multiple=True,
              help="Click a node by id; repeat to replay several clicks in order")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def prune(graph_file: str, threshold: Optional[int], show_all: bool,
          clicks: tuple, as_json: bool):
    """
    Print the nodes and channels that would be rendered.
    """
    try:
        controller = build_controller(graph_file, threshold, show_all, clicks)
    except LnviewError as e:
        echo_error(str(e))
        sys.exit(1)

    view = controller.view
    graph = controller.graph
    logger.debug(f"Replayed {len(clicks)} click(s) on {graph_file}")

    if as_json:
        response = PruneResponse(
            threshold=controller.state.threshold,
            total_nodes=graph.node_count,
            total_edges=graph.edge_count,
            nodes=list(view.nodes),
            edges=list(view.edges),
        )
        click.echo(response.model_dump_json(indent=2))
        return

    echo_success(
        f"{len(view.nodes)}/{graph.node_count} nodes, "
        f"{len(view.edges)}/{graph.edge_count} channels visible "
        f"(threshold {controller.state.threshold})"
    )
    for node in view.nodes:
        echo_info(f"{node.display_name} [{node.id}] degree={graph.degree(node.id)}")
    if view.is_empty():
        echo_warning("No node meets the threshold. Lower it with -t or use --show-all.")
