"""
Render Command - Export an interactive 3D view.

Runs the engine like ``prune`` and writes the resulting view to an HTML
page backed by 3d-force-graph.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ...core.exceptions import LnviewError
from ...render.html import HtmlRenderer
from ...render.session import ResizeEvents, VisualizationSession
from ..utils import build_controller, echo_error, echo_info, echo_success

logger = logging.getLogger(__name__)


@click.command()
@click.argument("graph_file", default=".")
@click.option("-o", "--output", default="graph.html", help="Output HTML file")
@click.option("-t", "--threshold", type=int, default=None,
              help="Minimum channel count for a node to be shown")
@click.option("--show-all", is_flag=True, help="Show every node (threshold 0)")
@click.option("-c", "--click", "clicks", multiple=True,
              help="Click a node by id before exporting; repeatable")
@click.option("--open", "open_browser", is_flag=True, help="Open the page in a browser")
def render(graph_file: str, output: str, threshold: Optional[int], show_all: bool,
           clicks: tuple, open_browser: bool):
    """
    Write the pruned graph to an HTML visualization.
    """
    if not output.endswith(".html"):
        echo_error(f"Unsupported format: {output}")
        click.echo("Supported: .html")
        sys.exit(1)

    try:
        controller = build_controller(graph_file, threshold, show_all, clicks)
    except LnviewError as e:
        echo_error(str(e))
        sys.exit(1)

    logger.debug(f"Rendering {graph_file} to {output}")
    renderer = HtmlRenderer(output, open_browser=open_browser)
    with VisualizationSession(controller, renderer, ResizeEvents()) as session:
        bundle = session.last_bundle

    echo_success(f"Generated: {output}")
    echo_info(f"{len(bundle.view.nodes)} nodes, {len(bundle.view.edges)} channels")
    echo_info(f"Open: file://{Path(output).absolute()}")
