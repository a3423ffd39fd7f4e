"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, graph file loading and building a
controller from command line options.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import click

from ..config import GRAPH_FILENAMES, SHOW_ALL_THRESHOLD, Settings, load_settings
from ..core.exceptions import GraphFileError
from ..engine.interaction import InteractionController


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def resolve_graph_path(graph_file: str) -> Path:
    """
    Resolve a file or directory argument to a graph JSON file.

    Directories are searched for the standard filenames
    (``graph.json``, then ``describegraph.json``).

    Raises:
        GraphFileError: Nothing usable exists at the path.
    """
    graph_path = Path(graph_file)

    if graph_path.is_dir():
        for name in GRAPH_FILENAMES:
            candidate = graph_path / name
            if candidate.exists():
                return candidate
        raise GraphFileError(graph_file, f"no {' or '.join(GRAPH_FILENAMES)} in directory")

    if not graph_path.exists():
        raise GraphFileError(graph_file, "file not found")

    return graph_path


def load_raw_graph(graph_file: str) -> Dict[str, Any]:
    """
    Load the raw graph document from a file or directory path.

    Raises:
        GraphFileError: The path does not resolve, or is not a JSON object.
    """
    graph_path = resolve_graph_path(graph_file)
    try:
        data = json.loads(graph_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise GraphFileError(str(graph_path), f"unreadable graph: {e}") from e

    if not isinstance(data, dict):
        raise GraphFileError(str(graph_path), "expected a JSON object with 'nodes' and 'links'")
    return data


def build_controller(
    graph_file: str,
    threshold: Optional[int] = None,
    show_all: bool = False,
    clicks: Iterable[str] = (),
    settings: Optional[Settings] = None,
) -> InteractionController:
    """
    Load a graph and replay command line interactions on it.

    ``show_all`` wins over ``threshold``; clicks are applied in order
    after the threshold is in place.
    """
    controller = InteractionController(settings=settings or load_settings())
    controller.load(load_raw_graph(graph_file))

    if show_all:
        controller.set_threshold(SHOW_ALL_THRESHOLD)
    elif threshold is not None:
        controller.set_threshold(threshold)

    for node_id in clicks:
        controller.click(node_id)

    return controller
