"""
lnview CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import prune, render, stats


@click.group()
@click.version_option(package_name="lnview")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """lnview: Interactive channel graph explorer.

    Shows a large payment-channel graph a manageable slice at a time:
    only well-connected nodes at first, expanding on demand.

    \b
    Quick Start:
      lnview stats describegraph.json
      lnview prune describegraph.json --threshold 10 --json
      lnview render describegraph.json -o graph.html --open
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(stats.stats)
main.add_command(prune.prune)
main.add_command(render.render)

if __name__ == "__main__":
    main()
