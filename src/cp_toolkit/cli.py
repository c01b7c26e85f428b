"""CLI entry point for cp-toolkit."""

import logging
from pathlib import Path

import click

from cp_toolkit.commands import dsu
from cp_toolkit.core.config import load_config


@click.group()
@click.version_option(version="0.1.0", prog_name="cp-toolkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    help="Path to JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, config_path: Path | None, verbose: bool):
    """Competitive Programming Toolkit.

    Command-line helpers around the toolkit's data structures.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    ctx.obj["config"] = config
    if verbose or config.output.verbose:
        logging.basicConfig()
        logging.getLogger("cp_toolkit").setLevel(logging.DEBUG)


# Register commands
main.add_command(dsu.dsu)


if __name__ == "__main__":
    main()
