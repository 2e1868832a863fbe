#!/usr/bin/env python3
"""
Main CLI entry point using Typer.
"""

import logging
import sys

import typer

from lvmstate.cli.commands import apply, mount, vg
from lvmstate.cli.lib.config import load_config

app = typer.Typer(
    name="lvmstate",
    help="Declare and converge LVM volume groups",
    add_completion=False,
)

# Add command groups
app.add_typer(vg.app, name="vg", help="Volume group commands")
app.add_typer(mount.app, name="mount", help="Mount state commands")
app.command(name="apply")(apply.apply)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log commands and their output"),
):
    """Configure logging for all commands."""
    cfg = load_config()
    level = logging.DEBUG if verbose else cfg.log_level_number
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except KeyboardInterrupt:
        typer.echo("\nOperation cancelled by user", err=True)
        return 130
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
