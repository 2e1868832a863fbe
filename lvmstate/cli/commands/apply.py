"""
Apply a declaration file.
"""

from pathlib import Path

import typer

from lvmstate.models import load_declarations
from lvmstate.services.gateway import SystemGateway
from lvmstate.services.volume_group import VolumeGroupConvergence


def apply(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON declaration file"),
):
    """
    Converge every volume group declared in a file.

    Groups are processed in order; the first failure stops the run.
    """
    try:
        declarations = load_declarations(path)
        convergence = VolumeGroupConvergence(SystemGateway())

        changed_any = False
        for spec in declarations:
            typer.echo(f"Converging volume group: {spec.name}")
            result = convergence.converge(spec)
            changed_any = changed_any or result.changed
            typer.echo(f"  {spec.name}: {'changed' if result.changed else 'unchanged'}")

        typer.echo(f"Applied {len(declarations)} volume group(s){'' if changed_any else ', nothing to do'}")

    except Exception as e:
        typer.echo(f"Error applying {path}: {e}", err=True)
        raise typer.Exit(1)
