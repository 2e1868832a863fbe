"""
Volume group commands.
"""

from typing import List, Optional

import typer

from lvmstate.cli.lib.lvm import get_volume_group
from lvmstate.cli.lib.validators import validate_name
from lvmstate.models import VolumeGroupDeclaration
from lvmstate.services.gateway import SystemGateway
from lvmstate.services.volume_group import converge_volume_group

app = typer.Typer(help="Volume group commands")


@app.command()
def converge(
    name: str = typer.Argument(..., help="Volume group name"),
    pv: List[str] = typer.Option(..., "--pv", help="Physical volume device path (repeatable)"),
    extent_size: Optional[str] = typer.Option(None, "--extent-size", "-s", help="Physical extent size (e.g., 4M)"),
):
    """
    Create or extend a volume group.

    Unmounts any requested physical volume that is in use as a filesystem,
    then creates the group or adds the physical volumes it is missing.
    """
    try:
        spec = VolumeGroupDeclaration(name=name, physical_volumes=pv, physical_extent_size=extent_size)

        typer.echo(f"Converging volume group: {name}")

        result = converge_volume_group(spec, SystemGateway())

        for mount_point in result.unmounted:
            typer.echo(f"  Unmounted: {mount_point}")
        if result.created:
            typer.echo(f"  Created with: {' '.join(spec.physical_volumes)}")
        for added in result.added_physical_volumes:
            typer.echo(f"  Added PV: {added}")

        typer.echo(f"Volume group {name} {'changed' if result.changed else 'unchanged'}")

    except Exception as e:
        typer.echo(f"Error converging volume group: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def show(
    name: str = typer.Argument(..., help="Volume group name"),
):
    """
    Show a volume group's physical volumes.
    """
    try:
        validate_name(name)
        state = get_volume_group(name)
        if state is None:
            typer.echo(f"Volume group {name} not found")
            raise typer.Exit(1)
        typer.echo(f"{state.name} pvs={','.join(state.physical_volumes)}")
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error showing volume group: {e}", err=True)
        raise typer.Exit(1)
