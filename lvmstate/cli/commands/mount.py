"""
Mount state commands.
"""

import typer

from lvmstate.cli.lib.mount import query_mount_point
from lvmstate.cli.lib.validators import validate_device_path

app = typer.Typer(help="Mount state commands")


@app.command()
def query(
    device: str = typer.Argument(..., help="Device path (e.g., /dev/sdb)"),
):
    """
    Print where a device is mounted.
    """
    try:
        validate_device_path(device)
        mount_point = query_mount_point(device)
        typer.echo(mount_point if mount_point is not None else "not mounted")
    except Exception as e:
        typer.echo(f"Error querying mount state: {e}", err=True)
        raise typer.Exit(1)
