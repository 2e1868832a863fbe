"""
LVM volume group and logical volume management functions.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from lvmstate.cli.lib.process import ExecutionError, format_command, run
from lvmstate.cli.lib.validators import is_extent_size

logger = logging.getLogger(__name__)


@dataclass
class VolumeGroupState:
    """Live membership of a volume group."""

    name: str
    physical_volumes: List[str] = field(default_factory=list)


def _raw(cmd: List[str]) -> str:
    logger.debug("Executing lvm command: '%s'", format_command(cmd))
    output = run(cmd).stdout or ""
    logger.debug("Command output: '%s'", output.strip())
    return output


def get_volume_group(name: str) -> Optional[VolumeGroupState]:
    """
    Look up a volume group and its physical volumes.

    Args:
        name: Volume group name

    Returns:
        The volume group state, or None if the group does not exist

    Raises:
        ExecutionError: If vgs fails for any reason other than a missing group
    """
    cmd = ["vgs", "--noheadings", "--separator", ",", "-o", "vg_name,pv_name", name]
    result = run(cmd, check=False)

    if result.returncode != 0:
        if "not found" in (result.stderr or ""):
            return None
        raise ExecutionError(cmd, result.returncode, result.stdout, result.stderr)

    state = None
    for line in (result.stdout or "").splitlines():
        fields = [f.strip() for f in line.split(",")]
        if len(fields) < 2 or fields[0] != name:
            continue
        if state is None:
            state = VolumeGroupState(name=name)
        if fields[1] and fields[1] not in state.physical_volumes:
            state.physical_volumes.append(fields[1])
    return state


def create_volume_group(name: str, physical_volumes: Sequence[str], physical_extent_size: Optional[str] = None) -> str:
    """
    Create a volume group.

    Args:
        name: Volume group name
        physical_volumes: Physical volume device paths, in order
        physical_extent_size: Passed verbatim to `-s` when given

    Returns:
        Command output

    Raises:
        ExecutionError: If vgcreate fails
    """
    cmd = ["vgcreate", name]
    if physical_extent_size:
        cmd.extend(["-s", physical_extent_size])
    cmd.extend(physical_volumes)

    output = _raw(cmd)
    logger.info("Created vg %s with %s", name, " ".join(physical_volumes))
    return output


def extend_volume_group(name: str, physical_volume: str) -> str:
    """
    Add one physical volume to a volume group.

    Raises:
        ExecutionError: If vgextend fails
    """
    output = _raw(["vgextend", name, physical_volume])
    logger.info("Added %s to vg %s", physical_volume, name)
    return output


def logical_volume_exists(vg_name: str, lv_name: str) -> bool:
    result = run(["lvs", f"{vg_name}/{lv_name}"], check=False)
    return result.returncode == 0


def create_logical_volume(
    vg_name: str,
    lv_name: str,
    size: str,
    *,
    stripes: Optional[int] = None,
    stripe_size: Optional[int] = None,
    mirrors: Optional[int] = None,
    contiguous: bool = False,
    readahead: Optional[str] = None,
) -> str:
    """
    Create a logical volume.

    Args:
        vg_name: Volume group name
        lv_name: Logical volume name
        size: Absolute size ("10G") or extents ("50%VG", "100%FREE", "1024")
        stripes: Number of stripes
        stripe_size: Stripe size in KiB
        mirrors: Number of mirrors
        contiguous: Use the contiguous allocation policy
        readahead: Read ahead sector count, or "auto"/"none"

    Returns:
        Path to the logical volume (e.g., "/dev/vg_name/lv_name")

    Raises:
        ExecutionError: If lvcreate fails
    """
    size_flag = "-l" if is_extent_size(size) else "-L"
    cmd = ["lvcreate", "--yes", size_flag, size]

    if stripes:
        cmd.extend(["-i", str(stripes)])
        if stripe_size:
            cmd.extend(["-I", str(stripe_size)])
    if mirrors:
        cmd.extend(["-m", str(mirrors)])
    if contiguous:
        cmd.extend(["--contiguous", "y"])
    if readahead:
        cmd.extend(["-r", readahead])

    cmd.extend(["-n", lv_name, vg_name])

    _raw(cmd)
    lv_path = f"/dev/{vg_name}/{lv_name}"
    logger.info("Created lv %s", lv_path)
    return lv_path
