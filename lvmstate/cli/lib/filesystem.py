"""
Filesystem management functions for logical volumes.
"""

import logging
import os
from typing import List, Optional

from lvmstate.cli.lib.process import run

logger = logging.getLogger(__name__)


def get_filesystem_type(device: str) -> Optional[str]:
    """Return the filesystem type on a device, or None if it is blank."""
    result = run(["blkid", "-o", "value", "-s", "TYPE", device], check=False)
    if result.returncode != 0:
        return None
    fstype = (result.stdout or "").strip()
    return fstype or None


def format_filesystem(device: str, fstype: str, params: Optional[List[str]] = None) -> bool:
    """
    Create a filesystem on a device unless it already carries one.

    Args:
        device: Device path (e.g., "/dev/vg_name/lv_name")
        fstype: Filesystem type passed to `mkfs -t`
        params: Additional mkfs options

    Returns:
        True if the device was formatted

    Raises:
        ExecutionError: If mkfs fails
    """
    existing = get_filesystem_type(device)
    if existing:
        # Never reformat
        logger.debug("%s already formatted as %s", device, existing)
        return False

    cmd = ["mkfs", "-t", fstype]
    if params:
        cmd.extend(params)
    cmd.append(device)

    run(cmd)
    logger.info("Formatted %s as %s", device, fstype)
    return True


def mount_filesystem(device: str, mount_point: str, options: Optional[str] = None) -> bool:
    """
    Mount a filesystem.

    Returns:
        True if the filesystem was mounted, False if the mount point was already in use

    Raises:
        ExecutionError: If mounting fails
    """
    os.makedirs(mount_point, exist_ok=True)

    result = run(["mountpoint", "-q", mount_point], check=False)
    if result.returncode == 0:
        return False

    cmd = ["mount"]
    if options and options != "defaults":
        cmd.extend(["-o", options])
    cmd.extend([device, mount_point])

    run(cmd)
    logger.info("Mounted %s at %s", device, mount_point)
    return True
