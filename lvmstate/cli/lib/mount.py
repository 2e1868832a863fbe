"""
Mount table and fstab management functions.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from lvmstate.cli.lib.process import run

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def query_mount_point(device: str) -> Optional[str]:
    """
    Obtain the mount point of a device from the output of `mount`.

    Args:
        device: Device path (e.g., "/dev/sdb")

    Returns:
        The mount point if the device is mounted, None otherwise

    Raises:
        ExecutionError: If `mount` cannot be run
    """
    output = run(["mount"]).stdout or ""
    return parse_mount_point(output, device)


def parse_mount_point(mount_output: str, device: str) -> Optional[str]:
    """
    Scan `mount` output for a line like "/dev/sdb on /mnt type ext3 (rw)".

    The first matching line wins. Aliased devices (symlinks, UUIDs) are not
    resolved and do not match.
    """
    pattern = re.compile(rf"^{re.escape(device)}\s+on\s+(.*)\s+type.*")
    for line in mount_output.splitlines():
        matched = pattern.match(line)
        if matched:
            return matched.group(1)
    return None


def unmount(mount_point: str) -> None:
    """
    Unmount a filesystem.

    Raises:
        ExecutionError: If unmounting fails
    """
    run(["umount", mount_point])
    logger.info("Unmounted %s", mount_point)


def _is_entry_for(line: str, mount_point: str) -> bool:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return False
    fields = stripped.split()
    return len(fields) >= 2 and fields[1] == mount_point


def _atomic_write_text(path: Path, text: str) -> None:
    tmp_fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as file:
            file.write(text)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def disable_fstab_entry(mount_point: str, fstab_path: PathLike = "/etc/fstab") -> bool:
    """
    Remove the fstab entries for a mount point.

    Args:
        mount_point: Mount point directory
        fstab_path: fstab location

    Returns:
        True if the file was changed
    """
    path = Path(fstab_path)
    if not path.exists():
        return False

    lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
    kept = [line for line in lines if not _is_entry_for(line, mount_point)]
    if len(kept) == len(lines):
        return False

    _atomic_write_text(path, "".join(kept))
    logger.info("Disabled fstab entry for %s", mount_point)
    return True


def enable_fstab_entry(
    device: str,
    mount_point: str,
    fstype: str,
    options: str = "defaults",
    fstab_path: PathLike = "/etc/fstab",
) -> bool:
    """
    Add an fstab entry for a mount point unless one already exists.

    Returns:
        True if the file was changed
    """
    path = Path(fstab_path)
    text = path.read_text(encoding="utf-8") if path.exists() else ""
    if any(_is_entry_for(line, mount_point) for line in text.splitlines()):
        return False

    if text and not text.endswith("\n"):
        text += "\n"
    text += f"{device} {mount_point} {fstype} {options} 0 2\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    _atomic_write_text(path, text)
    logger.info("Enabled fstab entry for %s on %s", device, mount_point)
    return True
