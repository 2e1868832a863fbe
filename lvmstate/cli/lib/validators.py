"""
Input validation functions.
"""

import re

# Absolute sizes accepted by `lvcreate -L`, e.g. "10G", "512m", "1.5T"
_ABSOLUTE_SIZE_RE = re.compile(r"^\d+(\.\d+)?[bBsSkKmMgGtTpPeE]?$")
# Relative sizes accepted by `lvcreate -l`, e.g. "50%VG", "100%FREE", "1024"
_EXTENT_SIZE_RE = re.compile(r"^(\d+%(VG|FREE|PVS|ORIGIN)|\d+)$")


def validate_name(name: str) -> None:
    """
    Validate an LVM object name (volume group or logical volume).

    Args:
        name: Name to validate

    Raises:
        ValueError: If name is invalid
    """
    if not name:
        raise ValueError("Name cannot be empty")

    if len(name) > 127:
        raise ValueError("Name must be between 1 and 127 characters")

    if name in (".", ".."):
        raise ValueError(f"Name '{name}' is reserved")

    # LVM allows alphanumerics and +_.- but not a leading hyphen
    if not re.match(r"^[a-zA-Z0-9+_.][a-zA-Z0-9+_.-]*$", name):
        raise ValueError(
            "Name must not start with a hyphen and may contain only alphanumeric, plus, dots, underscores, or hyphens"
        )


def validate_device_path(path: str) -> None:
    """
    Validate a block device path.

    Only the form is checked; whether the device exists is left to the LVM commands.

    Raises:
        ValueError: If path is not absolute
    """
    if not path:
        raise ValueError("Device path cannot be empty")
    if not path.startswith("/"):
        raise ValueError(f"Device path must be absolute: {path}")
    if any(c.isspace() for c in path):
        raise ValueError(f"Device path must not contain whitespace: {path}")


def validate_extent_size(size: str) -> None:
    """
    Validate a physical extent size (e.g., "4M").

    Raises:
        ValueError: If size is not a valid absolute size
    """
    if not _ABSOLUTE_SIZE_RE.match(size):
        raise ValueError(f"Invalid physical extent size: {size}")


def is_extent_size(size: str) -> bool:
    """Whether a logical volume size is given in extents (`-l`) rather than bytes (`-L`)."""
    return bool(_EXTENT_SIZE_RE.match(size))


def validate_lv_size(size: str) -> None:
    """
    Validate a logical volume size.

    Accepts absolute sizes ("10G"), percentages ("50%VG", "100%FREE") and extent counts ("1024").

    Raises:
        ValueError: If size is invalid
    """
    if not size:
        raise ValueError("Size cannot be empty")
    if is_extent_size(size):
        return
    if not _ABSOLUTE_SIZE_RE.match(size):
        raise ValueError(f"Invalid logical volume size: {size}")
