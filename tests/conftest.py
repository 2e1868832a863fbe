"""
Pytest configuration and fixtures.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set
from unittest.mock import patch

import pytest

from lvmstate.cli.lib.lvm import VolumeGroupState
from lvmstate.services.gateway import HostGateway


class InMemoryGateway(HostGateway):
    """
    Gateway that models host state in memory.

    Every mutating call is appended to `commands` in the textual form the real
    command would take, e.g. "vgextend data_vg /dev/sdc".
    """

    def __init__(
        self,
        devices: Optional[Set[str]] = None,
        mounts: Optional[Dict[str, str]] = None,
        volume_groups: Optional[Dict[str, List[str]]] = None,
        fstab: Optional[Set[str]] = None,
    ):
        self.devices = set(devices or ())
        self.mounts = dict(mounts or {})
        self.volume_groups = {name: list(pvs) for name, pvs in (volume_groups or {}).items()}
        self.fstab = set(fstab or ())
        self.logical_volumes: Dict[str, str] = {}
        self.filesystems: Dict[str, str] = {}
        self.commands: List[str] = []

    def device_exists(self, path: str) -> bool:
        return path in self.devices

    def query_mount_point(self, device: str) -> Optional[str]:
        return self.mounts.get(device)

    def unmount(self, mount_point: str) -> None:
        self.commands.append(f"umount {mount_point}")
        for device, point in list(self.mounts.items()):
            if point == mount_point:
                del self.mounts[device]

    def disable_mount(self, mount_point: str, device: str) -> bool:
        if mount_point not in self.fstab:
            return False
        self.fstab.discard(mount_point)
        return True

    def query_volume_group(self, name: str) -> Optional[VolumeGroupState]:
        if name not in self.volume_groups:
            return None
        return VolumeGroupState(name=name, physical_volumes=list(self.volume_groups[name]))

    def create_volume_group(
        self, name: str, physical_volumes: Sequence[str], physical_extent_size: Optional[str] = None
    ) -> None:
        cmd = ["vgcreate", name]
        if physical_extent_size:
            cmd.extend(["-s", physical_extent_size])
        cmd.extend(physical_volumes)
        self.commands.append(" ".join(cmd))
        self.volume_groups[name] = list(physical_volumes)

    def extend_volume_group(self, name: str, physical_volume: str) -> None:
        self.commands.append(f"vgextend {name} {physical_volume}")
        self.volume_groups[name].append(physical_volume)

    def logical_volume_exists(self, vg_name: str, lv_name: str) -> bool:
        return f"/dev/{vg_name}/{lv_name}" in self.logical_volumes

    def create_logical_volume(self, vg_name: str, lv_name: str, size: str, **options) -> str:
        lv_path = f"/dev/{vg_name}/{lv_name}"
        self.commands.append(f"lvcreate {lv_path} {size}")
        self.logical_volumes[lv_path] = size
        self.devices.add(lv_path)
        return lv_path

    def format_filesystem(self, device: str, fstype: str, params: Optional[List[str]] = None) -> bool:
        if device in self.filesystems:
            return False
        self.commands.append(f"mkfs -t {fstype} {device}")
        self.filesystems[device] = fstype
        return True

    def mount_filesystem(self, device: str, mount_point: str, options: Optional[str] = None) -> bool:
        if mount_point in self.mounts.values():
            return False
        self.commands.append(f"mount {device} {mount_point}")
        self.mounts[device] = mount_point
        return True

    def enable_mount(self, device: str, mount_point: str, fstype: str, options: Optional[str] = None) -> bool:
        if mount_point in self.fstab:
            return False
        self.fstab.add(mount_point)
        return True


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for testing."""
    with patch("subprocess.run") as mock:
        yield mock


@pytest.fixture
def gateway():
    """Empty in-memory host."""
    return InMemoryGateway()


@pytest.fixture
def make_gateway():
    """Factory for in-memory hosts with preset devices, mounts and volume groups."""
    return InMemoryGateway
