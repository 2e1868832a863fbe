"""
Host gateway: the single seam through which host LVM and mount state is read and changed.
"""

import os
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lvmstate.cli.lib import filesystem, lvm, mount
from lvmstate.cli.lib.config import LvmStateConfig, load_config
from lvmstate.cli.lib.lvm import VolumeGroupState


class HostGateway(ABC):
    """Interface for host state access used by the convergence services."""

    @abstractmethod
    def device_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def query_mount_point(self, device: str) -> Optional[str]:
        pass

    @abstractmethod
    def unmount(self, mount_point: str) -> None:
        pass

    @abstractmethod
    def disable_mount(self, mount_point: str, device: str) -> bool:
        pass

    @abstractmethod
    def query_volume_group(self, name: str) -> Optional[VolumeGroupState]:
        pass

    @abstractmethod
    def create_volume_group(
        self, name: str, physical_volumes: Sequence[str], physical_extent_size: Optional[str] = None
    ) -> None:
        pass

    @abstractmethod
    def extend_volume_group(self, name: str, physical_volume: str) -> None:
        pass

    @abstractmethod
    def logical_volume_exists(self, vg_name: str, lv_name: str) -> bool:
        pass

    @abstractmethod
    def create_logical_volume(self, vg_name: str, lv_name: str, size: str, **options) -> str:
        pass

    @abstractmethod
    def format_filesystem(self, device: str, fstype: str, params: Optional[List[str]] = None) -> bool:
        pass

    @abstractmethod
    def mount_filesystem(self, device: str, mount_point: str, options: Optional[str] = None) -> bool:
        pass

    @abstractmethod
    def enable_mount(self, device: str, mount_point: str, fstype: str, options: Optional[str] = None) -> bool:
        pass


class SystemGateway(HostGateway):
    """Gateway backed by the host's mount, LVM and mkfs commands."""

    def __init__(self, config: Optional[LvmStateConfig] = None):
        self.config = config or load_config()

    def device_exists(self, path: str) -> bool:
        return os.path.exists(path)

    def query_mount_point(self, device: str) -> Optional[str]:
        return mount.query_mount_point(device)

    def unmount(self, mount_point: str) -> None:
        mount.unmount(mount_point)

    def disable_mount(self, mount_point: str, device: str) -> bool:
        return mount.disable_fstab_entry(mount_point, self.config.fstab_path)

    def query_volume_group(self, name: str) -> Optional[VolumeGroupState]:
        return lvm.get_volume_group(name)

    def create_volume_group(
        self, name: str, physical_volumes: Sequence[str], physical_extent_size: Optional[str] = None
    ) -> None:
        lvm.create_volume_group(name, physical_volumes, physical_extent_size)

    def extend_volume_group(self, name: str, physical_volume: str) -> None:
        lvm.extend_volume_group(name, physical_volume)

    def logical_volume_exists(self, vg_name: str, lv_name: str) -> bool:
        return lvm.logical_volume_exists(vg_name, lv_name)

    def create_logical_volume(self, vg_name: str, lv_name: str, size: str, **options) -> str:
        return lvm.create_logical_volume(vg_name, lv_name, size, **options)

    def format_filesystem(self, device: str, fstype: str, params: Optional[List[str]] = None) -> bool:
        return filesystem.format_filesystem(device, fstype, params)

    def mount_filesystem(self, device: str, mount_point: str, options: Optional[str] = None) -> bool:
        return filesystem.mount_filesystem(device, mount_point, options or self.config.default_mount_options)

    def enable_mount(self, device: str, mount_point: str, fstype: str, options: Optional[str] = None) -> bool:
        return mount.enable_fstab_entry(
            device,
            mount_point,
            fstype,
            options or self.config.default_mount_options,
            self.config.fstab_path,
        )
