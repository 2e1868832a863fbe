"""
Logical volume service layer.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from lvmstate.models import LogicalVolumeDeclaration
from lvmstate.services.gateway import HostGateway

logger = logging.getLogger(__name__)


class LogicalVolume(ABC):
    """
    What a volume group needs from its logical volumes.

    The group assigns its name with `set_group` and then asks the volume to
    converge with `create`, which reports whether anything changed.
    """

    @abstractmethod
    def set_group(self, name: str) -> None:
        pass

    @abstractmethod
    def create(self) -> bool:
        pass


class LvmLogicalVolume(LogicalVolume):
    """Logical volume converged through a host gateway: lvcreate, mkfs, mount, fstab."""

    def __init__(self, declaration: LogicalVolumeDeclaration, gateway: HostGateway):
        self.declaration = declaration
        self.gateway = gateway
        self.group: Optional[str] = None

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def device_path(self) -> str:
        return f"/dev/{self.group}/{self.name}"

    def set_group(self, name: str) -> None:
        self.group = name

    def create(self) -> bool:
        if not self.group:
            raise ValueError(f"Logical volume {self.name} has no volume group")

        decl = self.declaration
        changed = False

        if self.gateway.logical_volume_exists(self.group, self.name):
            logger.debug("Logical volume %s already exists", self.device_path)
        else:
            self.gateway.create_logical_volume(
                self.group,
                self.name,
                decl.size,
                stripes=decl.stripes,
                stripe_size=decl.stripe_size,
                mirrors=decl.mirrors,
                contiguous=decl.contiguous,
                readahead=decl.readahead,
            )
            changed = True

        if decl.filesystem:
            if self.gateway.format_filesystem(self.device_path, decl.filesystem, decl.filesystem_params):
                changed = True

        if decl.mount_point:
            if self.gateway.mount_filesystem(self.device_path, decl.mount_point, decl.mount_options):
                changed = True
            if self.gateway.enable_mount(self.device_path, decl.mount_point, decl.filesystem, decl.mount_options):
                changed = True

        return changed
