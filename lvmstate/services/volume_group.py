"""
Volume group convergence.

Brings a volume group's existence and membership in line with its
declaration, then cascades to the declared logical volumes.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from lvmstate.models import LogicalVolumeDeclaration, VolumeGroupDeclaration
from lvmstate.services.gateway import HostGateway
from lvmstate.services.logical_volume import LogicalVolume, LvmLogicalVolume

logger = logging.getLogger(__name__)

LogicalVolumeFactory = Callable[[LogicalVolumeDeclaration, HostGateway], LogicalVolume]


@dataclass
class ConvergenceResult:
    """Outcome of converging one volume group."""

    name: str
    changed: bool = False
    created: bool = False
    added_physical_volumes: List[str] = field(default_factory=list)
    unmounted: List[str] = field(default_factory=list)
    logical_volumes_changed: List[bool] = field(default_factory=list)


class VolumeGroupConvergence:
    """
    Converge volume groups through a host gateway.

    Every command failure propagates as ExecutionError and aborts the run;
    steps already applied are not rolled back.
    """

    def __init__(self, gateway: HostGateway, lv_factory: Optional[LogicalVolumeFactory] = None):
        self.gateway = gateway
        self.lv_factory = lv_factory or LvmLogicalVolume

    def converge(
        self,
        spec: VolumeGroupDeclaration,
        logical_volumes: Optional[Sequence[LogicalVolume]] = None,
    ) -> ConvergenceResult:
        """
        Converge one volume group.

        Args:
            spec: Volume group declaration
            logical_volumes: Logical volumes to cascade to; built from
                `spec.logical_volumes` when omitted

        Returns:
            ConvergenceResult; `changed` is set only if vgcreate or vgextend ran
            or a logical volume reported a change
        """
        if logical_volumes is None:
            logical_volumes = [self.lv_factory(decl, self.gateway) for decl in spec.logical_volumes]

        result = ConvergenceResult(name=spec.name)
        physical_volumes = list(spec.physical_volumes)

        # LVM refuses mounted devices, and cloud images often pre-mount ephemeral disks.
        result.unmounted = self.release_mounted_volumes(physical_volumes)

        existing = self.gateway.query_volume_group(spec.name)
        if existing is not None:
            logger.info("Volume group '%s' already exists. Seeking for new PV to add...", spec.name)
            new_pvs = [pv for pv in physical_volumes if pv not in existing.physical_volumes]
            for pv in new_pvs:
                self.gateway.extend_volume_group(spec.name, pv)
            result.added_physical_volumes = new_pvs
            if not new_pvs:
                logger.debug("Volume group '%s' already has all requested physical volumes", spec.name)
        else:
            self.gateway.create_volume_group(spec.name, physical_volumes, spec.physical_extent_size)
            result.created = True

        result.logical_volumes_changed = self.create_logical_volumes(spec.name, logical_volumes)

        result.changed = result.created or bool(result.added_physical_volumes) or any(result.logical_volumes_changed)
        return result

    def release_mounted_volumes(self, physical_volumes: Sequence[str]) -> List[str]:
        """Unmount and disable any existing physical volume that is mounted; return the mount points."""
        released = []
        for pv in physical_volumes:
            if not self.gateway.device_exists(pv):
                continue
            mount_point = self.gateway.query_mount_point(pv)
            if mount_point is None:
                continue
            logger.info("Physical volume %s is mounted at %s; unmounting", pv, mount_point)
            self.gateway.unmount(mount_point)
            self.gateway.disable_mount(mount_point, pv)
            released.append(mount_point)
        return released

    def create_logical_volumes(self, group: str, logical_volumes: Sequence[LogicalVolume]) -> List[bool]:
        updates = []
        for lv in logical_volumes:
            lv.set_group(group)
            updates.append(bool(lv.create()))
        return updates


def converge_volume_group(
    spec: VolumeGroupDeclaration,
    gateway: HostGateway,
    logical_volumes: Optional[Sequence[LogicalVolume]] = None,
) -> ConvergenceResult:
    return VolumeGroupConvergence(gateway).converge(spec, logical_volumes)
