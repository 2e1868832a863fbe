"""
Pydantic models for volume group and logical volume declarations.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from lvmstate.cli.lib.validators import (
    validate_device_path,
    validate_extent_size,
    validate_lv_size,
    validate_name,
)


class LogicalVolumeDeclaration(BaseModel):
    """Desired state of a logical volume inside a volume group."""

    name: str = Field(..., description="Logical volume name")
    size: str = Field(..., description="Absolute size (10G) or extents (50%VG, 100%FREE, 1024)")
    filesystem: Optional[str] = Field(None, description="Filesystem type to create (e.g., ext4, xfs)")
    filesystem_params: List[str] = Field(default_factory=list, description="Extra mkfs options")
    mount_point: Optional[str] = Field(None, description="Where to mount the filesystem")
    mount_options: Optional[str] = Field(None, description="Mount options (default from config)")
    stripes: Optional[int] = Field(None, ge=2)
    stripe_size: Optional[int] = Field(None, gt=0, description="Stripe size in KiB")
    mirrors: Optional[int] = Field(None, ge=1)
    contiguous: bool = False
    readahead: Optional[str] = None

    @field_validator("name")
    def validate_lv_name(cls, v: str) -> str:
        validate_name(v)
        return v

    @field_validator("size")
    def validate_size(cls, v: str) -> str:
        v = v.strip()
        validate_lv_size(v)
        return v

    @field_validator("stripe_size")
    def validate_stripe_size(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v & (v - 1):
            raise ValueError("Stripe size must be a power of 2")
        return v

    @model_validator(mode="after")
    def validate_mount(self) -> "LogicalVolumeDeclaration":
        if self.mount_point:
            if not self.filesystem:
                raise ValueError("A filesystem is required to mount a logical volume")
            if not self.mount_point.startswith("/"):
                raise ValueError("Mount point must be an absolute path")
        if self.stripe_size and not self.stripes:
            raise ValueError("stripe_size requires stripes")
        return self


class VolumeGroupDeclaration(BaseModel):
    """Desired state of a volume group."""

    name: str = Field(..., description="Volume group name")
    physical_volumes: List[str] = Field(..., min_length=1, description="Physical volume device paths")
    physical_extent_size: Optional[str] = Field(None, description="Physical extent size (e.g., 4M)")
    logical_volumes: List[LogicalVolumeDeclaration] = Field(default_factory=list)

    @field_validator("name")
    def validate_vg_name(cls, v: str) -> str:
        validate_name(v)
        return v

    @field_validator("physical_volumes", mode="before")
    def flatten_physical_volumes(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("physical_volumes")
    def validate_physical_volumes(cls, v: List[str]) -> List[str]:
        for path in v:
            validate_device_path(path)
        if len(set(v)) != len(v):
            raise ValueError("Physical volumes must not contain duplicates")
        return v

    @field_validator("physical_extent_size")
    def validate_pe_size(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            validate_extent_size(v)
        return v

    @field_validator("logical_volumes")
    def validate_unique_lvs(cls, v: List[LogicalVolumeDeclaration]) -> List[LogicalVolumeDeclaration]:
        names = [lv.name for lv in v]
        if len(set(names)) != len(names):
            raise ValueError("Logical volume names must be unique within a volume group")
        return v


def load_declarations(path: Union[str, Path]) -> List[VolumeGroupDeclaration]:
    """
    Load volume group declarations from a JSON file.

    The document is either a single volume group object or
    {"volume_groups": [...]}.

    Raises:
        ValueError: If the file is not valid JSON or fails validation
    """
    with open(path, "r", encoding="utf-8") as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}")

    if isinstance(data, dict) and "volume_groups" in data:
        items = data["volume_groups"]
    else:
        items = [data]

    if not isinstance(items, list):
        raise ValueError("volume_groups must be a list")

    try:
        declarations = [VolumeGroupDeclaration.model_validate(item) for item in items]
    except ValidationError as e:
        raise ValueError(str(e))

    names = [d.name for d in declarations]
    if len(set(names)) != len(names):
        raise ValueError("Volume group names must be unique")
    return declarations
