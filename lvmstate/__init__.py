"""
lvmstate - declare and converge LVM volume groups.

This package provides a CLI and a service layer that create and extend volume
groups, release mounted physical volumes, and cascade to logical volumes.
"""

__version__ = "0.1.0"
__all__ = ["cli", "models", "services"]
