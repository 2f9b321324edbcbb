"""Bit-flag permission store backed by a single integer mask."""

from logging import NullHandler, getLogger

from bitperms.errors import (
    InvalidBitMaskError,
    InvalidFlagError,
    InvalidFlagSpaceError,
    PermissionStoreError,
)
from bitperms.logging import configure_logging
from bitperms.store import PermissionStore


getLogger(__name__).addHandler(NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "InvalidBitMaskError",
    "InvalidFlagError",
    "InvalidFlagSpaceError",
    # Store
    "PermissionStore",
    "PermissionStoreError",
    "__version__",
    # Logging
    "configure_logging",
]
