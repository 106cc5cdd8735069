"""Exception types for the mapkit API."""
from __future__ import annotations

from .exceptions import MapKitError


class NotAMappingError(MapKitError, TypeError):
    """Raised when an argument expected to be a mapping is something else."""


__all__ = [
    "MapKitError",
    "NotAMappingError",
]
