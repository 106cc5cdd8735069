"""
mapkit public API.
"""
from __future__ import annotations

import logging

from .core import ensure_mapping, map_obj, pick
from .errors import MapKitError, NotAMappingError
from .merger import merge, merge_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

mapObj = map_obj
mergeAll = merge_all


__all__ = [
    "MapKitError",
    "NotAMappingError",
    "ensure_mapping",
    "mapObj",
    "map_obj",
    "merge",
    "mergeAll",
    "merge_all",
    "pick",
]
