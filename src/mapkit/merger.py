"""Shallow, order-preserving merges of mappings."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, Union

from .core import ensure_mapping


def merge(a: Mapping[str, Any], b: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with the entries of ``a`` overwritten by those of ``b``."""
    merged: Dict[str, Any] = dict(ensure_mapping(a, "a"))
    merged.update(ensure_mapping(b, "b"))
    return merged


def merge_all(objs: Union[Mapping[str, Any], Iterable[Mapping[str, Any]]]) -> Dict[str, Any]:
    """
    Merge a sequence of mappings left to right into one new dict.

    Later mappings win on colliding keys. A single mapping is treated as a
    one-element sequence and an empty sequence yields an empty dict.
    """
    if isinstance(objs, Mapping):
        objs = (objs,)
    elif not isinstance(objs, Iterable) or isinstance(objs, (str, bytes)):
        ensure_mapping(objs, "objs")

    merged: Dict[str, Any] = {}
    for index, fragment in enumerate(objs):
        merged.update(ensure_mapping(fragment, f"objs[{index}]"))
    return merged
