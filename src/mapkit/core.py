from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Union

from .errors import NotAMappingError

logger = logging.getLogger(__name__)

_FULL_ARITY = 3
_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def ensure_mapping(value: Any, ref: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        logger.debug("Rejecting %s: expected a mapping, got %s", ref, type(value).__name__)
        raise NotAMappingError(f"Expected a mapping for '{ref}', got {type(value).__name__}")
    return value


def _call_arity(fn: Callable[..., Any]) -> int:
    """
    Number of leading ``(value, key, obj)`` arguments ``fn`` is called with.

    Only required positional parameters are filled, so defaults such as
    ``round``'s ``ndigits`` keep their value. A callable with positional
    parameters always gets at least the value. Builtins without an
    inspectable signature (``str``, ``int``) get the value only.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    positional = required = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return _FULL_ARITY
        if param.kind in _POSITIONAL_KINDS:
            positional += 1
            if param.default is inspect.Parameter.empty:
                required += 1
    if not positional:
        return 0
    return min(max(required, 1), _FULL_ARITY)


def map_obj(fn: Callable[..., Any], obj: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a new dict with the keys of ``obj`` and values produced by ``fn``.

    ``fn`` is called once per key, in the iteration order of ``obj``, as
    ``fn(value, key, obj)``. Callables declaring fewer required positional
    parameters receive only that many leading arguments, so ``lambda v: v * 2``
    and ``str`` work as well as ``lambda v, k, o: ...``. Parameters with a
    default are never filled with the key or the source mapping.

    Args:
        fn: Transform applied to every entry.
        obj: Mapping to iterate over. It is never mutated.

    Raises:
        TypeError: If ``fn`` is not callable.
        NotAMappingError: If ``obj`` is not a mapping.
    """
    if not callable(fn):
        raise TypeError(f"fn must be callable, got {type(fn).__name__}")
    source = ensure_mapping(obj, "obj")

    arity = _call_arity(fn)
    result: Dict[str, Any] = {}
    for key, value in source.items():
        result[key] = fn(*(value, key, source)[:arity])
    return result


def pick(keys: Union[str, Iterable[str]], obj: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a partial copy of ``obj`` containing only ``keys``.

    Missing keys are ignored. The result follows the order of ``keys``; a
    repeated key is kept once, at its first position. A bare string counts
    as a single key.
    """
    source = ensure_mapping(obj, "obj")
    wanted = (keys,) if isinstance(keys, str) else keys

    result: Dict[str, Any] = {}
    for key in wanted:
        if key in source and key not in result:
            result[key] = source[key]
    return result
