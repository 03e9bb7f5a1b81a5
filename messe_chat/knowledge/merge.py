"""Deep merge for plain key-value trees.

Sub-mappings present on both sides merge key by key. Every other value
(lists, scalars, None) on the overlay side replaces the base value wholesale.
"""
import copy
from typing import Any, Dict


def is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new tree with ``overlay`` merged on top of ``base``.

    Neither input is mutated and the result shares no mutable containers
    with them.
    """
    out: Dict[str, Any] = {k: copy.deepcopy(v) for k, v in (base or {}).items()}
    for key, value in (overlay or {}).items():
        current = out.get(key)
        if is_plain_object(current) and is_plain_object(value):
            out[key] = deep_merge(current, value)
        else:
            out[key] = copy.deepcopy(value)
    return out
