"""Dotted-path lookups and ``[get:path]`` template substitution."""
import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Union

from .csv_overlay import path_segments

GET_PATTERN = re.compile(r"\[get:([^\]]+)\]")


@dataclass(frozen=True)
class NotFound:
    path: str

    def placeholder(self) -> str:
        return f"[Data for {self.path} not found]"


def resolve_path(path: str, tree: Dict[str, Any]) -> Union[Any, NotFound]:
    """Return the value at ``path`` in ``tree`` or a ``NotFound``.

    Mapping segments are looked up by key; a non-negative integer segment
    indexes into a list.
    """
    segments = path_segments(path)
    if not segments:
        return NotFound(path)

    value: Any = tree
    for segment in segments:
        if isinstance(value, dict) and segment in value:
            value = value[segment]
        elif isinstance(value, list) and segment.isascii() and segment.isdigit() and int(segment) < len(value):
            value = value[int(segment)]
        else:
            return NotFound(path)
    return value


def _plain_float(value: float) -> Any:
    # integral floats below 1e21 print as integers; larger ones keep exponent form
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _jsonable(value: Any) -> Any:
    if isinstance(value, float):
        return _plain_float(value) if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(_plain_float(value))
    return json.dumps(_jsonable(value), ensure_ascii=False, separators=(",", ":"), default=str)


def resolve_template(text: str, tree: Dict[str, Any]) -> str:
    """Replace every ``[get:path]`` marker in ``text`` in a single pass.

    Substituted values are not scanned again, so a value that itself holds
    ``[get:...]`` text comes through verbatim.
    """

    def _substitute(match: "re.Match[str]") -> str:
        path = match.group(1)
        value = resolve_path(path, tree)
        if isinstance(value, NotFound):
            return value.placeholder()
        return stringify(value)

    return GET_PATTERN.sub(_substitute, text)
