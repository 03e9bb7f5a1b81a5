"""Two-column CSV overlay parsing.

Format: ``path,value`` per line, where ``path`` is dot-notation, e.g.
``financials.revenue.total,1018660``. An optional ``path,value`` header row
is skipped. Values are coerced to booleans, null, numbers or embedded JSON
where they look like one, otherwise kept as raw strings.
"""
import json
import re
from typing import Any, Dict, List, Optional, Tuple

from .merge import is_plain_object

_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$", re.ASCII)


def reject_json_constant(name: str):
    """``parse_constant`` hook: NaN and Infinity are not JSON."""
    raise ValueError(f"{name} is not a valid JSON value")


def split_csv_line(line: str) -> Optional[Tuple[str, str]]:
    """Split one line into ``(path, raw_value)``.

    Commas inside double quotes are kept, ``""`` inside a quoted field is a
    literal quote. Returns None for a line without a delimiter.
    """
    fields: List[str] = []
    current = ""
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current += '"'
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append(current)
            current = ""
        else:
            current += ch
        i += 1
    fields.append(current)

    if len(fields) < 2:
        return None
    return fields[0].strip(), fields[1].strip()


def parse_value(raw: str) -> Any:
    if raw == "true":
        return True
    if raw == "false":
        return False
    if raw == "null" or raw == "":
        return None

    compact = raw.replace("_", "")
    if _NUMBER_RE.match(compact):
        return float(compact) if "." in compact else int(compact)

    try:
        return json.loads(raw, parse_constant=reject_json_constant)
    except ValueError:
        return raw


def path_segments(path: str) -> List[str]:
    return [segment for segment in path.split(".") if segment]


def set_deep_value(tree: Dict[str, Any], path: str, value: Any) -> None:
    """Set ``value`` at ``path``, creating intermediate sub-trees.

    A non-mapping value sitting on an intermediate segment is replaced with
    an empty sub-tree.
    """
    keys = path_segments(path)
    if not keys:
        return
    ref = tree
    for key in keys[:-1]:
        if not is_plain_object(ref.get(key)):
            ref[key] = {}
        ref = ref[key]
    ref[keys[-1]] = value


def _is_header(line: str) -> bool:
    cells = [cell.strip().lower() for cell in line.split(",")]
    return cells[:2] == ["path", "value"]


def parse_csv_overlay(text: str) -> Dict[str, Any]:
    """Parse CSV text into a knowledge tree; malformed rows are skipped."""
    lines = [line for line in re.split(r"\r?\n", text) if line]
    tree: Dict[str, Any] = {}
    if not lines:
        return tree

    start = 1 if _is_header(lines[0]) else 0
    for line in lines[start:]:
        row = split_csv_line(line)
        if row is None:
            continue
        path, raw_value = row
        if not path_segments(path):
            continue
        set_deep_value(tree, path, parse_value(raw_value))
    return tree
