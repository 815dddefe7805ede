"""Centralized JSON serialization for converted dumps.

Keys keep insertion order so record fields come out as id, name, display.
"""

import json
from typing import Any, Optional


def ordered_dumps(obj: Any, indent: Optional[int] = None) -> str:
    """
    JSON serialization for converter output.

    Rules:
    - UTF-8 text (no ASCII escaping)
    - Keys in insertion order (never sorted)
    - Compact separators (",", ":") unless indent is given
    - Tuples render as arrays

    Args:
        obj: Python object to serialize
        indent: Pretty-print indent width, or None for compact output

    Returns:
        JSON string
    """
    if indent is None:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(obj, indent=indent, ensure_ascii=False)
