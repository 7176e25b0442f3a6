# -*- coding: utf-8 -*-
import json
from typing import Any, Mapping, Tuple

_MISSING = object()


def dot_get(data: Any, path: str) -> Tuple[bool, Any]:
    """
    Dot-path getter for nested dictionaries and lists.
    Returns (found, value); numeric segments index into lists.
    """
    cur: Any = data
    for p in path.split("."):
        if isinstance(cur, Mapping):
            cur = cur.get(p, _MISSING)
        elif isinstance(cur, list) and p.isascii() and p.isdecimal():
            idx = int(p)
            cur = cur[idx] if idx < len(cur) else _MISSING
        else:
            return False, None
        if cur is _MISSING:
            return False, None
    return True, cur


def stringify(value: Any) -> str:
    """
    Render a JSON value as message text.
    Strings pass through, null becomes "", everything else is compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
