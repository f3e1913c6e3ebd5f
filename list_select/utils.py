import json
import os
from typing import Any, Iterable, List


def safe_call(func, *args, **kwargs):
    """Call a cosmetic UI helper, ignoring exceptions (focus, scroll, event.stop)."""
    try:
        return func(*args, **kwargs)
    except Exception:
        pass
    return None


def read_lines(stream: Iterable[str]) -> List[str]:
    """One item per non-blank line, trailing newline stripped."""
    out: List[str] = []
    for line in stream:
        line = line.rstrip("\r\n")
        if line.strip():
            out.append(line)
    return out


def load_items(path: str) -> List[Any]:
    """Load raw items from a file.

    - ``*.json``: a JSON array of strings and/or ``{"name": ..., "value": ...}`` objects
    - anything else: one item per non-blank line

    Raises ``ValueError`` for JSON that is not an array; validation of the
    individual entries happens when the catalog is built.
    """
    path = os.path.expanduser(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.lower().endswith(".json"):
            data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"{path}: expected a JSON array, got {type(data).__name__}")
            return data
        return list(read_lines(f))
