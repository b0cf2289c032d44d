"""JSON helpers."""

import json
from pathlib import Path
from typing import Any


def to_json(obj: Any) -> str:
    """Serialise ``obj`` compactly; return "" for None or unserialisable values."""
    if obj is None:
        return ""
    try:
        text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return ""
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def read_maps(path: str | Path, maps: dict) -> dict:
    """Read a JSON object from ``path`` and merge it into ``maps``.

    Raises OSError when the file cannot be read and ValueError when it
    does not hold a JSON object. Returns ``maps``.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = json.loads(text)
    if data is None:
        return maps
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object in {path}")
    maps.update(data)
    return maps