"""Shared helpers for reading package manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

PACKAGE_JSON = "package.json"


def load_package_json(root: Path) -> Dict[str, object]:
    """Return the parsed package.json contents or an empty dict."""
    package_json = Path(root) / PACKAGE_JSON
    if not package_json.is_file():
        return {}
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError):
        return {}
    if isinstance(data, dict):
        return data
    return {}


__all__ = ["PACKAGE_JSON", "load_package_json"]
