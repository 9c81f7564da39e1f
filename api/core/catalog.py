"""
Static endpoint catalogue served by `GET /api`.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

ENDPOINTS_PATH = Path(__file__).with_name("endpoints.json")


@lru_cache(maxsize=1)
def endpoints() -> dict[str, Any]:
    with ENDPOINTS_PATH.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise RuntimeError(f"Endpoint catalogue must be a JSON object: {ENDPOINTS_PATH}")
    return data
