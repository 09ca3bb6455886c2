"""Shared test helpers."""

from typing import Any
from unittest.mock import MagicMock


def make_response(status_code: int = 200, payload: Any = None) -> MagicMock:
    """httpx-like response mock with ``status_code`` and ``json()``.

    An exception ``payload`` is raised from ``json()`` (malformed body).
    """
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


def holder_rows(percentages: list[float], prefix: str = "0xholder") -> list[dict[str, Any]]:
    return [
        {"holder": f"{prefix}{i:034d}", "percentage": str(pct), "amount": "1"}
        for i, pct in enumerate(percentages)
    ]
