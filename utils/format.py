"""
Formatting helpers for client-facing error payloads.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Flatten pydantic error dicts into ``"field: message, field: message"``.

    The leading ``body`` segment FastAPI adds to request-body locations is
    dropped so the field names match the JSON the client sent.
    """
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return ", ".join(parts)
