"""Response error extraction for load test observability.

Handles the error shapes the Storefront API answers with:

- Request validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Cart rules (400/404/500): {"error": "msg"}
- Protean validation (400): {"error": {"field": ["msg"]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Return a compact, human-readable message from an API error response."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body.get("detail"), list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    error = body.get("error")
    if isinstance(error, dict):
        return " | ".join(f"{field}: {msgs}" for field, msgs in error.items())
    if error is not None:
        return str(error)

    return str(body)[:300]
