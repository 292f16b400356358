"""Marketing attribution from CTM call records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from salesbridge.models import Attribution


def _paid_data(call: Any) -> dict[str, Any] | None:
    if not isinstance(call, dict):
        return None
    paid = call.get("paid")
    return paid if isinstance(paid, dict) else None


def resolve_attribution(calls: Sequence[Any] | None) -> Attribution:
    """Return the attribution of the first call carrying a paid source.

    Calls are scanned in the given order (CTM returns them oldest first), so
    the earliest attributed call wins. A missing or empty campaign becomes
    None. No qualifying call yields an attribution with every field None.
    """
    if not calls:
        return Attribution()

    for call in calls:
        paid = _paid_data(call)
        if paid and paid.get("source"):
            return Attribution(
                source=paid["source"],
                medium=paid.get("medium"),
                campaign=paid.get("campaign") or None,
            )

    return Attribution()
