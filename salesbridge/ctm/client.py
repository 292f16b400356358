"""CallTrackingMetrics call search client."""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from salesbridge.config import BridgeConfig

logger = logging.getLogger(__name__)

_CTM_API_BASE = "https://api.calltrackingmetrics.com/api/v1"
_NON_DIGITS = re.compile(r"\D")


def normalize_phone_number(phone_number: str) -> str:
    """Strip every non-digit character: '+1 (555) 123-4567' -> '15551234567'."""
    return _NON_DIGITS.sub("", phone_number)


class CTMClient:
    """Looks up calls by contact number in the CTM call log."""

    def __init__(self, config: BridgeConfig) -> None:
        self._auth_string = config.ctm_auth_string
        self._search_url = (
            f"{_CTM_API_BASE}/accounts/{config.ctm_account_id}/calls/search.json"
        )

    def build_search_request(self, phone_number: str) -> dict[str, str]:
        contact_number = normalize_phone_number(phone_number)
        return {
            "filter": f'contact_number:"{contact_number}"',
            "sort_by": "call_started_at",
            "sort_order": "asc",
        }

    async def search_calls(self, phone_number: str) -> list[dict[str, Any]] | None:
        """Return calls for the phone number, oldest first.

        Returns None when CTM answers without a calls list, or when the
        request fails. Failures are logged and never raised.
        """
        headers = {"Authorization": f"Basic {self._auth_string}"}
        body = self.build_search_request(phone_number)

        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(self._search_url, json=body, headers=headers)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Error searching phone number in CTM: %s", e.response.text or str(e),
            )
            return None
        except httpx.HTTPError as e:
            logger.error("Error searching phone number in CTM: %s", e)
            return None

        try:
            data = resp.json()
        except ValueError:
            return None

        if not isinstance(data, dict):
            return None
        calls = data.get("calls")
        if not isinstance(calls, list):
            return None
        return calls
