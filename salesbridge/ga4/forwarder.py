"""GA4 Measurement Protocol forwarder for phone purchases."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from salesbridge.config import BridgeConfig
from salesbridge.models import Attribution

logger = logging.getLogger(__name__)

_GA4_COLLECT_URL = "https://www.google-analytics.com/mp/collect"
_CLIENT_ID_PREFIX = "12345678."
_EVENT_NAME = "phone_purchase"
_CURRENCY = "USD"
_UNKNOWN = "unknown"


def generate_client_id() -> str:
    """Timestamp-derived pseudo client id. Every event gets a fresh one."""
    return f"{_CLIENT_ID_PREFIX}{int(time.time() * 1000)}"


class GA4Forwarder:
    """Sends purchase events to the GA4 collection endpoint."""

    def __init__(self, config: BridgeConfig) -> None:
        self._params = {
            "measurement_id": config.ga4_measurement_id,
            "api_secret": config.ga4_api_secret,
        }

    def build_event(
        self,
        transaction_id: Any,
        revenue: Any,
        attribution: Attribution,
    ) -> dict[str, Any]:
        """Build the Measurement Protocol body. Absent transaction id or revenue is left out."""
        params: dict[str, Any] = {
            "transaction_id": transaction_id,
            "value": revenue,
            "currency": _CURRENCY,
            "source": attribution.source or _UNKNOWN,
            "medium": attribution.medium or _UNKNOWN,
            "campaign": attribution.campaign or _UNKNOWN,
        }
        return {
            "client_id": generate_client_id(),
            "events": [
                {
                    "name": _EVENT_NAME,
                    "params": {k: v for k, v in params.items() if v is not None},
                },
            ],
        }

    async def send_purchase(
        self,
        transaction_id: Any,
        revenue: Any,
        attribution: Attribution,
    ) -> httpx.Response:
        """POST a phone_purchase event and return the GA4 response.

        Transport errors and non-2xx answers are logged and re-raised.
        """
        payload = self.build_event(transaction_id, revenue, attribution)
        headers = {"Content-Type": "application/json"}

        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    _GA4_COLLECT_URL, params=self._params, json=payload, headers=headers,
                )
                resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error sending data to GA4: %s", e)
            raise

        return resp
