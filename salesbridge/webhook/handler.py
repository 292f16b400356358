"""Sales webhook handler.

Runs one sale notification through the attribution pipeline:

1. Parse and validate the inbound payload
2. Look up the phone number in the CTM call log
3. Resolve source/medium/campaign from the first attributed call
4. Forward a phone_purchase event to GA4
5. Audit log the outcome

Phone numbers with no CTM match are skipped silently with a 204.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from salesbridge.attribution.resolver import resolve_attribution
from salesbridge.models import AuditEvent, AuditEventType
from salesbridge.webhook.models import WebhookPayload, WebhookResponse

if TYPE_CHECKING:
    from salesbridge.audit.logger import AuditLogger
    from salesbridge.ctm.client import CTMClient
    from salesbridge.ga4.forwarder import GA4Forwarder

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Data successfully sent to GA4"
NO_PHONE_MESSAGE = "No phone number found"
SERVER_ERROR_MESSAGE = "Internal Server Error"


class WebhookHandler:
    """Orchestrates CTM lookup, attribution and GA4 forwarding for one sale."""

    def __init__(
        self,
        ctm_client: CTMClient,
        forwarder: GA4Forwarder,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self._ctm = ctm_client
        self._forwarder = forwarder
        self._audit = audit_logger

    async def handle(self, raw_body: bytes) -> WebhookResponse:
        """Process a raw webhook body and map the outcome to a response."""
        try:
            return await self._process(raw_body)
        except Exception as e:
            logger.exception("Error processing webhook: %s", e)
            return self._respond(
                WebhookResponse(
                    status_code=500,
                    body={"message": SERVER_ERROR_MESSAGE, "error": str(e)},
                ),
                AuditEventType.CONVERSION_FAILED,
                "error",
                {"error": str(e)},
            )

    async def _process(self, raw_body: bytes) -> WebhookResponse:
        data: Any = json.loads(raw_body)
        logger.info("Received webhook data: %s", data)

        # Stage 1: Validation
        if not isinstance(data, dict) or not data.get("phoneNumber"):
            logger.info("No phone number found. Skipping.")
            return self._respond(
                WebhookResponse(status_code=404, body={"message": NO_PHONE_MESSAGE}),
                AuditEventType.CONVERSION_REJECTED,
                "rejected",
            )
        payload = WebhookPayload.model_validate(data)

        # Stage 2: CTM lookup
        calls = await self._ctm.search_calls(payload.phone_number)
        logger.info("CTM data: %s", calls)
        if not calls:
            logger.info("No matching phone number in CTM. Skipping.")
            return self._respond(
                WebhookResponse(status_code=204),
                AuditEventType.CONVERSION_SKIPPED,
                "skipped",
                {"transaction_id": payload.transaction_id},
            )

        # Stage 3: Attribution
        attribution = resolve_attribution(calls)

        # Stage 4: Forward to GA4
        ga4_response = await self._forwarder.send_purchase(
            payload.transaction_id, payload.revenue, attribution,
        )
        logger.info("GA4 response status: %s", ga4_response.status_code)

        return self._respond(
            WebhookResponse(
                status_code=200,
                body={"message": SUCCESS_MESSAGE, "ga4Status": ga4_response.status_code},
            ),
            AuditEventType.CONVERSION_FORWARDED,
            "success",
            {
                "transaction_id": payload.transaction_id,
                "source": attribution.source,
                "medium": attribution.medium,
                "campaign": attribution.campaign,
                "ga4_status": ga4_response.status_code,
            },
        )

    def _respond(
        self,
        response: WebhookResponse,
        event_type: AuditEventType,
        result: str,
        details: dict[str, Any] | None = None,
    ) -> WebhookResponse:
        # Stage 5: Audit log. A failed write never changes the HTTP outcome.
        if self._audit:
            try:
                self._audit.log(AuditEvent(
                    event_type=event_type,
                    action="process_sale",
                    result=result,
                    status_code=response.status_code,
                    details=details,
                ))
            except Exception:
                logger.exception("Failed to write audit event %s", event_type.value)
        return response
