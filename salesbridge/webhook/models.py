"""Data models for the sales webhook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookPayload(BaseModel):
    """Inbound sale notification.

    Only the phone number is typed; the transaction id and revenue are
    passed through to GA4 exactly as received.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    phone_number: str | None = Field(default=None, alias="phoneNumber")
    transaction_id: Any = Field(default=None, alias="transactionId")
    revenue: Any = Field(default=None, alias="totalAmountExcludingTax")


@dataclass
class WebhookResponse:
    """Handler outcome. A body of None means the response carries no content."""

    status_code: int
    body: dict[str, Any] | None = None
