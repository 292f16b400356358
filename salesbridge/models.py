"""Shared Pydantic data models for salesbridge."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---


class AuditEventType(str, Enum):
    CONVERSION_REJECTED = "conversion_rejected"
    CONVERSION_SKIPPED = "conversion_skipped"
    CONVERSION_FORWARDED = "conversion_forwarded"
    CONVERSION_FAILED = "conversion_failed"


# --- Attribution Models ---


class Attribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str | None = None
    medium: str | None = None
    campaign: str | None = None


# --- Audit Models ---


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class AuditEvent(BaseModel):
    timestamp: str = Field(default_factory=_now_iso)
    event_type: AuditEventType
    action: str
    result: str  # "success" | "skipped" | "rejected" | "error"
    status_code: int
    details: dict[str, object] | None = None
