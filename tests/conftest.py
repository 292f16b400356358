"""Shared test fixtures for salesbridge."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from salesbridge.audit.logger import AuditLogger
from salesbridge.config import BridgeConfig
from salesbridge.models import AuditEvent, AuditEventType


@pytest.fixture
def bridge_config() -> BridgeConfig:
    return make_bridge_config()


@pytest.fixture
def mock_audit_logger() -> MagicMock:
    return MagicMock(spec=AuditLogger)


# --- Factory functions for test data ---


def make_bridge_config(**kwargs: Any) -> BridgeConfig:
    """Factory for BridgeConfig with sensible defaults."""
    defaults: dict[str, Any] = {
        "ga4_measurement_id": "G-TEST123",
        "ga4_api_secret": "test-secret",
        "ctm_auth_string": "dGVzdDp0ZXN0",
        "ctm_account_id": "540774",
    }
    defaults.update(kwargs)
    return BridgeConfig(**defaults)


def make_webhook_payload(**kwargs: Any) -> dict[str, Any]:
    """Factory for an inbound sale notification body."""
    defaults: dict[str, Any] = {
        "phoneNumber": "+1 (555) 123-4567",
        "transactionId": "TX-1001",
        "totalAmountExcludingTax": 249.99,
    }
    defaults.update(kwargs)
    return defaults


def make_call(
    source: str | None = None,
    medium: str | None = None,
    campaign: str | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """Factory for a CTM call record; a paid block is added when source is set."""
    call: dict[str, Any] = {
        "id": 1,
        "called_at": "2026-01-01 10:00 AM -05:00",
    }
    if source is not None:
        paid: dict[str, Any] = {"source": source, "medium": medium}
        if campaign is not None:
            paid["campaign"] = campaign
        call["paid"] = paid
    call.update(kwargs)
    return call


def make_audit_event(**kwargs: Any) -> AuditEvent:
    """Factory for AuditEvent with sensible defaults."""
    defaults: dict[str, Any] = {
        "event_type": AuditEventType.CONVERSION_FORWARDED,
        "action": "process_sale",
        "result": "success",
        "status_code": 200,
    }
    defaults.update(kwargs)
    return AuditEvent(**defaults)


def make_http_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str | None = None,
    url: str = "https://example.test",
) -> httpx.Response:
    """Factory for a real httpx.Response bound to a request, so raise_for_status works."""
    request = httpx.Request("POST", url)
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


def mock_async_client(mock_client_cls: MagicMock) -> AsyncMock:
    """Wire a patched httpx.AsyncClient class to return an async context manager."""
    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client
