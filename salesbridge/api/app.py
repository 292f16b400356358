"""FastAPI application exposing the sales webhook."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from salesbridge.audit.logger import AuditLogger
from salesbridge.config import BridgeConfig
from salesbridge.ctm.client import CTMClient
from salesbridge.ga4.forwarder import GA4Forwarder
from salesbridge.webhook.handler import WebhookHandler

WEBHOOK_PATH = "/api/process-sales"


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    config = BridgeConfig.from_env()
    audit_log = os.environ.get("AUDIT_LOG_PATH")
    audit_logger = AuditLogger.from_env(audit_log) if audit_log else None
    return create_app(config, audit_logger)


def create_app(
    config: BridgeConfig,
    audit_logger: AuditLogger | None = None,
) -> FastAPI:
    """Create the webhook app with CTM and GA4 clients bound to config."""
    app = FastAPI(docs_url=None, redoc_url=None)
    handler = WebhookHandler(
        ctm_client=CTMClient(config),
        forwarder=GA4Forwarder(config),
        audit_logger=audit_logger,
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(WEBHOOK_PATH)
    async def process_sales(request: Request) -> Response:
        result = await handler.handle(await request.body())
        if result.body is None:
            return Response(status_code=result.status_code)
        return JSONResponse(result.body, status_code=result.status_code)

    return app
