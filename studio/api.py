from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from . import handlers
from .config import Settings, get_settings
from .mapping import Envelope
from .upstream import GatewayClient

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# Every method is answered with an envelope, OPTIONS as preflight.
ENDPOINT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

Handler = Callable[[Any, GatewayClient, str], Awaitable[Envelope]]


async def _read_body(request: Request) -> Any:
    # Unparseable bodies are validated like empty ones.
    try:
        return await request.json()
    except ValueError:
        return None


def _preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


async def _respond(
    name: str, handler: Handler, request: Request, gateway: GatewayClient, model: str
) -> JSONResponse:
    try:
        body = await _read_body(request)
        envelope = await handler(body, gateway, model)
    except Exception as exc:
        logger.exception("Error in %s handler", name)
        envelope = Envelope(500, {"error": str(exc) or "Unknown error"})
    else:
        if envelope.status_code >= 500:
            logger.error("%s failed: %s", name, envelope.body.get("error"))
    return JSONResponse(envelope.body, status_code=envelope.status_code, headers=CORS_HEADERS)


def create_app(
    gateway_client: GatewayClient | None = None, settings: Settings | None = None
) -> FastAPI:
    settings = settings or get_settings()
    gateway = gateway_client or GatewayClient.from_settings(settings)
    app = FastAPI()

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok", "scope": "studio"}

    @app.api_route("/summarize-text", methods=ENDPOINT_METHODS)
    async def summarize_text(request: Request):
        if request.method == "OPTIONS":
            return _preflight()
        return await _respond(
            "summarize-text", handlers.summarize_text, request, gateway, settings.summary_model
        )

    @app.api_route("/generate-image", methods=ENDPOINT_METHODS)
    async def generate_image(request: Request):
        if request.method == "OPTIONS":
            return _preflight()
        return await _respond(
            "generate-image", handlers.generate_image, request, gateway, settings.image_model
        )

    return app
