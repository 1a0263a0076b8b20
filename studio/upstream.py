from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import Settings
from .errors import ConfigurationError, UpstreamError, upstream_error
from .models import ChatRequest
from .result import Result

logger = logging.getLogger(__name__)


class GatewayClient:
    """HTTP client wrapper for the AI gateway /chat/completions API.

    One POST per call and no retries; non-2xx answers come back as
    ``Result.err(UpstreamError)`` and transport failures propagate.
    """

    def __init__(
        self,
        base_url: str,
        path: str,
        api_key: str | None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = f"{base_url}{path}"
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayClient":
        return cls(
            settings.gateway_base_url,
            settings.gateway_path,
            settings.gateway_api_key,
            timeout=settings.request_timeout,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def check_configured(self) -> Result[None, ConfigurationError]:
        if not self.configured:
            return Result.err(ConfigurationError("AI_GATEWAY_API_KEY is not configured"))
        return Result.ok(None)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def complete(
        self, request: ChatRequest
    ) -> Result[dict[str, Any] | None, ConfigurationError | UpstreamError]:
        """Send a non-streaming completion request and return the parsed body.

        A 2xx answer that is not JSON comes back as ``None``, which the response
        mapping reports as nothing generated.
        """
        configured = self.check_configured()
        if configured.is_err:
            return Result.err(configured.error)

        payload = request.model_dump(exclude_none=True)
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            resp = await client.post(self._url, headers=self._headers(), json=payload)

        if not resp.is_success:
            logger.error("AI gateway error: %s %s", resp.status_code, resp.text)
            return Result.err(upstream_error(resp.status_code, resp.text))

        logger.info("AI response received")
        try:
            return Result.ok(resp.json())
        except ValueError:
            logger.warning("AI gateway returned a non-JSON body (%d bytes)", len(resp.content))
            return Result.ok(None)
