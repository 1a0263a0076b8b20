"""
Request processing for the two proxy endpoints.

Each handler runs validation, gateway call and response mapping in order,
stopping at the first error result. Exceptions raised along the way are left
to the HTTP layer.
"""
from __future__ import annotations

import logging
from typing import Any

from .mapping import Envelope, extract_image, extract_summary, to_envelope
from .prompts import build_image_request, build_summary_request
from .upstream import GatewayClient
from .validation import validate_image, validate_summarize

logger = logging.getLogger(__name__)


async def summarize_text(body: Any, gateway: GatewayClient, model: str) -> Envelope:
    validated = validate_summarize(body)
    if validated.is_err:
        return to_envelope(validated)
    req = validated.value

    logger.info(
        "Summarizing text with length: %s (%d characters)", req.length, len(req.text)
    )
    completion = await gateway.complete(
        build_summary_request(req.text, req.length, model)
    )
    if completion.is_err:
        return to_envelope(completion)

    return to_envelope(extract_summary(completion.value))


async def generate_image(body: Any, gateway: GatewayClient, model: str) -> Envelope:
    validated = validate_image(body)
    if validated.is_err:
        return to_envelope(validated)
    req = validated.value

    logger.info("Generating image for prompt (%d characters)", len(req.prompt))
    completion = await gateway.complete(build_image_request(req.prompt, model))
    if completion.is_err:
        return to_envelope(completion)

    return to_envelope(extract_image(completion.value))
