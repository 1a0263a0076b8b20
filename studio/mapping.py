from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pydantic

from .errors import EmptyResult, StudioError
from .models import (
    ChatResponse,
    ChoiceMessage,
    ErrorEnvelope,
    ImageEnvelope,
    SummaryEnvelope,
)
from .result import Result


@dataclass(frozen=True)
class Envelope:
    status_code: int
    body: dict[str, Any]


def _first_message(data: Any) -> ChoiceMessage | None:
    try:
        return ChatResponse.model_validate(data).first_message()
    except pydantic.ValidationError:
        return None


def _first_image_url(message: ChoiceMessage | None) -> str | None:
    if message is None or not message.images:
        return None
    image_url = message.images[0].image_url
    return image_url.url if image_url else None


def extract_summary(data: Any) -> Result[SummaryEnvelope, EmptyResult]:
    message = _first_message(data)
    if message is None or not message.content:
        return Result.err(EmptyResult("summary"))
    return Result.ok(SummaryEnvelope(summary=message.content))


def extract_image(data: Any) -> Result[ImageEnvelope, EmptyResult]:
    url = _first_image_url(_first_message(data))
    if not url:
        return Result.err(EmptyResult("image"))
    return Result.ok(ImageEnvelope(image=url))


def error_envelope(error: StudioError) -> Envelope:
    return Envelope(error.status_code, ErrorEnvelope(error=error.message).model_dump())


def to_envelope(result: Result[pydantic.BaseModel, StudioError]) -> Envelope:
    """Collapse a processing result into the outward status and JSON body."""
    if result.is_err:
        return error_envelope(result.error)
    return Envelope(200, result.value.model_dump())
