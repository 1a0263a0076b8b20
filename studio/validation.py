from __future__ import annotations

from typing import Any, get_args

from .errors import ValidationError
from .models import ImageRequest, SummarizeRequest, SummaryLength
from .result import Result

LENGTHS = get_args(SummaryLength)


def _required_str(body: Any, field: str) -> str | None:
    if not isinstance(body, dict):
        return None
    value = body.get(field)
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def validate_summarize(body: Any) -> Result[SummarizeRequest, ValidationError]:
    text = _required_str(body, "text")
    if text is None:
        return Result.err(ValidationError("text"))

    length = body.get("length")
    if length not in LENGTHS:
        length = "medium"
    return Result.ok(SummarizeRequest(text=text, length=length))


def validate_image(body: Any) -> Result[ImageRequest, ValidationError]:
    prompt = _required_str(body, "prompt")
    if prompt is None:
        return Result.err(ValidationError("prompt"))
    return Result.ok(ImageRequest(prompt=prompt))
