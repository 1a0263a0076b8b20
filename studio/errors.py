"""
Error values surfaced to callers as ``{"error": ...}`` envelopes.
"""
from __future__ import annotations


class StudioError(Exception):
    """Base class; carries the outward HTTP status and message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StudioError):
    """Required input missing or blank"""

    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field


class ConfigurationError(StudioError):
    """Gateway credential not configured"""


class UpstreamError(StudioError):
    """Gateway answered with a non-2xx status"""

    def __init__(self, status_code: int, raw_body: str, message: str | None = None) -> None:
        super().__init__(message or f"AI gateway error: {status_code}")
        self.upstream_status = status_code
        self.raw_body = raw_body


class UpstreamRateLimited(UpstreamError):
    """Gateway answered 402 or 429; the status is passed through."""

    MESSAGES = {
        429: "Rate limit exceeded. Please try again later.",
        402: "Payment required. Please add credits to continue.",
    }

    def __init__(self, status_code: int, raw_body: str) -> None:
        super().__init__(status_code, raw_body, self.MESSAGES[status_code])
        self.status_code = status_code


class EmptyResult(StudioError):
    """Gateway answered 2xx without usable content"""

    def __init__(self, kind: str) -> None:
        super().__init__(f"No {kind} generated")
        self.kind = kind


def upstream_error(status_code: int, raw_body: str) -> UpstreamError:
    if status_code in UpstreamRateLimited.MESSAGES:
        return UpstreamRateLimited(status_code, raw_body)
    return UpstreamError(status_code, raw_body)
