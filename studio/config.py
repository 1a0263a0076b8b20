from __future__ import annotations

from dataclasses import dataclass
import os


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    return value if value is not None else default


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value is not None else default


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value is not None else default


@dataclass(frozen=True)
class Settings:
    gateway_base_url: str
    gateway_path: str
    gateway_api_key: str | None
    summary_model: str
    image_model: str
    request_timeout: float
    log_level: str
    host: str
    port: int


def get_settings() -> Settings:
    # An empty key is treated the same as a missing one.
    api_key = _get_env("AI_GATEWAY_API_KEY") or None

    return Settings(
        gateway_base_url=_get_env("AI_GATEWAY_BASE_URL", "https://ai.gateway.lovable.dev"),
        gateway_path=_get_env("AI_GATEWAY_PATH", "/v1/chat/completions"),
        gateway_api_key=api_key,
        summary_model=_get_env("SUMMARY_MODEL", "google/gemini-2.5-flash"),
        image_model=_get_env("IMAGE_MODEL", "google/gemini-2.5-flash-image-preview"),
        request_timeout=_get_float("REQUEST_TIMEOUT", 60.0),
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
        host=_get_env("STUDIO_HOST", "0.0.0.0"),
        port=_get_int("STUDIO_PORT", 8000),
    )
