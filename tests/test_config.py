from studio.config import get_settings

ENV_VARS = [
    "AI_GATEWAY_BASE_URL",
    "AI_GATEWAY_PATH",
    "AI_GATEWAY_API_KEY",
    "SUMMARY_MODEL",
    "IMAGE_MODEL",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
    "STUDIO_HOST",
    "STUDIO_PORT",
]


def test_settings_defaults(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.gateway_base_url == "https://ai.gateway.lovable.dev"
    assert settings.gateway_path == "/v1/chat/completions"
    assert settings.gateway_api_key is None
    assert settings.summary_model == "google/gemini-2.5-flash"
    assert settings.image_model == "google/gemini-2.5-flash-image-preview"
    assert settings.request_timeout == 60.0
    assert settings.log_level == "INFO"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000


def test_settings_overrides(monkeypatch):
    monkeypatch.setenv("AI_GATEWAY_BASE_URL", "http://example.com")
    monkeypatch.setenv("AI_GATEWAY_PATH", "/chat")
    monkeypatch.setenv("AI_GATEWAY_API_KEY", "secret")
    monkeypatch.setenv("SUMMARY_MODEL", "text-model")
    monkeypatch.setenv("IMAGE_MODEL", "image-model")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("STUDIO_HOST", "127.0.0.1")
    monkeypatch.setenv("STUDIO_PORT", "9000")

    settings = get_settings()

    assert settings.gateway_base_url == "http://example.com"
    assert settings.gateway_path == "/chat"
    assert settings.gateway_api_key == "secret"
    assert settings.summary_model == "text-model"
    assert settings.image_model == "image-model"
    assert settings.request_timeout == 12.0
    assert settings.log_level == "DEBUG"
    assert settings.host == "127.0.0.1"
    assert settings.port == 9000


def test_empty_api_key_is_unset(monkeypatch):
    monkeypatch.setenv("AI_GATEWAY_API_KEY", "")

    assert get_settings().gateway_api_key is None
