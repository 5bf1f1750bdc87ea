"""Unit tests for settings loaded from the environment."""

from infrastructure.settings import DEFAULT_BASE_URL, get_settings


def test_defaults(monkeypatch):
    for name in ("KSP_BASE_URL", "KSP_HTTP_TIMEOUT", "KSP_TASKS_PATH", "KSP_SESSION_COOKIE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.http_timeout is None
    assert settings.tasks_path == "/tasks.json"
    assert settings.session_cookie is None
    assert settings.log_level == "INFO"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("KSP_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("KSP_SESSION_COOKIE", "ksp_session=abc")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.http_timeout == 5.0
    assert settings.session_cookie == "ksp_session=abc"
    assert settings.log_level == "DEBUG"
