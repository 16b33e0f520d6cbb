from app.core.config import Settings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DB_PATH", "/tmp/barberia.sqlite3")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("APP_TIMEZONE", "America/Bogota")
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC123")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "token")
    monkeypatch.setenv("TWILIO_WHATSAPP_FROM", "whatsapp:+14155238886")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = Settings.from_env()

    assert settings.db_path == "/tmp/barberia.sqlite3"
    assert settings.db_pool_size == 3
    assert settings.timezone == "America/Bogota"
    assert settings.twilio_configured is True
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_settings_defaults(monkeypatch):
    for key in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_WHATSAPP_FROM", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()

    assert settings.twilio_configured is False
    assert settings.cors_origins == ["http://localhost:3000", "http://localhost:8080"]
