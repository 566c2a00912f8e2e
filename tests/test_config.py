"""Tests for Settings loaded from the environment."""

from dinero.core.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "SQL_ECHO", "LOG_LEVEL", "PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///./dinero.db"
        assert settings.sql_echo is False
        assert settings.port == 3000
        assert settings.cors_origins_list == ["http://localhost:3000"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("SQL_ECHO", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite://"
        assert settings.sql_echo is True
        assert settings.log_level == "DEBUG"
        assert settings.port == 8080
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
