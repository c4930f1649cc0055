"""Tests for environment-driven settings."""

from surfjournal.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("MOCK_MODE", raising=False)
        monkeypatch.delenv("DEBUG_MOCK", raising=False)

        settings = Settings(_env_file=None)

        assert settings.mock_mode is True
        assert settings.debug_mock is False
        assert settings.cache_ttl_seconds == 300
        assert settings.api_prefix == "/api"

    def test_environment_overrides_switches(self, monkeypatch) -> None:
        monkeypatch.setenv("MOCK_MODE", "false")
        monkeypatch.setenv("DEBUG_MOCK", "true")

        settings = Settings(_env_file=None)

        assert settings.mock_mode is False
        assert settings.debug_mock is True

    def test_session_users_from_json(self, monkeypatch) -> None:
        monkeypatch.setenv(
            "SESSION_USERS",
            '{"t0k3n": {"id": 2, "name": "Rafael", "email": "r@surf.test", "role": "admin"}}',
        )

        user = Settings(_env_file=None).session_users["t0k3n"]

        assert user.id == 2
        assert user.is_admin

    def test_development_flag(self) -> None:
        assert Settings(_env_file=None, environment="development").is_development
        assert not Settings(_env_file=None, environment="production").is_development
