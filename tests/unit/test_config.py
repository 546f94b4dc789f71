from booker.config import Settings, get_settings
from booker.infrastructure.http.retry import RetryPolicy


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("BOOKER_BASE_URL", "BOOKER_MAX_RETRIES", "BOOKER_RETRY_DELAY_MS", "BOOKER_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.base_url == "https://restful-booker.herokuapp.com"
        assert settings.max_retries == 3
        assert settings.retry_delay_ms == 1000
        assert settings.log_dir is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BOOKER_BASE_URL", "http://localhost:3001")
        monkeypatch.setenv("BOOKER_MAX_RETRIES", "5")
        monkeypatch.setenv("BOOKER_RETRY_DELAY_MS", "250")

        settings = Settings(_env_file=None)
        policy = RetryPolicy.from_settings(settings)

        assert settings.base_url == "http://localhost:3001"
        assert policy.max_attempts == 6
        assert policy.base_delay == 0.25

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
