"""
Tests for settings loading.
"""

from eansearch.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.api_token_str is None
        assert settings.ean_search_api_url == "https://api.ean-search.org/api"
        assert settings.ean_search_language == 1
        assert settings.log_format == "text"

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("EAN_SEARCH_API_TOKEN", "abc123")
        settings = Settings()
        assert settings.api_token_str == "abc123"
        assert "abc123" not in repr(settings)

    def test_token_from_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("EAN_SEARCH_API_TOKEN=from-file\nUNRELATED=1\n")
        assert Settings().api_token_str == "from-file"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
