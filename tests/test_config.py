"""
Tests for environment-driven settings.
"""

from gpxviewer.config import Settings


class TestCorsOrigins:
    """GPXVIEWER_CORS_ORIGINS is a comma-separated list."""

    def test_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("GPXVIEWER_CORS_ORIGINS", "http://a.com, http://b.com")
        assert Settings(_env_file=None).cors_origins == ["http://a.com", "http://b.com"]

    def test_single_origin_env(self, monkeypatch):
        monkeypatch.setenv("GPXVIEWER_CORS_ORIGINS", "http://a.com")
        assert Settings(_env_file=None).cors_origins == ["http://a.com"]

    def test_default(self, monkeypatch):
        monkeypatch.delenv("GPXVIEWER_CORS_ORIGINS", raising=False)
        assert Settings(_env_file=None).cors_origins == [
            "http://localhost:5173",
            "http://localhost:3000",
        ]

    def test_list_passed_directly(self):
        settings = Settings(_env_file=None, cors_origins=["http://c.com"])
        assert settings.cors_origins == ["http://c.com"]


class TestUrlFetch:
    def test_off_by_default(self, monkeypatch):
        monkeypatch.delenv("GPXVIEWER_ALLOW_URL_FETCH", raising=False)
        assert Settings(_env_file=None).allow_url_fetch is False

    def test_enabled_from_env(self, monkeypatch):
        monkeypatch.setenv("GPXVIEWER_ALLOW_URL_FETCH", "true")
        assert Settings(_env_file=None).allow_url_fetch is True
