"""Tests for application settings."""

from config.settings import Settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Test the stock configuration."""
        for name in ["AMMOSCOUT_CATALOG_PATH", "AMMOSCOUT_CATALOG_API_URL", "AMMOSCOUT_AFFILIATE_BASE"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.site_name == "AmmoScout"
        assert settings.affiliate_base == "https://example-affiliate.com/redirect?url="
        assert settings.page_size == 6
        assert settings.load_delay_seconds == 0.4
        assert settings.export_filename == "ammoscout_export.csv"
        assert settings.catalog_path is None
        assert settings.catalog_api_url is None

    def test_environment(self, monkeypatch):
        """Test missing values are read from the environment."""
        monkeypatch.setenv("AMMOSCOUT_CATALOG_PATH", "/srv/catalog.csv")
        monkeypatch.setenv("AMMOSCOUT_AFFILIATE_BASE", "https://aff.example/r?url=")

        settings = Settings()

        assert settings.catalog_path == "/srv/catalog.csv"
        assert settings.affiliate_base == "https://aff.example/r?url="

    def test_explicit_values_win(self, monkeypatch):
        """Test explicit arguments override the environment."""
        monkeypatch.setenv("AMMOSCOUT_CATALOG_PATH", "/srv/catalog.csv")
        assert Settings(catalog_path="local.csv").catalog_path == "local.csv"
