"""Tests for configuration module."""

from clinic_app.config import Settings, get_settings


class TestSettings:
    """Test Settings configuration."""

    def test_default_settings(self):
        """Test default settings values."""
        settings = Settings(_env_file=None, ENVIRONMENT="development")
        assert settings.app_name == "Clinic Registry API"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.sqlite_path == "MedicalApp.db"
        assert settings.is_development is True
        assert settings.is_production is False

    def test_environment_is_case_insensitive(self):
        """Test production detection ignores case."""
        assert Settings(_env_file=None, ENVIRONMENT="Production").is_production is True

    def test_cors_origins_split(self):
        """Test CORS origins are parsed from a comma separated string."""
        settings = Settings(
            _env_file=None, CORS_ORIGINS="http://a.example, http://b.example,,"
        )
        assert settings.cors_origins == ["http://a.example", "http://b.example"]

    def test_get_settings_cached(self):
        """Test settings are cached."""
        assert get_settings() is get_settings()
