"""tests/unit/test_config.py"""

import pytest
from pydantic import ValidationError

from urlivo.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove URLIVO_* variables of the surrounding environment."""
    for name in ("URLIVO_BASE_DIRECTORY", "URLIVO_ABSOLUTE", "URLIVO_DEFAULT_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()
        assert settings.base_directory == "/"
        assert settings.absolute is False
        assert settings.default_language == "en"

    def test_env_values(self, monkeypatch):
        """Test every variable is read from the environment."""
        monkeypatch.setenv("URLIVO_BASE_DIRECTORY", "/app/")
        monkeypatch.setenv("URLIVO_ABSOLUTE", "true")
        monkeypatch.setenv("URLIVO_DEFAULT_LANGUAGE", "de")
        monkeypatch.setenv("UNRELATED", "x")
        assert Settings() == Settings(
            base_directory="/app/", absolute=True, default_language="de"
        )

    @pytest.mark.parametrize(
        "value, expected",
        [("1", True), ("YES", True), ("on", True), ("0", False), ("off", False)],
    )
    def test_env_absolute_flag(self, monkeypatch, value, expected):
        """Test boolean parsing of URLIVO_ABSOLUTE."""
        monkeypatch.setenv("URLIVO_ABSOLUTE", value)
        assert Settings().absolute is expected

    def test_env_invalid_flag(self, monkeypatch):
        """Test a value that is not a boolean is rejected."""
        monkeypatch.setenv("URLIVO_ABSOLUTE", "maybe")
        with pytest.raises(ValidationError):
            Settings()

    def test_arguments_override_env(self, monkeypatch):
        """Test explicit values win over the environment."""
        monkeypatch.setenv("URLIVO_BASE_DIRECTORY", "/shop/")
        assert Settings(base_directory="/app/").base_directory == "/app/"
