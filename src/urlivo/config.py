"""src/urlivo/config.py

Settings configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    URL handling settings.

    Values not passed explicitly are read from ``URLIVO_*`` environment
    variables, e.g. ``URLIVO_BASE_DIRECTORY=/app/``.

    Attributes:
        base_directory: Directory the application is mounted under,
            with leading and trailing slash.
        absolute: Build absolute URLs by default.
        default_language: Language used when the host does not name one.
    """

    base_directory: str = Field(
        default="/",
        description="Directory the application is mounted under",
    )
    absolute: bool = False
    default_language: str = "en"

    model_config = SettingsConfigDict(
        env_prefix="URLIVO_",
        extra="ignore",
    )
