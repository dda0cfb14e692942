"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str
    CANDIDATES_TABLE: str = "candidates"

    # HTTP Basic credentials
    API_USERNAME: str
    API_PASSWORD: str

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Reference timezone for "today"
    TIMEZONE: str = "UTC"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore[call-arg]
