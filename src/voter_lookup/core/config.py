"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote store (Firebase Realtime Database)
    firebase_database_url: str = Field(
        description="Realtime Database root URL (e.g. https://my-roll.firebaseio.com)",
    )
    firebase_auth_token: str | None = Field(
        default=None,
        description="Database secret or ID token sent as the ``auth`` query parameter",
    )
    store_timeout: float = Field(
        default=10.0,
        description="Remote store request timeout in seconds",
        gt=0,
    )

    @field_validator("firebase_database_url")
    @classmethod
    def validate_firebase_database_url(cls, v: str) -> str:
        if not v.startswith("https://"):
            msg = "firebase_database_url must use HTTPS"
            raise ValueError(msg)
        return v.rstrip("/")

    # Search
    record_batch_size: int = Field(
        default=10,
        description="Voter records fetched concurrently per batch",
        gt=0,
    )
    voter_id_scan_limit: int = Field(
        default=10,
        description="Maximum matches returned by the voter ID substring fallback",
        gt=0,
    )
    search_result_limit: int = Field(
        default=50,
        description="Maximum voter IDs assembled for a single name search",
        gt=0,
    )

    # Transliteration
    transliteration_words_file: str | None = Field(
        default=None,
        description="Optional JSON file of extra Latin -> Devanagari word mappings",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
