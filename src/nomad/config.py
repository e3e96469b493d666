from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    """

    # Catalog store. The demo catalog lives in an in-memory SQLite database that is
    # rebuilt from static data on every startup, so nothing survives a restart.
    database_url: str = "sqlite+aiosqlite:///:memory:"
    db_echo: bool = False  # Log all SQL statements (True for debugging)

    # Artificial latency for the mock backend calls (seconds)
    catalog_delay_seconds: float = 0.5
    hotel_detail_delay_seconds: float = 0.3
    auth_delay_seconds: float = 1.0
    booking_delay_seconds: float = 0.0

    page_size: int = 10  # Hotels per search results page

    # Open booking wizards older than this are treated as abandoned
    wizard_ttl_seconds: float = 1800.0

    # Map tiles are optional; without a key the map degrades to a placeholder
    maps_api_key: str | None = None

    # The only account the mock login accepts
    demo_login_email: str = "user@example.com"
    demo_login_password: str = "password"

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
