from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./jobly.db"
    create_tables_on_startup: bool = True

    # CORS (comma-separated extra origins)
    allowed_origins: str = ""

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
