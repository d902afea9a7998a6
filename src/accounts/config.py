"""Application configuration with structured settings groups."""
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class CorsSettings(BaseModel):
    """
    Cross-origin settings for browser front-ends.

    allowed_origins: Comma-separated list of origins. Empty allows every origin.
    """

    allowed_origins: str = ""

    @property
    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables use double underscore as delimiter for nested values.
    Example: CORS__ALLOWED_ORIGINS=https://app.example.com,https://admin.example.com
    """

    # Application metadata
    app_name: str = "Customer Accounts API"
    app_version: str = "1.0.0"

    # "development" exposes underlying error messages in 5xx responses
    environment: str = "production"
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/customers"
    database_echo: bool = False

    # Nested settings groups
    cors: CorsSettings = CorsSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == DEVELOPMENT

