
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vendor Portal API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"
    max_upload_size_mb: int = 10

    # Database (SQLite for local dev, any async SQLAlchemy URL in production)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendor_portal.db",
        alias="DATABASE_URL",
    )
    auto_create_schema: bool = Field(
        default=True, alias="AUTO_CREATE_SCHEMA",
    )  # create missing tables on startup; use Alembic outside local dev

    # Document storage
    upload_dir: Path = Field(default=Path("./uploads"), alias="UPLOAD_DIR")

    # Auth
    secret_key: str = Field(default="change-me-in-production", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 8, alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Dashboard clients re-fetch stats at this interval
    dashboard_refresh_seconds: int = Field(default=30, alias="DASHBOARD_REFRESH_SECONDS")

    # Outgoing mail (formatted and logged only)
    mail_sender: str = Field(default="Vendor Management Team", alias="MAIL_SENDER")
    support_email: str = Field(default="support@vendor-portal.local", alias="SUPPORT_EMAIL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
