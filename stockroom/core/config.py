
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Stockroom", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    app_port: int = Field(default=8000, alias="APP_PORT")

    # Database (SQLite for local dev; any async SQLAlchemy URL works)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./stockroom.db",
        alias="DATABASE_URL",
    )
    db_echo: bool = Field(default=False, alias="DB_ECHO")
    db_auto_create: bool = Field(
        default=True, alias="DB_AUTO_CREATE",
    )  # create_all on startup; turn off when running Alembic migrations

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
