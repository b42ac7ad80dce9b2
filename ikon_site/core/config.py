# ikon_site/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Ikon Property Group"
    ENV: str = "dev"

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./ikon_site.db")  # e.g. postgresql+psycopg://...
    CREATE_TABLES_ON_STARTUP: bool = True  # dev convenience; use alembic in prod

    # Sessions (flash messages + CSRF on the contact form)
    SECRET_KEY: str = "change-me-in-prod"

    # API routing table
    API_PREFIX: str = "/api"

    LOG_LEVEL: str = "INFO"

    # comma separated, "*" allows all
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if "*" in self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
