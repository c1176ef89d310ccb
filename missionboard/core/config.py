# missionboard/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment
    model_config = SettingsConfigDict(extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    # --- Database URLs ---
    DATABASE_URL_PROD: str = ""
    DATABASE_URL_LOCAL: str = "sqlite:///./missionboard.db"

    # --- Auth ---
    # Tokens are issued by the identity provider and only verified here.
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"

    # --- HTTP ---
    # Comma-separated list of allowed frontend origins
    CORS_ORIGINS: str = "http://localhost:3000"
    RATE_LIMIT_ENABLED: bool = True
    PUBLIC_REGISTRATION_RATE_LIMIT: str = "10/minute"

    # --- Runtime ---
    LOG_LEVEL: str = "INFO"
    # Create tables on startup instead of running Alembic (local dev only)
    AUTO_CREATE_TABLES: bool = False

    @property
    def DATABASE_URL(self) -> str:
        return (
            self.DATABASE_URL_LOCAL if self.ENV == "local" else self.DATABASE_URL_PROD
        )

    def get_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


# Create a single instance of the settings
settings = Settings()
