# users_api/shared/config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "users-api"
    APP_VERSION: str = "1.0.0"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    # Prefix for the resource routers, e.g. "/api". Empty mounts /users at the root.
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["*"]

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "users-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    @property
    def docs_enabled(self) -> bool:
        return self.APP_ENV != AppEnv.PRODUCTION

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
