# pizza_crm/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    All values have defaults; override via env vars or `.env`:
      - LOG_LEVEL (DEBUG | INFO | WARNING | ...)
      - CORS_ORIGINS (JSON list)
      - SEED_DEMO_DATA: load the demo menu, roster and orders on startup
      - STRICT_COURIER_ASSIGNMENT: refuse assigning a courier that is
        already busy on another order (off by default)
    """

    PROJECT_NAME: str = "Pizza CRM API"
    API_V1_STR: str = "/api/v1"

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    SEED_DEMO_DATA: bool = True
    STRICT_COURIER_ASSIGNMENT: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Settings are read once per process; routers and `main` share
    the same instance.
    """
    return Settings()
