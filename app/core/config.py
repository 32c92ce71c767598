# app/core/config.py

from pydantic_settings import BaseSettings
from pathlib import Path
from functools import lru_cache


class Settings(BaseSettings):
    # --- PROJECT ---
    PROJECT_NAME: str = "Freight Quote API"
    LOG_LEVEL: str = "INFO"

    # --- POSTGRES ---
    # Optional: without a host the service runs on the local SQLite file
    POSTGRES_USER: str | None = None
    POSTGRES_PASS: str | None = None
    POSTGRES_PORT: int = 5432
    POSTGRES_NAME: str | None = None
    POSTGRES_HOST: str | None = None

    # --- DATABASE ---
    DATABASE_URL: str = "sqlite:///./freight_quotes.db"

    # --- PATHS ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    MEDIA_DIR: Path = BASE_DIR / "media"
    RATES_DIR: Path = MEDIA_DIR / "rates"

    # --- PRICING ---
    BASE_CURRENCY: str = "XOF"
    PLATFORM_NAME: str = "NextMove Platform"
    SYNTHETIC_FALLBACK_ENABLED: bool = True
    RANDOM_REPUTATION_ENABLED: bool = True
    REPUTATION_SEED: int | None = None

    # --- FX ---
    FX_RATES_URL: str = "https://open.er-api.com/v6/latest/XOF"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def model_post_init(self, __context):
        if self.POSTGRES_HOST:
            self.DATABASE_URL = (
                f"postgresql://{self.POSTGRES_USER}:"
                f"{self.POSTGRES_PASS}@"
                f"{self.POSTGRES_HOST}:"
                f"{self.POSTGRES_PORT}/"
                f"{self.POSTGRES_NAME}"
            )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
