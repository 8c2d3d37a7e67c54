"""Application settings.

Values come from environment variables prefixed with KYC_ (for example
KYC_DEFAULT_KYC_VERSION=v2) or a .env file in the working directory.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models import KycVersion

# Resolve the data/ directory relative to this file so the server works
# regardless of which directory uvicorn is launched from.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Runtime configuration for the KYC decision service."""

    model_config = SettingsConfigDict(
        env_prefix="KYC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Payments Ops KYC Decision API"
    data_dir: Path = DEFAULT_DATA_DIR
    default_kyc_version: KycVersion = "v1"
    log_level: str = "INFO"
    search_fuzzy_threshold: int = 80
    default_page_size: int = 10


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
