"""Application configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # App settings
    app_name: str = "Valorant Companion"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Snapshot data written by the game-data sync
    data_dir: Path = Path(
        os.getenv("COMPANION_DATA_DIR", "~/.companion/data")
    ).expanduser()

    # Session state (default user, bookmarks, prompt history)
    config_dir: Path = Path(
        os.getenv("COMPANION_CONFIG_DIR", "~/.companion")
    ).expanduser()

    # Load manager settings
    load_max_retries: int = int(os.getenv("LOAD_MAX_RETRIES", "2"))
    load_base_delay: float = float(os.getenv("LOAD_BASE_DELAY", "0.5"))
    load_max_delay: float = float(os.getenv("LOAD_MAX_DELAY", "5.0"))

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
