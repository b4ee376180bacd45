"""Runtime configuration read from environment variables."""
import os
from pathlib import Path


def database_url() -> str:
    return os.getenv("DATABASE_URL", "sqlite:///expenses.db")


def preferences_path() -> Path:
    return Path(os.getenv("PREFERENCES_PATH", "preferences.json"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def seed_sample_data() -> bool:
    """Whether to insert demo expenses on first launch."""
    return os.getenv("SEED_SAMPLE_DATA", "1").strip().lower() not in {"0", "false", "no", "off"}
