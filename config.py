# config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from paths import data_file


@dataclass(frozen=True)
class Settings:
    database_url: str
    allowed_origin: str
    environment: str
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    # Values from .env never override variables already set in the process
    load_dotenv()
    return Settings(
        database_url=_getenv("DATABASE_URL", f"sqlite:///{data_file('scaffolding.db')}"),
        allowed_origin=_getenv("ALLOWED_ORIGIN", "http://localhost:5173"),
        environment=_getenv("ENVIRONMENT", "development"),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )
