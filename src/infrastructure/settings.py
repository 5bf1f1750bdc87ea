"""Application settings loaded from the environment."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

DEFAULT_BASE_URL = "https://ksp.mff.cuni.cz"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    base_url: str = DEFAULT_BASE_URL
    http_timeout: float | None = None
    tasks_path: str = "/tasks.json"
    session_cookie: str | None = None
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from environment variables (and a .env file, if present)."""
    load_dotenv()

    timeout = os.getenv("KSP_HTTP_TIMEOUT")

    return Settings(
        base_url=os.getenv("KSP_BASE_URL", DEFAULT_BASE_URL),
        http_timeout=float(timeout) if timeout else None,
        tasks_path=os.getenv("KSP_TASKS_PATH", "/tasks.json"),
        session_cookie=os.getenv("KSP_SESSION_COOKIE") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
