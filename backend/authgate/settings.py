from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    title: str
    api_prefix: str
    log_level: str


def get_settings() -> Settings:
    return Settings(
        title=os.environ.get("APP_TITLE", "Auth Gate"),
        api_prefix=os.environ.get("API_PREFIX", "/api/auth").rstrip("/"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )


def setup_logging(log_level: str) -> None:
    """Install a single console handler on the root logger."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(console)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
