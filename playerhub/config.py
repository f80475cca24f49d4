"""
Service configuration, read from the environment (.env supported via python-dotenv).
"""
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    # JSON file replacing the built-in category table
    completion_categories_file: Optional[str] = None
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def parse_log_level(value: Optional[str]) -> str:
    """Known logging level name, or INFO with a warning for anything else."""
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName returns an int only for registered level names
    if isinstance(logging.getLevelName(level), int):
        return level
    logger.warning(f"Unknown LOG_LEVEL {value!r}, falling back to {DEFAULT_LOG_LEVEL}")
    return DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    load_dotenv()
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        log_level=parse_log_level(os.getenv("LOG_LEVEL")),
        completion_categories_file=os.getenv("COMPLETION_CATEGORIES_FILE") or None,
        api_prefix=os.getenv("API_PREFIX", "/api/v1"),
        cors_origins=origins or ["*"],
    )
