"""
Configuration from environment variables.

Loading order:
1. .env.local (local development, highest priority)
2. .env (fallback)
3. System environment only

Variables:
    SEARCH_STOP_WORDS: Space-delimited stop words (default: none)
    SEARCH_PAGE_SIZE: Results per page in search responses (default: 2)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base path of the rotating log file (default: logs/search-server.log)
    PORT: HTTP port (default: 8080)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_env_files(root: Path = PROJECT_ROOT) -> None:
    """Load .env.local first, then .env; missing files are fine"""
    env_local = root / ".env.local"
    env_file = root / ".env"
    
    if env_local.exists():
        load_dotenv(env_local, override=True)
    elif env_file.exists():
        load_dotenv(env_file, override=True)


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class Settings:
    stop_words: str = ""
    page_size: int = 2
    log_level: str = "INFO"
    log_file: str = "logs/search-server.log"
    port: int = 8080
    
    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the current environment.
        
        Raises:
            ValueError: On non-integer or non-positive numeric values
        """
        page_size = _get_int("SEARCH_PAGE_SIZE", cls.page_size)
        if page_size <= 0:
            raise ValueError(f"SEARCH_PAGE_SIZE must be positive, got {page_size}")
        
        return cls(
            stop_words=os.getenv("SEARCH_STOP_WORDS", cls.stop_words),
            page_size=page_size,
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            log_file=os.getenv("LOG_FILE", cls.log_file),
            port=_get_int("PORT", cls.port),
        )
    
    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)
