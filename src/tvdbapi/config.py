"""Configuration management module."""
import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from tvdbapi.transport import DEFAULT_TIMEOUT
from tvdbapi.urls import BASE_URL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = BASE_URL
    language: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT


def _read_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid TVDB_TIMEOUT {raw!r}, using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"TVDB_TIMEOUT must be positive, using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Variables from a ``.env`` file are loaded first without overriding ones
    already set in the process environment.

    Args:
        env_file: Path to a .env file. Defaults to searching from the current directory.
    """
    if env_file is not None:
        env_file = os.path.expanduser(env_file)
        if os.path.exists(env_file):
            load_dotenv(env_file)
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv()

    base_url = os.getenv("TVDB_BASE_URL") or BASE_URL
    if not base_url.endswith("/"):
        base_url += "/"

    return Settings(
        api_key=os.getenv("TVDB_API_KEY", "").strip(),
        base_url=base_url,
        language=os.getenv("TVDB_LANGUAGE") or None,
        timeout=_read_timeout(os.getenv("TVDB_TIMEOUT")),
    )
