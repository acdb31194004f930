"""
Runtime settings for termsnake, read from the environment.

A .env file in the working directory is honoured via python-dotenv.
Gameplay itself is not configurable; these settings only cover
diagnostics.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.

    Returns None for unset or blank values.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    seed: Optional[int] = None


def load_settings() -> Settings:
    """
    Build Settings from TERMSNAKE_LOG_LEVEL, TERMSNAKE_LOG_FILE and TERMSNAKE_SEED.

    Raises:
        ValueError: TERMSNAKE_LOG_LEVEL is not a logging level name, or
            TERMSNAKE_SEED is set but is not an integer.
    """
    log_level = (_sanitize_env_value(os.getenv("TERMSNAKE_LOG_LEVEL")) or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"TERMSNAKE_LOG_LEVEL must be a logging level name, got {log_level!r}")

    log_file = _sanitize_env_value(os.getenv("TERMSNAKE_LOG_FILE"))

    raw_seed = _sanitize_env_value(os.getenv("TERMSNAKE_SEED"))
    seed = None
    if raw_seed is not None:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"TERMSNAKE_SEED must be an integer, got {raw_seed!r}") from None

    return Settings(log_level=log_level, log_file=log_file, seed=seed)
