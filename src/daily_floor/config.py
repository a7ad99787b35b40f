"""Environment-driven configuration for the Daily Floor core."""

import logging
import os
import random
from datetime import tzinfo
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from daily_floor.errors import ConfigError
from daily_floor.utils.dates import get_timezone

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Runtime settings read from DAILY_FLOOR_* environment variables."""

    timezone: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def get_tzinfo(self) -> Optional[tzinfo]:
        """Timezone for today/now computations, None meaning host local time."""
        try:
            return get_timezone(self.timezone)
        except ValueError as err:
            raise ConfigError(str(err)) from err

    def get_rng(self) -> random.Random:
        """Random source for exercise selection, seeded when a seed is configured."""
        return random.Random(self.seed)


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build settings from the environment.

    Loads a .env file first (without overriding variables already set).

    Args:
        env_file: Optional path to a .env file

    Returns:
        The resolved settings
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv()

    seed_raw = os.environ.get("DAILY_FLOOR_SEED")
    seed = None
    if seed_raw:
        try:
            seed = int(seed_raw)
        except ValueError as err:
            raise ConfigError(f"DAILY_FLOOR_SEED must be an integer, got {seed_raw!r}") from err

    log_level = os.environ.get("DAILY_FLOOR_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown DAILY_FLOOR_LOG_LEVEL: {log_level}")

    settings = Settings(
        timezone=os.environ.get("DAILY_FLOOR_TIMEZONE") or None,
        seed=seed,
        log_level=log_level,
    )
    # Fail early on a bad zone name
    settings.get_tzinfo()
    return settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for applications embedding the core."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
