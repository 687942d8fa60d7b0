"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

from .consts import ENV_PREFIX, INTERNAL_NAMES
from .models import TieBreak


class Config(BaseSettings):
    """Suggestion engine settings, overridable through DIDYOUMEAN_* variables."""

    model_config = ConfigDict(env_prefix=ENV_PREFIX, case_sensitive=False, extra="ignore")
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    tie_break: TieBreak = Field(
        default=TieBreak.DISCOVERY,
        description="Ordering of candidates sharing the minimum distance",
    )
    include_reserved: bool = Field(
        default=True,
        description="Offer builtin and keyword names in the default scope",
    )
    excluded_names: list[str] = Field(
        default_factory=list, description="Extra names that are never suggested"
    )

    @property
    def all_excluded_names(self) -> frozenset[str]:
        """Configured exclusions plus the package's own plumbing names."""
        return INTERNAL_NAMES | frozenset(self.excluded_names)


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Configure logging for command-line runs."""
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger("didyoumean")
