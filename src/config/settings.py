"""
Yahtzee Scorekeeper - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from src.engine.base import GameRules

logger = logging.getLogger(__name__)

_SECRET_KEYS = (
    "YAHTZEE_DEBUG",
    "YAHTZEE_LOG_LEVEL",
    "YAHTZEE_MAX_PLAYERS",
    "YAHTZEE_RETAIN_ROSTER_ON_RESET",
    "YAHTZEE_FULL_HOUSE_ALLOWS_FIVE_OF_A_KIND",
    "YAHTZEE_YAHTZEE_BONUS_ENABLED",
    "YAHTZEE_YAHTZEE_BONUS_VALUE",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No streamlit install or no secrets.toml: environment only
        logger.debug("Streamlit secrets unavailable, using environment only")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # House rules
    max_players: int = Field(default=6, ge=2)
    retain_roster_on_reset: bool = True
    full_house_allows_five_of_a_kind: bool = False
    yahtzee_bonus_enabled: bool = False
    yahtzee_bonus_value: int = Field(default=100, ge=0)

    model_config = {
        "env_prefix": "YAHTZEE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def game_rules(self) -> GameRules:
        """House rules for a new session."""
        return GameRules(
            max_players=self.max_players,
            retain_roster_on_reset=self.retain_roster_on_reset,
            full_house_allows_five_of_a_kind=self.full_house_allows_five_of_a_kind,
            yahtzee_bonus_enabled=self.yahtzee_bonus_enabled,
            yahtzee_bonus_value=self.yahtzee_bonus_value,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
