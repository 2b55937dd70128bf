"""
Runtime settings for Player Roster.

Settings are read from PR_* environment variables and validated with
pydantic. The CLI also installs a rich log handler from here.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console
from rich.logging import RichHandler

from player_roster.core.exceptions import ConfigurationError

DEFAULT_SLOT_KEY = "list"
DEFAULT_TRIGGER = "+"
# Upper bound on a single dynamic property string in the game host.
DEFAULT_MAX_SLOT_SIZE = 32767

ENV_VARS = {
    "slot_key": "PR_SLOT_KEY",
    "trigger": "PR_TRIGGER",
    "slot_file": "PR_SLOT_FILE",
    "max_slot_size": "PR_MAX_SLOT_SIZE",
    "log_level": "PR_LOG_LEVEL",
}


class RosterSettings(BaseModel):
    """Validated runtime settings."""

    slot_key: str = DEFAULT_SLOT_KEY
    trigger: str = DEFAULT_TRIGGER
    slot_file: Path = Field(default=Path("var/roster/slots.json"))
    max_slot_size: int = DEFAULT_MAX_SLOT_SIZE
    log_level: str = "WARNING"

    @field_validator("slot_key")
    @classmethod
    def _check_slot_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("slot key must not be empty")
        return value

    @field_validator("trigger")
    @classmethod
    def _check_trigger(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError("trigger must be a single non-whitespace character")
        return value

    @field_validator("max_slot_size")
    @classmethod
    def _check_max_slot_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max slot size must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, **overrides) -> "RosterSettings":
        """
        Build settings from PR_* environment variables.

        Explicit keyword overrides win over the environment. Invalid values
        raise ConfigurationError naming the offending variable.
        """
        values = {
            field: os.environ[env_var]
            for field, env_var in ENV_VARS.items()
            if env_var in os.environ
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else None
            raise ConfigurationError(
                f"Invalid setting: {first['msg']}",
                env_var=ENV_VARS.get(field) if field else None,
                config_key=field,
            ) from e


@lru_cache(maxsize=1)
def get_settings() -> RosterSettings:
    """Get the process-wide settings (cached)."""
    return RosterSettings.from_env()


def configure_logging(level: str = "WARNING") -> None:
    """Route log output through a rich console handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        ],
        force=True,
    )
