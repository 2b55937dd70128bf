"""
Player Roster Core Module.

Provides the exception hierarchy shared by all components.
"""

__all__ = [
    "RosterError",
    "SlotError",
    "SlotWriteError",
    "SlotCapacityError",
    "ConfigurationError",
]

from player_roster.core.exceptions import (
    ConfigurationError,
    RosterError,
    SlotCapacityError,
    SlotError,
    SlotWriteError,
)
