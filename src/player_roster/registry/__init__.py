"""
Player Roster Registry Module.

Provides the persisted list of registered player names.
"""

__all__ = [
    "RegistryStore",
    "LoadResult",
    "SaveResult",
    "SlotOutcome",
]

from player_roster.registry.store import (
    LoadResult,
    RegistryStore,
    SaveResult,
    SlotOutcome,
)
