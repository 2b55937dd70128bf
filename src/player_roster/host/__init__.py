"""
Player Roster Host Module.

In-process stand-in for the game scripting host: slot storage, players,
chat and spawn events, and the run-once job queue.
"""

__all__ = [
    "SlotBackend",
    "MemorySlotBackend",
    "FileSlotBackend",
    "Entity",
    "Player",
    "ChatSendEvent",
    "PlayerSpawnEvent",
    "EventSignal",
    "HostRuntime",
]

from player_roster.host.runtime import (
    ChatSendEvent,
    Entity,
    EventSignal,
    HostRuntime,
    Player,
    PlayerSpawnEvent,
)
from player_roster.host.slots import FileSlotBackend, MemorySlotBackend, SlotBackend
