"""
In-process host runtime.

Models the parts of the game scripting host the roster depends on:
entities and players with private messaging, a cancelable chat-send
event, a player-spawn event, a run-once job queue and the world slot
storage. Everything runs on the caller's thread, one event at a time.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

from player_roster.host.slots import MemorySlotBackend, SlotBackend

logger = logging.getLogger(__name__)

EventCallback = Callable[[Any], None]


@dataclass(eq=False)
class Entity:
    """Any actor in the world that can send chat."""

    name: str


@dataclass(eq=False)
class Player(Entity):
    """A connected player. Messages sent to the player land in its inbox."""

    messages: list[str] = field(default_factory=list)

    def send_message(self, text: str) -> None:
        """Deliver a private message to this player."""
        self.messages.append(text)


@dataclass
class ChatSendEvent:
    """Chat message about to be delivered. Set cancel to suppress delivery."""

    sender: Entity
    message: str
    cancel: bool = False


@dataclass
class PlayerSpawnEvent:
    """A player entered the world, either on join or after a respawn."""

    player: Player
    initial_spawn: bool


class EventSignal:
    """Ordered subscriber list for one event type."""

    def __init__(self, name: str):
        self.name = name
        self._callbacks: list[EventCallback] = []

    def subscribe(self, callback: EventCallback) -> EventCallback:
        """Register a callback. Returns it so the method works as a decorator."""
        self._callbacks.append(callback)
        return callback

    def unsubscribe(self, callback: EventCallback) -> None:
        """Remove a previously registered callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, event: Any) -> Any:
        """Invoke every subscriber in order and return the event."""
        for callback in list(self._callbacks):
            callback(event)
        return event

    def __len__(self) -> int:
        return len(self._callbacks)


class HostRuntime:
    """
    Single-threaded world host.

    Event delivery is synchronous: emit() returns only after every
    subscriber has finished, so handlers never overlap.
    """

    def __init__(self, slots: SlotBackend | None = None):
        self.slots = slots or MemorySlotBackend()
        self.before_chat_send = EventSignal("before_chat_send")
        self.after_player_spawn = EventSignal("after_player_spawn")
        self.chat_log: list[tuple[str, str]] = []
        self._players: dict[str, Player] = {}
        self._jobs: deque[Callable[[], None]] = deque()

    def get_players(self) -> list[Player]:
        """Currently connected players, in join order."""
        return list(self._players.values())

    def connect(self, player: Player) -> Player:
        """Add a player to the world without emitting a spawn event."""
        self._players[player.name] = player
        return player

    def disconnect(self, player: Player) -> None:
        self._players.pop(player.name, None)

    def join(self, player: Player) -> PlayerSpawnEvent:
        """Connect a player and emit its initial spawn."""
        self.connect(player)
        return self.after_player_spawn.emit(PlayerSpawnEvent(player, initial_spawn=True))

    def respawn(self, player: Player) -> PlayerSpawnEvent:
        """Emit a non-initial spawn for an already connected player."""
        return self.after_player_spawn.emit(PlayerSpawnEvent(player, initial_spawn=False))

    def send_chat(self, sender: Entity, message: str) -> ChatSendEvent:
        """
        Run the pre-delivery chat event, then deliver unless cancelled.

        Delivered lines are appended to chat_log as (sender name, message).
        """
        event = self.before_chat_send.emit(ChatSendEvent(sender, message))
        if not event.cancel:
            self.chat_log.append((sender.name, event.message))
        return event

    def run(self, callback: Callable[[], None]) -> None:
        """Queue a job to run on the next tick."""
        self._jobs.append(callback)

    def tick(self) -> int:
        """Run all queued jobs in order. Returns the number executed."""
        count = 0
        while self._jobs:
            job = self._jobs.popleft()
            job()
            count += 1
        if count:
            logger.debug(f"Tick executed {count} queued job(s)")
        return count
