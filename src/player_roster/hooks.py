"""
Host wiring - auto-registration and event subscriptions.

install() builds the store and router for a host runtime, subscribes the
chat and spawn handlers, and queues the one-time sweep over players who
were already connected when the script loaded.
"""

import logging
from dataclasses import dataclass

from player_roster.commands.router import CommandRouter
from player_roster.config import RosterSettings, get_settings
from player_roster.host.runtime import HostRuntime, Player, PlayerSpawnEvent
from player_roster.registry.store import RegistryStore

logger = logging.getLogger(__name__)

MSG_WELCOME = "Welcome {name} to the registry"
MSG_SWEEP_ADDED = "You have been added to the registry"


class AutoRegistrar:
    """Registers players the first time they are seen."""

    def __init__(self, store: RegistryStore):
        self.store = store

    def _register(self, player: Player, message: str) -> bool:
        if self.store.has(player.name):
            return False
        self.store.add(player.name)
        player.send_message(message)
        logger.info(f"Auto-registered player {player.name}")
        return True

    def on_player_spawn(self, event: PlayerSpawnEvent) -> None:
        """Register on initial spawn only; respawns are ignored."""
        if not event.initial_spawn or not isinstance(event.player, Player):
            return
        self._register(event.player, MSG_WELCOME.format(name=event.player.name))

    def sweep(self, players: list[Player]) -> list[str]:
        """Register every unknown player in the list. Returns the names added."""
        added = []
        for player in players:
            if not isinstance(player, Player):
                continue
            if self._register(player, MSG_SWEEP_ADDED):
                added.append(player.name)
        return added


@dataclass
class RosterApp:
    """Components wired into a host runtime."""

    runtime: HostRuntime
    store: RegistryStore
    router: CommandRouter
    registrar: AutoRegistrar

    def uninstall(self) -> None:
        """Detach the handlers from the runtime."""
        self.runtime.before_chat_send.unsubscribe(self.router.on_chat_send)
        self.runtime.after_player_spawn.unsubscribe(self.registrar.on_player_spawn)


def install(runtime: HostRuntime, settings: RosterSettings | None = None) -> RosterApp:
    """Attach the roster to a host runtime and queue the startup sweep."""
    settings = settings or get_settings()
    store = RegistryStore(runtime.slots, key=settings.slot_key)
    router = CommandRouter(store, trigger=settings.trigger)
    registrar = AutoRegistrar(store)

    runtime.before_chat_send.subscribe(router.on_chat_send)
    runtime.after_player_spawn.subscribe(registrar.on_player_spawn)
    runtime.run(lambda: registrar.sweep(runtime.get_players()))

    return RosterApp(runtime=runtime, store=store, router=router, registrar=registrar)
