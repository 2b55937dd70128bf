"""
Command Router - maps chat commands onto registry operations.

Dispatch is stateless: every command line is parsed, routed to one
handler, and answered with exactly one private reply to the sender.
"""

import logging
from typing import Callable

from player_roster.commands.parser import CommandInvocation, parse_line
from player_roster.config import DEFAULT_TRIGGER
from player_roster.host.runtime import ChatSendEvent, Player
from player_roster.registry.store import RegistryStore

logger = logging.getLogger(__name__)
console = logging.getLogger("player_roster.console")

Handler = Callable[[CommandInvocation], str]

HELP_TEMPLATE = """[DB COMMANDS]
{t}set <player>     - add a player
{t}get <player>     - check a player
{t}del <player>     - remove a player
{t}list             - list all players
{t}clear            - remove all players
{t}json             - show the database JSON"""

USAGE = {
    "set": "Usage: {t}set <player>",
    "get": "Usage: {t}get <player>",
    "del": "Usage: {t}del <player>",
}

MSG_ALREADY_REGISTERED = "Player {name} is already registered"
MSG_ADDED = "Added player {name}"
MSG_FOUND = "Found player {name}"
MSG_NOT_FOUND = "Player {name} not found"
MSG_DELETED = "Deleted player {name}"
MSG_DELETE_MISSING = "Player not found"
MSG_LIST = "All players: {names}"
MSG_LIST_EMPTY = "No players registered"
MSG_CLEARED = "Cleared all players"
MSG_JSON = "Database JSON has been written to the console"
MSG_UNKNOWN = "Command not found"


class CommandRouter:
    """Routes parsed commands to RegistryStore operations."""

    def __init__(self, store: RegistryStore, trigger: str = DEFAULT_TRIGGER):
        self.store = store
        self.trigger = trigger
        self._handlers: dict[str, Handler] = {
            "help": self._help,
            "set": self._set,
            "get": self._get,
            "del": self._del,
            "list": self._list,
            "clear": self._clear,
            "json": self._json,
        }

    @property
    def verbs(self) -> list[str]:
        return list(self._handlers)

    def reply_for(self, invocation: CommandInvocation) -> str:
        """Run the command and return the reply text without sending it."""
        handler = self._handlers.get(invocation.verb.lower())
        if handler is None:
            return MSG_UNKNOWN

        if invocation.verb.lower() in USAGE and invocation.name_arg is None:
            return USAGE[invocation.verb.lower()].format(t=self.trigger)

        return handler(invocation)

    def execute(self, invocation: CommandInvocation) -> str:
        """Run the command and send the reply to the issuing player."""
        reply = self.reply_for(invocation)
        invocation.actor.send_message(reply)
        return reply

    def handle_line(self, line: str, actor: Player) -> str | None:
        """Parse and execute a raw line. Returns None for ordinary chat."""
        invocation = parse_line(line, actor, self.trigger)
        if invocation is None:
            return None
        return self.execute(invocation)

    def on_chat_send(self, event: ChatSendEvent) -> None:
        """
        Pre-delivery chat hook.

        Command lines from players are cancelled so other players never see
        them, then executed. Anything else passes through untouched.
        """
        if not isinstance(event.sender, Player):
            return

        invocation = parse_line(event.message, event.sender, self.trigger)
        if invocation is None:
            return

        event.cancel = True
        logger.debug(f"{event.sender.name} ran '{invocation.verb}' {list(invocation.args)}")
        self.execute(invocation)

    def _help(self, invocation: CommandInvocation) -> str:
        return HELP_TEMPLATE.format(t=self.trigger)

    def _set(self, invocation: CommandInvocation) -> str:
        name = invocation.name_arg
        if self.store.has(name):
            return MSG_ALREADY_REGISTERED.format(name=name)
        self.store.add(name)
        return MSG_ADDED.format(name=name)

    def _get(self, invocation: CommandInvocation) -> str:
        name = invocation.name_arg
        if self.store.has(name):
            return MSG_FOUND.format(name=name)
        return MSG_NOT_FOUND.format(name=name)

    def _del(self, invocation: CommandInvocation) -> str:
        name = invocation.name_arg
        if not self.store.has(name):
            return MSG_DELETE_MISSING
        self.store.delete(name)
        return MSG_DELETED.format(name=name)

    def _list(self, invocation: CommandInvocation) -> str:
        names = self.store.list()
        if not names:
            return MSG_LIST_EMPTY
        return MSG_LIST.format(names=", ".join(names))

    def _clear(self, invocation: CommandInvocation) -> str:
        self.store.clear()
        return MSG_CLEARED

    def _json(self, invocation: CommandInvocation) -> str:
        console.warning(f"Database JSON: {self.store.dump_json()}")
        return MSG_JSON
