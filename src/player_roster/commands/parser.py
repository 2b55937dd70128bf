"""Chat line parsing."""

from dataclasses import dataclass

from player_roster.config import DEFAULT_TRIGGER
from player_roster.host.runtime import Player


@dataclass(frozen=True)
class CommandInvocation:
    """One parsed command line, tied to the player who sent it."""

    verb: str
    args: tuple[str, ...]
    actor: Player

    @property
    def name_arg(self) -> str | None:
        """First argument, or None when the command has none."""
        return self.args[0] if self.args else None


def is_command(line: str, trigger: str = DEFAULT_TRIGGER) -> bool:
    """True if the line is addressed to the router rather than to chat."""
    return line.strip().startswith(trigger)


def parse_line(
    line: str, actor: Player, trigger: str = DEFAULT_TRIGGER
) -> CommandInvocation | None:
    """
    Split a command line into verb and arguments.

    Returns None for ordinary chat. The verb is lowercased; arguments are
    passed through untouched. A bare trigger yields an empty verb.
    """
    if not is_command(line, trigger):
        return None

    tokens = line.strip()[len(trigger):].split()
    if not tokens:
        return CommandInvocation(verb="", args=(), actor=actor)
    return CommandInvocation(verb=tokens[0].lower(), args=tuple(tokens[1:]), actor=actor)
