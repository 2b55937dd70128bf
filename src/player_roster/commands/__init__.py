"""
Player Roster Commands Module.

Parses trigger-prefixed chat lines and routes them to the registry.
"""

__all__ = [
    "CommandInvocation",
    "CommandRouter",
    "is_command",
    "parse_line",
]

from player_roster.commands.parser import CommandInvocation, is_command, parse_line
from player_roster.commands.router import CommandRouter
