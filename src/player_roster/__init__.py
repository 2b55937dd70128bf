"""
Player Roster - a chat-driven player registry for a game scripting host.

Keeps one persisted list of player names, answers trigger-prefixed chat
commands, and registers players automatically when they join.
"""

__version__ = "0.1.0"

__all__ = []
