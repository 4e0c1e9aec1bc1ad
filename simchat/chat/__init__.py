"""Chat session state: history, command parsing and the session controller."""

from .commands import ChatCommand, parse_command
from .history import ChatHistory, Message, Role

__all__ = ["ChatCommand", "ChatHistory", "Message", "Role", "parse_command"]
