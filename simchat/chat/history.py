"""Role-tagged chat transcript."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

__all__ = ["ChatHistory", "DISPLAY_WINDOW", "Message", "Role"]

DISPLAY_WINDOW = 6


class Role(str, Enum):
    """Author of a chat message, valued by its wire name."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

    @property
    def prefix(self) -> str:
        """Label shown in front of the message in the transcript."""
        return _PREFIXES[self]


_PREFIXES = {
    Role.USER: "You: ",
    Role.ASSISTANT: "LLM: ",
    Role.SYSTEM: "",
}


@dataclass(frozen=True, slots=True)
class Message:
    """Single immutable transcript entry."""

    role: Role
    content: str

    @classmethod
    def user(cls, content: str) -> Message:
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        return cls(Role.ASSISTANT, content)

    @classmethod
    def system(cls, content: str) -> Message:
        return cls(Role.SYSTEM, content)

    def to_request(self) -> dict[str, str]:
        """Return the ``{"role", "content"}`` mapping sent to the backend."""
        return {"role": self.role.value, "content": self.content}

    def display_text(self) -> str:
        return f"{self.role.prefix}{self.content}"


class ChatHistory:
    """Append-only ordered log of :class:`Message` objects."""

    __slots__ = ("_messages",)

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._messages: list[Message] = list(messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def snapshot(self) -> tuple[Message, ...]:
        """Return an immutable copy safe to hand to another thread."""
        return tuple(self._messages)

    def tail(self, count: int) -> tuple[Message, ...]:
        """Return the last *count* messages in their original order."""
        if count <= 0:
            return ()
        return tuple(self._messages[-count:])

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None
