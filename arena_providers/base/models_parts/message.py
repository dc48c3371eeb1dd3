"""
ChatMessage DTO used across providers.

Defines the immutable `ChatMessage` dataclass and the `Role` literal for the
sender role. A conversation history is an ordered sequence of these values;
order is chronological and adapters must preserve it.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Literal, Tuple

# Message roles understood by the provider-agnostic contract.
Role = Literal["user", "assistant", "system"]

ROLES: Tuple[str, ...] = ("user", "assistant", "system")


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message.

    Attributes:
        role: The role of the message author (``"user"``, ``"assistant"`` or
            ``"system"``).
        content: Plain text content.

    Raises:
        ValueError: If ``role`` is not one of :data:`ROLES`.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unsupported message role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        """Return the ``{"role", "content"}`` mapping used on OpenAI-style wires."""
        return asdict(self)


__all__ = ["ChatMessage", "Role", "ROLES"]
