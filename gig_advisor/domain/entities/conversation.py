"""
Domain entities for the client-side conversation transcript.
Zero external dependencies, pure Python only.

Turns live only in memory for the lifetime of one conversation; nothing here is
ever synchronised to a server-side store.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

REACTIONS = ("👍", "👎", "❓")


class SenderRole(str, Enum):
    USER = "user"
    BOT = "bot"


@dataclass
class ConversationTurn:
    text: str
    sender_role: SenderRole
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    reactions: list[str] = field(default_factory=list)


class Conversation:
    """Ordered transcript of turns with the user-initiated edit actions."""

    def __init__(self) -> None:
        self._turns: list[ConversationTurn] = []

    @property
    def turns(self) -> list[ConversationTurn]:
        return list(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def add(self, text: str, sender_role: SenderRole) -> ConversationTurn:
        turn = ConversationTurn(text=text, sender_role=sender_role)
        self._turns.append(turn)
        return turn

    def get(self, turn_id: str) -> Optional[ConversationTurn]:
        return next((t for t in self._turns if t.id == turn_id), None)

    def delete(self, turn_id: str) -> bool:
        turn = self.get(turn_id)
        if turn is None:
            return False
        self._turns.remove(turn)
        return True

    def edit(self, turn_id: str) -> Optional[str]:
        """Remove the turn and hand its text back for re-editing.

        Returns None if no turn has *turn_id*.
        """
        turn = self.get(turn_id)
        if turn is None:
            return None
        self._turns.remove(turn)
        return turn.text

    def react(self, turn_id: str, reaction: str) -> ConversationTurn:
        """Append a reaction marker to the turn's text.

        Raises:
            ValueError: if *reaction* is not one of REACTIONS.
            KeyError:   if no turn has *turn_id*.
        """
        if reaction not in REACTIONS:
            raise ValueError(f"Unsupported reaction: {reaction!r}")
        turn = self.get(turn_id)
        if turn is None:
            raise KeyError(turn_id)
        turn.reactions.append(reaction)
        turn.text += f" [{reaction}]"
        return turn

    def clear(self) -> None:
        self._turns.clear()
