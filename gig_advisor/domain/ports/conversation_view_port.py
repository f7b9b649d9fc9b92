"""
Port (interface) for rendering the conversation.
The view owns presentation concerns (escaping, layout, focus); the
ConversationClient only tells it what changed.
"""

from abc import ABC, abstractmethod

from gig_advisor.domain.entities.conversation import ConversationTurn


class IConversationView(ABC):
    @abstractmethod
    def render_turn(self, turn: ConversationTurn) -> None:
        """Display a newly added turn."""
        ...

    @abstractmethod
    def render_transcript(self, turns: list[ConversationTurn]) -> None:
        """Redraw the whole transcript after an edit, delete, reaction or clear."""
        ...

    @abstractmethod
    def set_busy(self, busy: bool) -> None:
        """Disable (busy=True) or re-enable the send affordance and typing indicator."""
        ...

    @abstractmethod
    def set_status(self, status: str) -> None: ...

    @abstractmethod
    def focus_input(self) -> None: ...
