"""
Application service: the client side of one conversation.

Owns the rules that decide whether and how a message reaches the backend:
  - cooldown between accepted sends (RATE_LIMIT_SECONDS),
  - single-flight (no second request while one is outstanding, no queueing),
  - resilient delivery: up to MAX_ATTEMPTS tries, waiting
    BACKOFF_STEP_SECONDS * i after failed attempt i.

Transport (IChatTransport) and rendering (IConversationView) are injected. The
clock and sleep functions are injectable so timing can be driven from tests.
"""

import asyncio
import logging
import time
from enum import Enum
from typing import Awaitable, Callable, Optional

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from gig_advisor.application.client.suggestions import match_suggestions
from gig_advisor.domain.entities.conversation import (
    Conversation,
    ConversationTurn,
    SenderRole,
)
from gig_advisor.domain.exceptions import DeliveryError
from gig_advisor.domain.ports.chat_transport_port import IChatTransport
from gig_advisor.domain.ports.conversation_view_port import IConversationView

logger = logging.getLogger(__name__)

GREETING_MESSAGE = (
    "Hello! I'm your Gig Worker Finance Advisor. I can help with taxes, expenses, "
    "retirement planning, and more. What's on your mind?"
)
CLEARED_MESSAGE = "Chat cleared! How can I assist you now?"
COOLDOWN_MESSAGE = "Please wait a moment before sending another message."
DELIVERY_FAILED_MESSAGE = "Sorry, I encountered an error. Please try again later."

STATUS_ONLINE = "Online"
STATUS_PROCESSING = "Processing..."
STATUS_ERROR = "Error"


class SendOutcome(str, Enum):
    IGNORED = "ignored"
    RATE_LIMITED = "rate_limited"
    DELIVERED = "delivered"
    FAILED = "failed"


class ConversationClient:
    RATE_LIMIT_SECONDS: float = 2.0
    MAX_ATTEMPTS: int = 3
    BACKOFF_STEP_SECONDS: float = 1.0

    def __init__(
        self,
        transport: IChatTransport,
        view: IConversationView,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._transport = transport
        self._view = view
        self._clock = clock
        self._sleep = sleep
        self._conversation = Conversation()
        self._last_request_time: Optional[float] = None
        self._in_flight = False

    @property
    def turns(self) -> list[ConversationTurn]:
        return self._conversation.turns

    @property
    def is_busy(self) -> bool:
        return self._in_flight

    def start(self) -> None:
        """Begin a fresh conversation; nothing carries over from earlier sessions."""
        self._conversation.clear()
        self._view.render_transcript([])
        self._add_turn(GREETING_MESSAGE, SenderRole.BOT)
        self._view.set_status(STATUS_ONLINE)

    async def send(self, text: str) -> SendOutcome:
        query = (text or "").strip()
        if not query or self._in_flight:
            return SendOutcome.IGNORED

        now = self._clock()
        if (
            self._last_request_time is not None
            and now - self._last_request_time < self.RATE_LIMIT_SECONDS
        ):
            self._add_turn(COOLDOWN_MESSAGE, SenderRole.BOT)
            return SendOutcome.RATE_LIMITED

        self._add_turn(query, SenderRole.USER)
        self._in_flight = True
        self._view.set_busy(True)
        self._view.set_status(STATUS_PROCESSING)
        self._last_request_time = now

        try:
            reply = await self._deliver(query)
        except DeliveryError as exc:
            logger.error("Chat delivery failed after %d attempts: %s", self.MAX_ATTEMPTS, exc)
            self._add_turn(DELIVERY_FAILED_MESSAGE, SenderRole.BOT)
            self._view.set_status(STATUS_ERROR)
            return SendOutcome.FAILED
        else:
            self._add_turn(reply, SenderRole.BOT)
            self._view.set_status(STATUS_ONLINE)
            return SendOutcome.DELIVERED
        finally:
            self._in_flight = False
            self._view.set_busy(False)
            self._view.focus_input()

    async def _deliver(self, query: str) -> str:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.MAX_ATTEMPTS),
            wait=wait_incrementing(
                start=self.BACKOFF_STEP_SECONDS, increment=self.BACKOFF_STEP_SECONDS
            ),
            retry=retry_if_exception_type(DeliveryError),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._transport.send_query(query)
        raise DeliveryError("retry loop exited without a result")

    # ------------------------------------------------------------------
    # Transcript actions
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self._conversation.clear()
        self._view.render_transcript([])
        self._add_turn(CLEARED_MESSAGE, SenderRole.BOT)

    def delete_turn(self, turn_id: str) -> bool:
        deleted = self._conversation.delete(turn_id)
        if deleted:
            self._view.render_transcript(self._conversation.turns)
        return deleted

    def edit_turn(self, turn_id: str) -> Optional[str]:
        """Pull a turn out of the transcript and return its text for the input box."""
        text = self._conversation.edit(turn_id)
        if text is not None:
            self._view.render_transcript(self._conversation.turns)
            self._view.focus_input()
        return text

    def react(self, turn_id: str, reaction: str) -> ConversationTurn:
        turn = self._conversation.react(turn_id, reaction)
        self._view.render_transcript(self._conversation.turns)
        return turn

    def suggestions(self, text: str, limit: int = 5) -> list[str]:
        return match_suggestions(text, limit=limit)

    def _add_turn(self, text: str, sender_role: SenderRole) -> ConversationTurn:
        turn = self._conversation.add(text, sender_role)
        self._view.render_turn(turn)
        return turn
