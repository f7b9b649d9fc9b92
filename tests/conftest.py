"""Shared fakes for the domain ports."""

from typing import Union

import pytest

from gig_advisor.domain.entities.conversation import ConversationTurn
from gig_advisor.domain.ports.chat_transport_port import IChatTransport
from gig_advisor.domain.ports.conversation_view_port import IConversationView
from gig_advisor.domain.ports.llm_port import ICompletionClient


class FakeCompletionClient(ICompletionClient):
    def __init__(self, response: str = "Keep a mileage log and deduct the standard rate."):
        self.response = response
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.response


class ScriptedTransport(IChatTransport):
    """Plays back a list of outcomes: strings are replies, exceptions are raised."""

    def __init__(self, outcomes: list[Union[str, Exception]]):
        self._outcomes = list(outcomes)
        self.queries: list[str] = []

    async def send_query(self, query: str) -> str:
        self.queries.append(query)
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingView(IConversationView):
    def __init__(self):
        self.rendered: list[ConversationTurn] = []
        self.transcripts: list[list[ConversationTurn]] = []
        self.busy_changes: list[bool] = []
        self.statuses: list[str] = []
        self.focus_count = 0

    def render_turn(self, turn: ConversationTurn) -> None:
        self.rendered.append(turn)

    def render_transcript(self, turns: list[ConversationTurn]) -> None:
        self.transcripts.append(list(turns))

    def set_busy(self, busy: bool) -> None:
        self.busy_changes.append(busy)

    def set_status(self, status: str) -> None:
        self.statuses.append(status)

    def focus_input(self) -> None:
        self.focus_count += 1


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture()
def completion() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sleep() -> RecordingSleep:
    return RecordingSleep()
