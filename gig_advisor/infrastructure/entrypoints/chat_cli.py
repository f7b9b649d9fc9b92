"""
Terminal chat client: a text front end for the /api/chat backend.

Composition Root for the client side: wires HttpChatTransport and a
TerminalConversationView into a ConversationClient and runs a read-eval loop.

Run against a local backend:
    gig-advisor-chat --base-url http://localhost:3000

Commands:
    /clear            clear the conversation
    /delete N         delete turn N
    /edit N           remove turn N and prefill the next prompt with its text
    /react N EMOJI    react to turn N with one of 👍 👎 ❓
    /suggest TEXT     list example questions containing TEXT
    /quit             exit
"""

import argparse
import asyncio
import logging
from typing import Optional

from dotenv import load_dotenv

from gig_advisor.application.client.conversation_client import ConversationClient
from gig_advisor.domain.entities.conversation import ConversationTurn, SenderRole
from gig_advisor.domain.ports.conversation_view_port import IConversationView
from gig_advisor.infrastructure.config.settings import Settings, configure_logging
from gig_advisor.infrastructure.transport.http_chat_transport import HttpChatTransport

logger = logging.getLogger(__name__)


class TerminalConversationView(IConversationView):
    """Prints turns to stdout, numbered so commands can refer to them."""

    def __init__(self) -> None:
        self._count = 0

    def render_turn(self, turn: ConversationTurn) -> None:
        self._count += 1
        self._print(self._count, turn)

    def render_transcript(self, turns: list[ConversationTurn]) -> None:
        print("-" * 40)
        for number, turn in enumerate(turns, start=1):
            self._print(number, turn)
        self._count = len(turns)

    def set_busy(self, busy: bool) -> None:
        if busy:
            print("  … advisor is typing")

    def set_status(self, status: str) -> None:
        logger.debug("Status: %s", status)

    def focus_input(self) -> None:
        pass

    @staticmethod
    def _print(number: int, turn: ConversationTurn) -> None:
        who = "You" if turn.sender_role is SenderRole.USER else "Advisor"
        stamp = turn.timestamp.astimezone().strftime("%H:%M")
        print(f"[{number}] {stamp} {who}: {turn.text}")


def _turn_id(client: ConversationClient, arg: str) -> Optional[str]:
    try:
        index = int(arg) - 1
    except ValueError:
        return None
    turns = client.turns
    if 0 <= index < len(turns):
        return turns[index].id
    return None


async def run(client: ConversationClient) -> None:
    """Read commands and messages until /quit or end of input."""
    client.start()
    prefill = ""

    while True:
        prompt = f"> {prefill}" if prefill else "> "
        try:
            line = await asyncio.to_thread(input, prompt)
        except EOFError:
            break
        text = f"{prefill}{line}" if prefill else line
        prefill = ""

        command, _, arg = text.strip().partition(" ")
        if command == "/quit":
            break
        if command == "/clear":
            client.clear()
        elif command == "/suggest":
            for suggestion in client.suggestions(arg):
                print(f"  • {suggestion}")
        elif command in ("/delete", "/edit", "/react"):
            number, _, reaction = arg.partition(" ")
            turn_id = _turn_id(client, number)
            if turn_id is None:
                print("  No such message.")
            elif command == "/delete":
                client.delete_turn(turn_id)
            elif command == "/edit":
                prefill = client.edit_turn(turn_id) or ""
            else:
                try:
                    client.react(turn_id, reaction.strip())
                except ValueError as exc:
                    print(f"  {exc}")
        else:
            await client.send(text)


def main() -> None:
    load_dotenv()
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Chat with the Gig Worker Finance Advisor.")
    parser.add_argument("--base-url", default=settings.chat_api_base_url)
    args = parser.parse_args()
    configure_logging("WARNING")
    client = ConversationClient(HttpChatTransport(args.base_url), TerminalConversationView())
    asyncio.run(run(client))


if __name__ == "__main__":
    main()
