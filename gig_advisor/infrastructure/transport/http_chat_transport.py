"""
Infrastructure adapter: HTTP POST /api/chat (over httpx) → IChatTransport.

One call to send_query() is one attempt; the ConversationClient decides whether
to try again. Every httpx failure, non-2xx status or malformed body surfaces as
DeliveryError so the application layer never sees httpx exception types.
"""

from typing import Optional

import httpx

from gig_advisor.domain.exceptions import DeliveryError
from gig_advisor.domain.ports.chat_transport_port import IChatTransport


class HttpChatTransport(IChatTransport):
    CHAT_PATH = "/api/chat"

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def send_query(self, query: str) -> str:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.CHAT_PATH, json={"query": query})
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as exc:
            raise DeliveryError(
                f"HTTP error! status: {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DeliveryError(f"Request to {self.CHAT_PATH} failed: {exc}") from exc
        except ValueError as exc:
            raise DeliveryError("Chat response body is not valid JSON") from exc

        reply = body.get("response") if isinstance(body, dict) else None
        if not isinstance(reply, str):
            raise DeliveryError("Chat response body has no 'response' field")
        return reply
