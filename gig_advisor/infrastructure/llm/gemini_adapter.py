"""
Infrastructure adapter: Google Gemini generateContent (over httpx) → ICompletionClient.

All Gemini wire-format details are confined here. Exactly one HTTP call is made
per complete(); retrying is the conversation client's job, and adding a retry
here as well would multiply attempts. Every failure is logged with its cause
and converted into FALLBACK_MESSAGE so callers always get a string.
"""

import logging
from typing import Any, Optional

import httpx

from gig_advisor.application.chat.prompts import FALLBACK_MESSAGE
from gig_advisor.domain.exceptions import CompletionResponseError
from gig_advisor.domain.ports.llm_port import ICompletionClient
from gig_advisor.infrastructure.config.settings import (
    DEFAULT_GEMINI_BASE_URL,
    DEFAULT_GEMINI_MODEL,
)

logger = logging.getLogger(__name__)


class GeminiCompletionClient(ICompletionClient):
    """Calls the Gemini REST API with an x-goog-api-key header."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            transport: Optional httpx transport, used by tests to stand in for
                       the remote service. Pass nothing for normal use.
        """
        if not api_key:
            logger.error("GEMINI_API_KEY is not set; completion requests will be rejected.")
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/{model}:generateContent"
        self._timeout = timeout
        self._transport = transport

    async def complete(self, prompt: str) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"Content-Type": "application/json", "x-goog-api-key": self._api_key}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
            logger.debug("Gemini API response: %s", data)
            return self._extract_text(data)
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Gemini API returned %s: %s",
                exc.response.status_code,
                exc.response.text,
            )
        except httpx.HTTPError as exc:
            logger.error("Gemini API request failed: %s", exc)
        except ValueError as exc:
            # CompletionResponseError and JSON decoding errors both land here.
            logger.error("Unexpected Gemini API response format: %s", exc)
        except Exception:
            logger.exception("Error generating response with Gemini API")
        return FALLBACK_MESSAGE

    @staticmethod
    def _extract_text(data: Any) -> str:
        """Return candidates[0].content.parts[0].text.

        Raises:
            CompletionResponseError: if any level is missing or the text is empty.
        """
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise CompletionResponseError(f"missing candidate text ({exc!r})") from exc
        if not isinstance(text, str) or not text.strip():
            raise CompletionResponseError("candidate text is empty")
        return text
