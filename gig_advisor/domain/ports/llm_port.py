"""
Port (interface) for text-completion providers.
Infrastructure adapters (e.g. GeminiCompletionClient) must implement this interface.
"""

from abc import ABC, abstractmethod


class ICompletionClient(ABC):
    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Return the model's text answer for *prompt*.

        Implementations make a single attempt and never raise: every failure is
        converted into a fixed fallback string.
        """
        ...
