"""
Port (interface) for delivering a chat query to the backend.
Infrastructure adapters (e.g. HttpChatTransport) must implement this interface.
"""

from abc import ABC, abstractmethod


class IChatTransport(ABC):
    @abstractmethod
    async def send_query(self, query: str) -> str:
        """Deliver *query* once and return the backend's response text.

        Raises:
            DeliveryError: on a non-success status, network failure, or a reply
                           body without a response field.
        """
        ...
