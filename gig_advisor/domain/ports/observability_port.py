"""
Port (interface) for tracing chat graph runs.
Infrastructure adapters (e.g. LangfuseObservabilityHandler) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class IObservabilityHandler(ABC):
    @abstractmethod
    def as_callback(self) -> Any:
        """Return the callback object placed in the graph run config."""
        ...

    @abstractmethod
    def run_metadata(self) -> dict:
        """Return metadata attached to every traced chat run (tags, environment)."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Send buffered traces before the app shuts down."""
        ...
