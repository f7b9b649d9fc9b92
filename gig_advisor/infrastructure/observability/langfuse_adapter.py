"""
Infrastructure adapter: Langfuse → IObservabilityHandler for chat runs.

The FastAPI composition root builds this handler only when LANGFUSE_PUBLIC_KEY
is set, and flushes it on shutdown. Langfuse is imported lazily so the module
loads without any LANGFUSE_* configuration.
"""

import os
from typing import Any, Optional

from gig_advisor.domain.ports.observability_port import IObservabilityHandler

DEFAULT_TAGS = ("gig-finance-chat",)


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Traces each chat graph run, tagged and grouped by deployment environment."""

    def __init__(
        self,
        tags: tuple[str, ...] = DEFAULT_TAGS,
        environment: Optional[str] = None,
        _handler: Any = None,
    ) -> None:
        """
        Args:
            tags:        Langfuse tags added to every chat trace.
            environment: Deployment label; defaults to LANGFUSE_TRACING_ENVIRONMENT.
            _handler:    Optional pre-built callback (used by tests). Pass nothing
                         for normal instantiation.
        """
        if _handler is None:
            from langfuse.langchain import CallbackHandler
            _handler = CallbackHandler()
        self._handler = _handler
        self._tags = list(tags)
        self._environment = environment or os.environ.get("LANGFUSE_TRACING_ENVIRONMENT")

    @staticmethod
    def is_configured() -> bool:
        return bool(os.environ.get("LANGFUSE_PUBLIC_KEY"))

    def as_callback(self) -> Any:
        return self._handler

    def run_metadata(self) -> dict:
        metadata: dict = {"langfuse_tags": list(self._tags)}
        if self._environment:
            metadata["environment"] = self._environment
        return metadata

    def flush(self) -> None:
        from langfuse import get_client
        get_client().flush()
