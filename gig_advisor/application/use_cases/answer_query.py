"""
Use-case: answer one chat query through the compiled chat pipeline graph.
Stateless across calls; every invocation produces exactly one response string.
"""

import logging
from typing import Any, Optional

from gig_advisor.domain.ports.observability_port import IObservabilityHandler

logger = logging.getLogger(__name__)


class AnswerQueryUseCase:
    def __init__(
        self,
        graph: Any,
        observability: Optional[IObservabilityHandler] = None,
    ) -> None:
        """
        Args:
            graph:         Compiled LangGraph StateGraph returned by build_chat_graph().
            observability: Optional IObservabilityHandler (e.g. Langfuse adapter).
        """
        self._graph = graph
        self._observability = observability

    async def execute(self, query: str) -> str:
        """Return the answer, refusal or fallback text for *query*.

        Raises:
            ValueError: if *query* is blank.
            Any unexpected exception raised inside the graph.
        """
        if not query or not query.strip():
            raise ValueError("query must be a non-empty string")
        logger.debug("Received query: %s", query)

        config: dict = {}
        if self._observability is not None:
            config = {
                "callbacks": [self._observability.as_callback()],
                "metadata": self._observability.run_metadata(),
            }
        result = await self._graph.ainvoke({"query": query}, config=config)
        return result["response"]
