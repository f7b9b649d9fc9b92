"""
LangGraph chat pipeline factory.

    START → classify ─┬─ refuse ─────────────────────────────→ END
                      └─ resolve → compose → complete ───────→ END

Dependency-injection contract:
  - Receives IDomainClassifier, ReferenceDataResolver and ICompletionClient.
  - Never imports httpx, langfuse or boto3 directly.

Off-domain queries take the refuse branch and never reach the resolver or the
completion client.
"""

import logging

from langgraph.graph import END, START, StateGraph

from gig_advisor.application.chat.prompts import REFUSAL_MESSAGE, compose_prompt
from gig_advisor.application.chat.state import ChatState
from gig_advisor.application.services.reference_data_resolver import ReferenceDataResolver
from gig_advisor.domain.ports.domain_classifier_port import IDomainClassifier
from gig_advisor.domain.ports.llm_port import ICompletionClient

logger = logging.getLogger(__name__)


def build_chat_graph(
    classifier: IDomainClassifier,
    resolver: ReferenceDataResolver,
    completion: ICompletionClient,
):
    """Build and compile the chat pipeline graph.

    Returns:
        Compiled LangGraph CompiledStateGraph ready for ainvoke() calls.
    """

    def classify(state: ChatState) -> dict:
        is_finance = classifier.is_finance_domain(state["query"])
        logger.info("Is finance-related: %s", is_finance)
        return {"is_finance": is_finance}

    def refuse(state: ChatState) -> dict:
        return {"response": REFUSAL_MESSAGE}

    def resolve(state: ChatState) -> dict:
        reference_data = resolver.resolve(state["query"])
        logger.info("Financial data: %s", reference_data)
        return {"reference_data": reference_data}

    def compose(state: ChatState) -> dict:
        return {"prompt": compose_prompt(state["query"], state.get("reference_data"))}

    async def complete(state: ChatState) -> dict:
        return {"response": await completion.complete(state["prompt"])}

    def route_after_classify(state: ChatState) -> str:
        return "resolve" if state["is_finance"] else "refuse"

    workflow = StateGraph(ChatState)
    workflow.add_node("classify", classify)
    workflow.add_node("refuse", refuse)
    workflow.add_node("resolve", resolve)
    workflow.add_node("compose", compose)
    workflow.add_node("complete", complete)
    workflow.add_edge(START, "classify")
    workflow.add_conditional_edges("classify", route_after_classify, ["refuse", "resolve"])
    workflow.add_edge("refuse", END)
    workflow.add_edge("resolve", "compose")
    workflow.add_edge("compose", "complete")
    workflow.add_edge("complete", END)
    return workflow.compile()
