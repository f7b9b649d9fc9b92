"""
LangGraph state for a single chat request.
langgraph is the orchestration framework and is allowed in the application layer.
"""

from typing import Optional, TypedDict


class ChatState(TypedDict, total=False):
    """Values threaded through the chat pipeline for one query.

    query:          raw user text, never escaped or rewritten.
    is_finance:     classifier verdict.
    reference_data: resolved stub record, or None.
    prompt:         composed prompt sent to the completion client.
    response:       final text returned to the caller (answer, refusal or fallback).
    """

    query: str
    is_finance: bool
    reference_data: Optional[dict]
    prompt: str
    response: str
