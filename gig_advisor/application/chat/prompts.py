"""
Prompt text and fixed replies for the gig-worker finance advisor.
Keeping the prompt in the application layer keeps it close to the business rules
it encodes, while remaining independent from any infrastructure SDK.
"""

import json
from typing import Optional

REFUSAL_MESSAGE = (
    "I'm sorry, I can only answer questions related to finance for gig workers. "
    "Please ask a finance-related question."
)

FALLBACK_MESSAGE = (
    "I'm having trouble generating a response right now. Please try again later."
)

SYSTEM_PROMPT = f"""You are an AI Finance Advisor specialized in helping gig workers, freelancers, and independent contractors with their financial questions.
Focus on tax advice, expense tracking, retirement planning, and financial management specific to self-employed individuals.
If financial data is provided, incorporate it into your answer.
Only answer finance-related questions. For any other topics, respond with: "{REFUSAL_MESSAGE}\""""


def compose_prompt(query: str, reference_data: Optional[dict] = None) -> str:
    """Build the single text prompt sent to the completion service.

    The query is inserted verbatim; escaping for display is the view's job.
    """
    prompt = f"{SYSTEM_PROMPT}\n\nUser Query: {query}"
    if reference_data is not None:
        prompt += "\n\nRelevant financial data: " + json.dumps(
            reference_data, separators=(",", ":")
        )
    return prompt
