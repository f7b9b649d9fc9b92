"""Example questions offered as the user types."""

EXAMPLE_QUESTIONS: tuple[str, ...] = (
    "How do I track mileage expenses?",
    "What tax deductions can I claim as a freelancer?",
    "How should I save for retirement as a gig worker?",
    "Do I need to pay quarterly taxes?",
    "What's the best way to handle inconsistent income?",
    "How do I set up a budget as a freelancer?",
    "What are the best investment options for gig workers?",
)


def match_suggestions(text: str, limit: int = 5) -> list[str]:
    text = (text or "").lower()
    if not text:
        return []
    return [q for q in EXAMPLE_QUESTIONS if text in q.lower()][:limit]
