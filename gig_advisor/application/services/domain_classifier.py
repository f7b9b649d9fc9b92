"""
Application service: keyword-based finance domain classifier.

The keyword set is injected rather than hard-coded so another matcher
(word-boundary, ML-based) can replace this one behind IDomainClassifier.
"""

from typing import Iterable

from gig_advisor.domain.ports.domain_classifier_port import IDomainClassifier


class KeywordDomainClassifier(IDomainClassifier):
    def __init__(self, keywords: Iterable[str]) -> None:
        self._keywords = frozenset(
            k.strip().lower() for k in keywords if k and k.strip()
        )

    @property
    def keywords(self) -> frozenset[str]:
        return self._keywords

    def is_finance_domain(self, query: str) -> bool:
        """True iff any keyword occurs as a substring of the lowercased query."""
        if not query:
            return False
        lowered = query.lower()
        return any(keyword in lowered for keyword in self._keywords)
