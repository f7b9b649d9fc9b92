"""
Port (interface) for query domain classifiers.
Application services (e.g. KeywordDomainClassifier) implement this interface so
a smarter matcher can be swapped in behind the same contract.
"""

from abc import ABC, abstractmethod


class IDomainClassifier(ABC):
    @abstractmethod
    def is_finance_domain(self, query: str) -> bool:
        """Return True if *query* falls within the finance domain."""
        ...
