"""
Application service: attach illustrative financial reference data to a query.

The values are static stub constants, not live market data. Rules are checked
in order and the first match wins, so tax questions that also mention the
market get the tax record.
"""

import logging
from typing import Optional

from gig_advisor.domain.entities.reference_rule import ReferenceRule

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_RULES: tuple[ReferenceRule, ...] = (
    ReferenceRule(
        topic="tax",
        terms=("tax",),
        payload={"federalTaxRate": "22%", "stateTaxRate": "5%"},
    ),
    ReferenceRule(
        topic="market",
        terms=("stock", "market"),
        payload={"marketStatus": "Open", "sampleStockPrice": "$150"},
    ),
    ReferenceRule(
        topic="currency",
        terms=("currency", "exchange"),
        payload={"usdToEur": "0.85", "lastUpdated": "2025-03-22"},
    ),
)


class ReferenceDataResolver:
    def __init__(self, rules: tuple[ReferenceRule, ...] = DEFAULT_REFERENCE_RULES) -> None:
        self._rules = tuple(rules)

    def resolve(self, query: str) -> Optional[dict]:
        """Return a copy of the first matching rule's payload, or None.

        Never raises: enrichment is optional, so any error degrades to no data.
        """
        try:
            lowered = query.lower()
            for rule in self._rules:
                if rule.matches(lowered):
                    return dict(rule.payload)
            return None
        except Exception:
            logger.exception("Error resolving reference data")
            return None
