"""
Domain entity for a topic → reference-data rule.
Zero external dependencies, pure Python dataclass only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ReferenceRule:
    topic: str
    terms: tuple[str, ...]
    payload: Mapping[str, str]

    def __post_init__(self) -> None:
        # Shared by every request, so the payload is stored read-only.
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def matches(self, lowered_query: str) -> bool:
        """True if any term occurs in the already-lowercased query."""
        return any(term in lowered_query for term in self.terms)
