"""Typo-tolerant text ranking.

The catalog service talks to a FuzzyMatcher; TheFuzzMatcher is the
default implementation backed by thefuzz.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from thefuzz import fuzz

from lookbook.domain.entities import CatalogItem


@dataclass(frozen=True)
class SearchCandidate:
    """Text a matcher scores for one item."""

    id: str
    searchable_text: str

    @classmethod
    def from_item(cls, item: CatalogItem) -> "SearchCandidate":
        return cls(id=item.id, searchable_text=item.searchable_text)


@dataclass(frozen=True)
class RankedMatch:
    """Matcher output for one candidate. Higher score is a better match."""

    id: str
    score: float


class FuzzyMatcher(Protocol):
    """Scores free-text relevance of candidates against a query.

    Implementations must be deterministic for identical inputs.
    """

    def rank(self, query: str, candidates: Sequence[SearchCandidate]) -> list[RankedMatch]:
        """Return candidates ordered best match first."""
        ...


class TheFuzzMatcher:
    """Fuzzy matcher using thefuzz ratios on a 0-100 scale.

    Each candidate scores the better of ``token_set_ratio`` (word
    overlap, order-insensitive) and ``partial_ratio`` (best matching
    substring). Every candidate is returned; ties keep input order.
    """

    def rank(self, query: str, candidates: Sequence[SearchCandidate]) -> list[RankedMatch]:
        needle = query.strip().lower()
        scored = [
            RankedMatch(id=candidate.id, score=float(self.score(needle, candidate.searchable_text)))
            for candidate in candidates
        ]
        # sorted() is stable, so equal scores keep candidate order
        return sorted(scored, key=lambda match: match.score, reverse=True)

    @staticmethod
    def score(query: str, text: str) -> int:
        """Similarity of ``query`` to ``text`` (0-100)."""
        haystack = text.lower()
        if not query or not haystack:
            return 0
        return max(fuzz.token_set_ratio(query, haystack), fuzz.partial_ratio(query, haystack))
