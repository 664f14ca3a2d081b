"""Related-item selection by shared tags."""

from collections.abc import Iterable
from dataclasses import dataclass

from lookbook.domain.entities import CatalogItem
from lookbook.domain.exceptions import InvalidPageSizeError

DEFAULT_RELATED_LIMIT = 4


@dataclass(frozen=True)
class RelatednessCandidate:
    """A candidate item and its tag-overlap score against a base item."""

    item: CatalogItem
    score: int


def overlap_score(base: CatalogItem, candidate: CatalogItem) -> int:
    """Number of tags the two items share."""
    return len(base.tags & candidate.tags)


def score_candidates(
    base: CatalogItem,
    candidates: Iterable[CatalogItem],
) -> list[RelatednessCandidate]:
    """Score and order candidates against a base item.

    The base item itself and candidates with no shared tags are
    dropped. Order is score descending, then newest first, then id.
    """
    if not base.tags:
        return []

    scored: list[RelatednessCandidate] = []
    seen: set[str] = set()
    for candidate in candidates:
        if candidate.id == base.id or candidate.id in seen:
            continue
        seen.add(candidate.id)
        score = overlap_score(base, candidate)
        if score > 0:
            scored.append(RelatednessCandidate(item=candidate, score=score))

    scored.sort(key=lambda c: c.item.id)
    scored.sort(key=lambda c: (c.score, c.item.created_at), reverse=True)
    return scored


def related(
    base: CatalogItem,
    candidates: Iterable[CatalogItem],
    limit: int = DEFAULT_RELATED_LIMIT,
) -> list[CatalogItem]:
    """Select the items most related to ``base``.

    Results are never padded with unrelated items, so fewer than
    ``limit`` items may come back. A base without tags has no related
    items.

    Args:
        base: Item whose related items are wanted.
        candidates: Items to choose from.
        limit: Maximum number of items to return.

    Returns:
        Related items, best match first.

    Raises:
        InvalidPageSizeError: If limit is zero or negative.
    """
    if limit <= 0:
        raise InvalidPageSizeError(limit)

    return [candidate.item for candidate in score_candidates(base, candidates)[:limit]]
