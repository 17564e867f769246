"""Fuzzy vocabulary index using RapidFuzz.

A vocabulary (brand names or disc mold names) is wrapped in a FuzzyIndex
that answers approximate queries with distance-style scores: 0.0 is an
exact match and larger values are weaker matches, up to 1.0.

Key Components:
    - FuzzyMatch: A single vocabulary hit with its distance score
    - FuzzyIndex: Queryable index over one vocabulary
    - build_index: Factory applying configured threshold and limits
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import structlog
from rapidfuzz import fuzz, process, utils

logger = structlog.get_logger(__name__)

# Score reported when a query has no hit in a vocabulary
WORST_SCORE = 1.0


@dataclass(frozen=True)
class FuzzyMatch:
    """A vocabulary entry matched by a query.

    Attributes:
        value: The matched vocabulary entry
        score: Match distance in [0, 1], lower is better
    """
    value: str
    score: float


def similarity_to_distance(similarity: float) -> float:
    """Convert a RapidFuzz similarity (0-100) into a distance (0-1)."""
    return 1.0 - similarity / 100.0


class FuzzyIndex:
    """Approximate-match index over a single vocabulary.

    Uses WRatio, which combines simple, partial and token based ratios, so
    both whole-token and substring-like matches are found. Entries are
    compared after default preprocessing (lowercase, non-alphanumerics
    stripped).

    Attributes:
        threshold: Maximum distance a match may have to be returned
        max_candidates: Cap on returned matches (None = all)
    """

    def __init__(
        self,
        vocabulary: Sequence[str],
        threshold: float = 0.35,
        max_candidates: Optional[int] = None,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self._choices: Tuple[str, ...] = tuple(vocabulary)
        self.threshold = threshold
        self.max_candidates = max_candidates

    def __len__(self) -> int:
        return len(self._choices)

    @property
    def score_cutoff(self) -> float:
        """Minimum RapidFuzz similarity equivalent to the distance threshold."""
        return (1.0 - self.threshold) * 100.0

    def search(self, query: str) -> List[FuzzyMatch]:
        """Return matches for ``query`` sorted best (lowest score) first."""
        if not self._choices:
            return []

        # Returns list of tuples: (choice, similarity, index)
        hits = process.extract(
            query,
            self._choices,
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=self.score_cutoff,
            limit=self.max_candidates,
        )
        matches = [
            FuzzyMatch(value=choice, score=similarity_to_distance(similarity))
            for choice, similarity, _ in hits
        ]
        matches.sort(key=lambda m: m.score)
        return matches

    def best_score(self, query: str) -> Optional[float]:
        """Lowest distance among matches for ``query``, None when nothing matches."""
        matches = self.search(query)
        if not matches:
            return None
        return min(m.score for m in matches)


def build_index(
    vocabulary: Sequence[str],
    threshold: float = 0.35,
    max_candidates: Optional[int] = None,
    name: str = "vocabulary",
) -> FuzzyIndex:
    """Build a FuzzyIndex over ``vocabulary``.

    An empty vocabulary is valid and yields an index that matches nothing.
    Each call returns an independent index; nothing is shared between them.
    """
    index = FuzzyIndex(vocabulary, threshold=threshold, max_candidates=max_candidates)
    logger.debug(
        "fuzzy_index_built",
        index=name,
        entries=len(index),
        threshold=threshold,
    )
    return index
