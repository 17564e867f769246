"""Fuzzy vocabulary matching using RapidFuzz.

Key Components:
    - FuzzyIndex: Queryable index over one vocabulary
    - FuzzyMatch: A single match with its distance score
    - build_index: Factory for configured indexes
"""
from disc_categorizer.services.matching.matcher import (
    WORST_SCORE,
    FuzzyIndex,
    FuzzyMatch,
    build_index,
    similarity_to_distance,
)

__all__ = [
    "WORST_SCORE",
    "FuzzyIndex",
    "FuzzyMatch",
    "build_index",
    "similarity_to_distance",
]
