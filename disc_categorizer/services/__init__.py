"""Business logic services for image text categorization.

Available Services:
    - reference_client: Brand/mold reference data providers (HTTP, static)
    - vocabulary: Concurrent vocabulary loading and normalization
    - matching: Fuzzy vocabulary indexes using RapidFuzz
    - classification: Per-word phone/disc/brand classification
    - colors: Primary color selection
    - categorize: End-to-end categorization pipeline
"""
from disc_categorizer.services.categorize import CategorizeService
from disc_categorizer.services.colors import select_primary_color
from disc_categorizer.services.reference_client import (
    HttpReferenceDataProvider,
    ReferenceDataProvider,
    StaticReferenceDataProvider,
)
from disc_categorizer.services.vocabulary import Vocabularies, VocabularyLoader

__all__: list[str] = [
    "CategorizeService",
    "select_primary_color",
    "HttpReferenceDataProvider",
    "ReferenceDataProvider",
    "StaticReferenceDataProvider",
    "Vocabularies",
    "VocabularyLoader",
]
