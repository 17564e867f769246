"""Error handling module."""
from disc_categorizer.errors.exceptions import (
    CategorizeError,
    ReferenceDataError,
    ReferenceDataDecodeError,
    VocabularyUnavailableError,
    NoColorsDetectedError,
    InvalidDetectionDataError,
)

__all__ = [
    "CategorizeError",
    "ReferenceDataError",
    "ReferenceDataDecodeError",
    "VocabularyUnavailableError",
    "NoColorsDetectedError",
    "InvalidDetectionDataError",
]
