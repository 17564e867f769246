"""Categorization of OCR text and colors detected on disc golf disc photos."""
from disc_categorizer.models import (
    Category,
    CategorizeResponse,
    ImageDetectionData,
)
from disc_categorizer.services import (
    CategorizeService,
    HttpReferenceDataProvider,
    StaticReferenceDataProvider,
)

__version__ = "1.0.0"

__all__ = [
    "Category",
    "CategorizeResponse",
    "ImageDetectionData",
    "CategorizeService",
    "HttpReferenceDataProvider",
    "StaticReferenceDataProvider",
]
