"""Pydantic models for detection input, reference data and responses."""
from disc_categorizer.models.detection import (
    Category,
    DetectedWord,
    TextData,
    DetectedColor,
    ImageDetectionData,
    PrimaryColor,
    CategorizedResult,
)
from disc_categorizer.models.reference import (
    BrandCollection,
    MoldCollection,
)
from disc_categorizer.models.responses import (
    ErrorDetail,
    CategorizeResponse,
)

__all__ = [
    "Category",
    "DetectedWord",
    "TextData",
    "DetectedColor",
    "ImageDetectionData",
    "PrimaryColor",
    "CategorizedResult",
    "BrandCollection",
    "MoldCollection",
    "ErrorDetail",
    "CategorizeResponse",
]
