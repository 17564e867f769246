"""Pydantic models for image detection input and categorized output.

OCR words and colors arrive already structured; words may carry arbitrary
metadata (bounding boxes, confidences) which is preserved verbatim.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Semantic category assigned to a detected word."""
    PHONE_NUMBER = "PhoneNumber"
    DISC = "Disc"
    BRAND = "Brand"
    NA = "NA"


class DetectedWord(BaseModel):
    """A single OCR word plus opaque detection metadata.

    Attributes:
        word: Raw text as read by OCR
        category: Assigned once by the word classifier, None on input
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    word: str
    category: Optional[Category] = None


class TextData(BaseModel):
    """Text block of an image detection."""

    model_config = ConfigDict(extra="allow")

    words: List[DetectedWord] = Field(default_factory=list)


class DetectedColor(BaseModel):
    """A color detected in the image with its confidence score."""

    name: str
    score: float = Field(..., ge=0)


class ImageDetectionData(BaseModel):
    """Structured OCR + color detection result for one image."""

    text: TextData
    colors: List[DetectedColor] = Field(default_factory=list)


class PrimaryColor(BaseModel):
    """The highest-confidence color of an image."""

    primary: str
    score: float


class CategorizedResult(BaseModel):
    """Categorized words and the primary color of an image."""

    text: TextData
    colors: PrimaryColor
