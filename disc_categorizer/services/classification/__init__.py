"""Classification of OCR words into phone number, disc, brand or NA."""
from disc_categorizer.services.classification.classifier import (
    PHONE_NUMBER_PATTERN,
    WordClassifier,
    categorize_word,
    classify_word,
    is_phone_number,
)

__all__ = [
    "PHONE_NUMBER_PATTERN",
    "WordClassifier",
    "categorize_word",
    "classify_word",
    "is_phone_number",
]
