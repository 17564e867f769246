"""Word classifier for OCR text read off a disc.

Each word is classified independently by a pure function:

1. Words of one character or less are dropped.
2. Phone-number-like words are PhoneNumber (no fuzzy search).
3. Otherwise the lowercased word is searched in the mold and brand indexes.
   No hit in either -> NA. Else the lower best distance wins, ties go to Disc.
"""
import re
from typing import List, Optional, Sequence

import structlog

from disc_categorizer.models.detection import Category, DetectedWord
from disc_categorizer.services.matching import WORST_SCORE, FuzzyIndex

logger = structlog.get_logger(__name__)


# Optional 1-2 digit country code, then 3-3-4 digits with optional
# "-", "." or whitespace separators and an optional parenthesized area code.
PHONE_NUMBER_PATTERN = re.compile(
    r"(\+?\d{1,2}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}"
)

MIN_WORD_LENGTH = 2


def is_phone_number(text: str) -> bool:
    """Check whether ``text`` looks like a phone number."""
    return PHONE_NUMBER_PATTERN.fullmatch(text) is not None


def categorize_word(text: str, discs: FuzzyIndex, brands: FuzzyIndex) -> Category:
    """Return the category for a single word of text."""
    if is_phone_number(text):
        return Category.PHONE_NUMBER

    query = text.lower()
    disc_score = discs.best_score(query)
    brand_score = brands.best_score(query)

    if disc_score is None and brand_score is None:
        return Category.NA

    if disc_score is None:
        disc_score = WORST_SCORE
    if brand_score is None:
        brand_score = WORST_SCORE

    return Category.DISC if disc_score <= brand_score else Category.BRAND


def classify_word(
    word: DetectedWord,
    discs: FuzzyIndex,
    brands: FuzzyIndex,
) -> Optional[DetectedWord]:
    """Classify one detected word.

    Returns a copy of ``word`` with its category set, or None when the word
    is too short to classify and should be dropped.
    """
    if len(word.word) < MIN_WORD_LENGTH:
        return None
    return word.model_copy(update={"category": categorize_word(word.word, discs, brands)})


class WordClassifier:
    """Classifies detected words against mold and brand indexes.

    Attributes:
        discs: Index over disc mold names
        brands: Index over brand names
    """

    def __init__(self, discs: FuzzyIndex, brands: FuzzyIndex):
        self.discs = discs
        self.brands = brands
        self._log = logger.bind(classifier="WordClassifier")

    def classify(self, words: Sequence[DetectedWord]) -> List[DetectedWord]:
        """Classify ``words``, preserving input order and dropping short words."""
        classified: List[DetectedWord] = []
        for word in words:
            result = classify_word(word, self.discs, self.brands)
            if result is not None:
                classified.append(result)

        self._log.debug(
            "words_classified",
            input_count=len(words),
            output_count=len(classified),
            dropped_count=len(words) - len(classified),
        )
        return classified
