"""Custom exception hierarchy for image text categorization errors.

Every error carries the ``code`` that is reported back to callers in the
``{errors: [{message, code}]}`` response shape.
"""
from typing import Optional


class CategorizeError(Exception):
    """Base exception for all categorization errors."""

    code = "500"

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize error with message and optional code override."""
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class ReferenceDataError(CategorizeError):
    """Raised when a reference collection (brands or discs) cannot be fetched."""
    pass


class ReferenceDataDecodeError(ReferenceDataError):
    """Raised when a reference collection has an unexpected shape."""
    pass


class VocabularyUnavailableError(CategorizeError):
    """Raised when the vocabularies needed for classification are missing."""
    pass


class NoColorsDetectedError(CategorizeError):
    """Raised when a primary color is requested from an empty color list."""

    code = "422"


class InvalidDetectionDataError(CategorizeError):
    """Raised when image detection input fails validation."""

    code = "400"
