"""Image text categorization pipeline.

Sequences vocabulary loading, index building and word classification, and
independently reduces the detected colors to a primary color. Every failure
is logged with the phase it happened in and reported as
``{"errors": [{"message", "code"}]}``; nothing is raised to the caller.
"""
import asyncio
from typing import Any, Dict, Optional, Union

import structlog
from pydantic import ValidationError

from disc_categorizer.config import CategorizeSettings, get_settings
from disc_categorizer.errors import CategorizeError, InvalidDetectionDataError
from disc_categorizer.models.detection import CategorizedResult, ImageDetectionData
from disc_categorizer.models.responses import CategorizeResponse
from disc_categorizer.services.classification import WordClassifier
from disc_categorizer.services.colors import select_primary_color
from disc_categorizer.services.matching import build_index
from disc_categorizer.services.reference_client import ReferenceDataProvider
from disc_categorizer.services.vocabulary import VocabularyLoader

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error categorizing image text"


class CategorizeService:
    """Categorizes the words and colors detected in a disc image.

    Vocabularies and indexes are built fresh on every call; no state is
    shared between calls.

    Usage:
        async with HttpReferenceDataProvider() as provider:
            service = CategorizeService(provider)
            response = await service.categorize_image_text(detection)
    """

    def __init__(
        self,
        provider: ReferenceDataProvider,
        settings: Optional[CategorizeSettings] = None,
    ):
        self.provider = provider
        self.settings = settings or get_settings()

    async def categorize_image_text(
        self,
        image_text: Union[ImageDetectionData, Dict[str, Any]],
    ) -> CategorizeResponse:
        """
        Categorize detected text and pick the primary color.

        Args:
            image_text: Detected words and colors, as a model or raw dict

        Returns:
            CategorizeResponse holding either ``data`` or ``errors``
        """
        log = logger.bind(phase="validate")
        try:
            detection = self._parse(image_text)

            log = logger.bind(phase="vocabulary")
            loader = VocabularyLoader(self.provider, self.settings)
            vocabulary_task = asyncio.create_task(loader.load())

            # Color reduction does not depend on the vocabularies
            log = logger.bind(phase="colors")
            try:
                primary = select_primary_color(detection.colors)
            except CategorizeError:
                vocabulary_task.cancel()
                await asyncio.gather(vocabulary_task, return_exceptions=True)
                raise

            log = logger.bind(phase="vocabulary")
            vocabularies = await vocabulary_task

            log = logger.bind(phase="classify")
            discs = build_index(
                vocabularies.molds,
                threshold=self.settings.match_threshold,
                max_candidates=self.settings.max_candidates,
                name="molds",
            )
            brands = build_index(
                vocabularies.brands,
                threshold=self.settings.match_threshold,
                max_candidates=self.settings.max_candidates,
                name="brands",
            )
            words = WordClassifier(discs=discs, brands=brands).classify(detection.text.words)

            log = logger.bind(phase="assemble")
            text = detection.text.model_copy(update={"words": words})
            result = CategorizedResult(text=text, colors=primary)
        except CategorizeError as e:
            log.error(
                "categorize_failed",
                error_type=type(e).__name__,
                error=e.message,
                code=e.code,
            )
            return CategorizeResponse.failure(e.message, e.code)
        except Exception:
            log.exception("categorize_text_error")
            return CategorizeResponse.failure(UNEXPECTED_ERROR_MESSAGE, "500")

        log.info(
            "categorize_completed",
            words=len(result.text.words),
            primary_color=result.colors.primary,
        )
        return CategorizeResponse.success(result)

    @staticmethod
    def _parse(image_text: Union[ImageDetectionData, Dict[str, Any]]) -> ImageDetectionData:
        if isinstance(image_text, ImageDetectionData):
            return image_text
        try:
            return ImageDetectionData.model_validate(image_text)
        except ValidationError as e:
            raise InvalidDetectionDataError(
                f"Invalid image detection data: {e.error_count()} validation error(s)"
            ) from e
