"""Vocabulary loading.

Fetches brand and mold names concurrently, waits for both fetches to settle,
and lowercases every entry. Whether a single failed fetch is fatal is
controlled by ``allow_partial_vocabulary``; two failed fetches always are.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, List, Optional, Union

import structlog

from disc_categorizer.config import CategorizeSettings, get_settings
from disc_categorizer.errors import VocabularyUnavailableError
from disc_categorizer.services.reference_client import ReferenceDataProvider

logger = structlog.get_logger(__name__)

FETCH_ERROR_MESSAGE = "Error fetching data from brands or discs API"


@dataclass
class Vocabularies:
    """Normalized reference vocabularies for one classification call.

    Duplicates are kept and either list may be empty.
    """
    brands: List[str] = field(default_factory=list)
    molds: List[str] = field(default_factory=list)


def normalize_names(names: List[str]) -> List[str]:
    """Lowercase every name, preserving order and duplicates."""
    return [name.lower() for name in names]


class VocabularyLoader:
    """Loads the brand and mold vocabularies from a ReferenceDataProvider."""

    def __init__(
        self,
        provider: ReferenceDataProvider,
        settings: Optional[CategorizeSettings] = None,
    ):
        self.provider = provider
        self.settings = settings or get_settings()
        self._log = logger.bind(phase="vocabulary")

    async def _bounded(self, fetch: Awaitable[List[str]]) -> List[str]:
        # A timeout is reported the same way as any other failed fetch
        return await asyncio.wait_for(fetch, timeout=self.settings.fetch_timeout)

    async def load(self) -> Vocabularies:
        """
        Fetch and normalize both vocabularies.

        Returns:
            Vocabularies with lowercased brand and mold names

        Raises:
            VocabularyUnavailableError: If both fetches fail, or if either
                fails while partial vocabularies are not allowed
        """
        brands_result, molds_result = await asyncio.gather(
            self._bounded(self.provider.fetch_brand_names()),
            self._bounded(self.provider.fetch_mold_names()),
            return_exceptions=True,
        )

        brands_failed = self._check("brands", brands_result)
        molds_failed = self._check("molds", molds_result)

        if brands_failed and molds_failed:
            raise VocabularyUnavailableError(FETCH_ERROR_MESSAGE)
        if (brands_failed or molds_failed) and not self.settings.allow_partial_vocabulary:
            raise VocabularyUnavailableError(FETCH_ERROR_MESSAGE)

        vocabularies = Vocabularies(
            brands=[] if brands_failed else normalize_names(brands_result),
            molds=[] if molds_failed else normalize_names(molds_result),
        )
        self._log.info(
            "vocabularies_loaded",
            brands=len(vocabularies.brands),
            molds=len(vocabularies.molds),
            partial=brands_failed or molds_failed,
        )
        return vocabularies

    def _check(self, source: str, result: Union[List[str], BaseException]) -> bool:
        """Log a failed fetch and report whether it failed."""
        if not isinstance(result, BaseException):
            return False
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, asyncio.TimeoutError):
            self._log.error("vocabulary_fetch_timeout", source=source, timeout=self.settings.fetch_timeout)
        else:
            self._log.error(
                "vocabulary_fetch_failed",
                source=source,
                error_type=type(result).__name__,
                error=str(result),
            )
        return True
