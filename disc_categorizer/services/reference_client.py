"""
Reference Data Providers

Sources of the two reference vocabularies: brand names and disc mold names.
The HTTP provider talks to the reference API with httpx; the static provider
serves fixed lists (local files, tests, offline runs).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence, Type, Union

import httpx
import structlog
from pydantic import ValidationError

from disc_categorizer.config import CategorizeSettings, get_settings
from disc_categorizer.errors import ReferenceDataDecodeError, ReferenceDataError
from disc_categorizer.models.reference import BrandCollection, MoldCollection

logger = structlog.get_logger(__name__)


class ReferenceDataProvider(ABC):
    """Source of raw (not yet normalized) brand and mold names."""

    @abstractmethod
    async def fetch_brand_names(self) -> List[str]:
        """Fetch every known brand name."""

    @abstractmethod
    async def fetch_mold_names(self) -> List[str]:
        """Fetch every known disc mold name."""


class HttpReferenceDataProvider(ReferenceDataProvider):
    """
    Async HTTP client for the brands/discs reference API.

    A full snapshot of each collection is requested on every call. Failures
    are not retried.

    Usage:
        async with HttpReferenceDataProvider() as provider:
            brands = await provider.fetch_brand_names()
    """

    def __init__(
        self,
        settings: Optional[CategorizeSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the provider.

        Args:
            settings: Settings to read URLs and timeout from (defaults to config)
            transport: Optional httpx transport override
        """
        self.settings = settings or get_settings()
        self.base_url = self.settings.reference_api_url.rstrip("/")
        self.timeout = httpx.Timeout(self.settings.fetch_timeout, connect=5.0)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._log = logger.bind(service="reference-api", base_url=self.base_url)

    async def __aenter__(self) -> "HttpReferenceDataProvider":
        """Context manager entry - create async client."""
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={
                "Accept": "application/json",
                "User-Agent": "disc-categorizer/1.0",
            },
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close async client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise ReferenceDataError(
                "HttpReferenceDataProvider not initialized. "
                "Use 'async with HttpReferenceDataProvider() as provider:'"
            )
        return self._client

    async def fetch_brand_names(self) -> List[str]:
        collection = await self._fetch_collection(self.settings.brands_path, BrandCollection)
        return collection.names()

    async def fetch_mold_names(self) -> List[str]:
        collection = await self._fetch_collection(self.settings.discs_path, MoldCollection)
        return collection.names()

    async def _fetch_collection(
        self,
        path: str,
        model: Type[Union[BrandCollection, MoldCollection]],
    ) -> Union[BrandCollection, MoldCollection]:
        """
        GET ``path`` and validate the payload against ``model``.

        Raises:
            ReferenceDataError: On transport errors or non-2xx responses
            ReferenceDataDecodeError: On invalid JSON or unexpected shape
        """
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._log.error(
                "reference_fetch_http_error",
                path=path,
                status_code=e.response.status_code,
                body=e.response.text[:200],
            )
            raise ReferenceDataError(
                f"Reference API returned {e.response.status_code} for {path}"
            ) from e
        except httpx.HTTPError as e:
            self._log.error("reference_fetch_error", path=path, error=str(e))
            raise ReferenceDataError(f"Reference API request failed for {path}: {e}") from e

        try:
            collection = model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            self._log.error("reference_decode_error", path=path, error=str(e)[:500])
            raise ReferenceDataDecodeError(f"Unexpected payload from {path}") from e

        self._log.info("reference_fetch_completed", path=path, records=len(collection.data))
        return collection


class StaticReferenceDataProvider(ReferenceDataProvider):
    """Serves fixed name lists, optionally failing one or both fetches."""

    def __init__(
        self,
        brand_names: Sequence[str] = (),
        mold_names: Sequence[str] = (),
        brand_error: Optional[Exception] = None,
        mold_error: Optional[Exception] = None,
    ):
        self.brand_names = list(brand_names)
        self.mold_names = list(mold_names)
        self.brand_error = brand_error
        self.mold_error = mold_error

    @classmethod
    def from_files(
        cls,
        brands_file: Union[str, Path],
        molds_file: Union[str, Path],
    ) -> "StaticReferenceDataProvider":
        """Load newline separated name lists; blank lines are skipped."""
        return cls(
            brand_names=_read_names(Path(brands_file)),
            mold_names=_read_names(Path(molds_file)),
        )

    async def fetch_brand_names(self) -> List[str]:
        if self.brand_error is not None:
            raise self.brand_error
        return list(self.brand_names)

    async def fetch_mold_names(self) -> List[str]:
        if self.mold_error is not None:
            raise self.mold_error
        return list(self.mold_names)


def _read_names(path: Path) -> List[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]
