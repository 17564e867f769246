"""Pytest configuration and shared fixtures for the test suite.

No test talks to the network: reference data comes from
StaticReferenceDataProvider or an httpx.MockTransport.
"""
import os

import pytest

from disc_categorizer.config import CategorizeSettings, get_settings
from disc_categorizer.services.reference_client import StaticReferenceDataProvider


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up basic test environment variables before any tests run."""
    os.environ.setdefault("CATEGORIZE_LOG_LEVEL", "INFO")
    os.environ.setdefault("CATEGORIZE_ENVIRONMENT", "development")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def settings() -> CategorizeSettings:
    """Settings with the default fail-on-any-fetch-error policy."""
    return CategorizeSettings(
        match_threshold=0.35,
        fetch_timeout=2.0,
        allow_partial_vocabulary=False,
    )


@pytest.fixture
def partial_settings(settings) -> CategorizeSettings:
    """Settings that degrade to a single vocabulary on one failed fetch."""
    return settings.model_copy(update={"allow_partial_vocabulary": True})


@pytest.fixture
def brand_names() -> list:
    return ["Innova", "Discraft", "MVP"]


@pytest.fixture
def mold_names() -> list:
    return ["Destroyer", "Buzzz", "Roc"]


@pytest.fixture
def provider(brand_names, mold_names) -> StaticReferenceDataProvider:
    return StaticReferenceDataProvider(brand_names=brand_names, mold_names=mold_names)


@pytest.fixture
def detection_payload() -> dict:
    """Raw ImageDetectionData as produced by the vision step."""
    return {
        "text": {
            "words": [
                {"word": "Innova", "boundingBox": {"x": 10, "y": 12, "w": 80, "h": 20}},
                {"word": "x", "boundingBox": {"x": 95, "y": 12, "w": 6, "h": 20}},
                {"word": "Destroyr", "boundingBox": {"x": 10, "y": 40, "w": 90, "h": 22}},
                {"word": "555-123-4567", "boundingBox": {"x": 10, "y": 70, "w": 120, "h": 18}},
                {"word": "qwjkplm", "boundingBox": {"x": 10, "y": 95, "w": 70, "h": 18}},
            ],
        },
        "colors": [
            {"name": "red", "score": 0.4},
            {"name": "blue", "score": 0.9},
            {"name": "green", "score": 0.9},
        ],
    }
