"""Unit tests for detection, reference and response models."""
import pytest
from pydantic import ValidationError

from disc_categorizer.models import (
    BrandCollection,
    CategorizedResult,
    CategorizeResponse,
    Category,
    DetectedWord,
    ImageDetectionData,
    MoldCollection,
    PrimaryColor,
    TextData,
)


class TestDetectionModels:

    def test_extra_word_metadata_preserved(self):
        data = ImageDetectionData.model_validate({
            "text": {"words": [{"word": "Innova", "boundingBox": [1, 2, 3, 4]}]},
            "colors": [],
        })

        assert data.text.words[0].model_dump() == {
            "word": "Innova",
            "category": None,
            "boundingBox": [1, 2, 3, 4],
        }

    def test_word_is_immutable(self):
        word = DetectedWord(word="Innova")

        with pytest.raises(ValidationError):
            word.category = Category.BRAND

    def test_missing_text_rejected(self):
        with pytest.raises(ValidationError):
            ImageDetectionData.model_validate({"colors": []})

    def test_category_values(self):
        assert {c.value for c in Category} == {"PhoneNumber", "Disc", "Brand", "NA"}


class TestReferenceModels:

    def test_brand_collection_names(self):
        collection = BrandCollection.model_validate(
            {"data": [{"attributes": {"BrandName": "Innova"}}, {"attributes": {"BrandName": "MVP"}}]}
        )

        assert collection.names() == ["Innova", "MVP"]

    def test_mold_collection_null_data(self):
        assert MoldCollection.model_validate({"data": None}).names() == []

    def test_mold_record_without_attributes_rejected(self):
        with pytest.raises(ValidationError):
            MoldCollection.model_validate({"data": [{"id": 1}]})


class TestCategorizeResponse:

    @pytest.mark.parametrize("fields", [{}, {"data": None, "errors": None}])
    def test_requires_data_or_errors(self, fields):
        with pytest.raises(ValidationError):
            CategorizeResponse(**fields)

    def test_rejects_both_data_and_errors(self):
        result = CategorizedResult(
            text=TextData(words=[]),
            colors=PrimaryColor(primary="red", score=0.8),
        )

        with pytest.raises(ValidationError):
            CategorizeResponse(data=result, errors=[])

    def test_failure_to_dict(self):
        response = CategorizeResponse.failure("boom", "500")

        assert not response.ok
        assert response.to_dict() == {"errors": [{"message": "boom", "code": "500"}]}

    def test_success_to_dict(self):
        result = CategorizedResult(
            text=TextData(words=[DetectedWord(word="Buzzz", category=Category.DISC)]),
            colors=PrimaryColor(primary="red", score=0.8),
        )

        response = CategorizeResponse.success(result)

        assert response.ok
        assert response.to_dict() == {
            "data": {
                "text": {"words": [{"word": "Buzzz", "category": "Disc"}]},
                "colors": {"primary": "red", "score": 0.8},
            }
        }
