"""
Response Models
===============

Uniform response envelope: exactly one of ``data`` or ``errors`` is present.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from disc_categorizer.models.detection import CategorizedResult


class ErrorDetail(BaseModel):
    """
    A single reported error.

    Attributes:
        message: Human-readable error message
        code: HTTP-style status code as a string (e.g. "500")
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Error fetching data from brands or discs API",
                "code": "500",
            }
        }
    )

    message: str
    code: str


class CategorizeResponse(BaseModel):
    """Result of a categorization call."""

    data: Optional[CategorizedResult] = None
    errors: Optional[List[ErrorDetail]] = Field(default=None)

    @model_validator(mode="after")
    def exactly_one_of_data_or_errors(self) -> "CategorizeResponse":
        if (self.data is None) == (self.errors is None):
            raise ValueError("exactly one of data or errors must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.errors is None

    @classmethod
    def success(cls, result: CategorizedResult) -> "CategorizeResponse":
        return cls(data=result)

    @classmethod
    def failure(cls, message: str, code: str) -> "CategorizeResponse":
        return cls(errors=[ErrorDetail(message=message, code=code)])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``{"data": ...}`` or ``{"errors": [...]}``."""
        if self.errors is not None:
            return {"errors": [error.model_dump() for error in self.errors]}
        return {"data": self.data.model_dump(mode="json")}
