"""Schemas for records returned by the brands/discs reference API.

Payloads look like ``{"data": [{"attributes": {"BrandName": "Innova", ...}}]}``.
Validation happens at the provider boundary so downstream code only ever
sees plain name lists.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BrandAttributes(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    brand_name: str = Field(..., alias="BrandName")


class MoldAttributes(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    mold_name: str = Field(..., alias="MoldName")


class BrandRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    attributes: BrandAttributes


class MoldRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    attributes: MoldAttributes


class _Collection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("data", mode="before", check_fields=False)
    @classmethod
    def missing_data_is_empty(cls, v: Any) -> Any:
        """A null ``data`` member means the source returned no records."""
        return [] if v is None else v


class BrandCollection(_Collection):
    data: List[BrandRecord] = Field(default_factory=list)

    def names(self) -> List[str]:
        return [record.attributes.brand_name for record in self.data]


class MoldCollection(_Collection):
    data: List[MoldRecord] = Field(default_factory=list)

    def names(self) -> List[str]:
        return [record.attributes.mold_name for record in self.data]
