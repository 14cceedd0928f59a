from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.value_objects.dog_status import DogStatus

GENDERS = {"Male", "Female"}


def _normalize_gender(value: str | None) -> str | None:
    if value is None:
        return value
    value = value.strip().capitalize()
    if value not in GENDERS:
        raise ValueError("gender must be Male or Female")
    return value


class DogCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    breed_id: int
    age: int | None = Field(default=None, ge=0, le=40)
    gender: str | None = None
    description: str | None = None
    status: DogStatus = DogStatus.AVAILABLE

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, v: str | None) -> str | None:
        return _normalize_gender(v)


class DogUpdate(BaseModel):
    version: int
    name: str | None = Field(default=None, min_length=1, max_length=100)
    breed_id: int | None = None
    age: int | None = Field(default=None, ge=0, le=40)
    gender: str | None = None
    description: str | None = None
    status: DogStatus | None = None

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, v: str | None) -> str | None:
        return _normalize_gender(v)


class DogSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    breed: str
    status: DogStatus


class DogResponse(DogSummaryResponse):
    breed_id: int
    age: int | None = None
    gender: str | None = None
    description: str | None = None
    created_at: datetime
    updated_at: datetime
    version: int
