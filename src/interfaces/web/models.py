"""View records consumed by the dog listing pages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BreedOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class DogSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    breed: str
    # Kept as a plain string: unknown statuses are rendered without a badge
    status: str


class DogDetail(DogSummary):
    age: int | None = None
    gender: str | None = None
    description: str | None = None
