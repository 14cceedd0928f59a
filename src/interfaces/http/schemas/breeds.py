from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BreedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class BreedDetailResponse(BreedResponse):
    description: str | None = None
