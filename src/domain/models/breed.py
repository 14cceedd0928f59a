from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Breed:
    id: int | None
    name: str
    description: str | None = None

    @classmethod
    def create(cls, name: str, *, description: str | None = None) -> Breed:
        return cls(id=None, name=name, description=description)
