from __future__ import annotations

from enum import Enum


class DogStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    PENDING = "PENDING"
    ADOPTED = "ADOPTED"

    @classmethod
    def parse(cls, value: str) -> DogStatus | None:
        try:
            return cls(value)
        except ValueError:
            return None
