from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from src.domain.value_objects.dog_status import DogStatus
from src.interfaces.web.models import BreedOption, DogSummary


@dataclass(slots=True)
class FilterState:
    # "" is the sentinel for "no filter"
    breed_id: str = ""
    status: str = DogStatus.AVAILABLE.value


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Failed:
    message: str


@dataclass(frozen=True, slots=True)
class Succeeded:
    items: tuple[DogSummary, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items


Outcome = Union[Loading, Failed, Succeeded]

LOADING = Loading()


@dataclass(slots=True)
class ListingState:
    """
    State owned by a single listing component instance.

    Every listing fetch takes a ticket from begin_fetch(); only the newest
    ticket may write the outcome, so a slow response for an old filter never
    overwrites the result for the filter currently selected.
    """

    filters: FilterState = field(default_factory=FilterState)
    outcome: Outcome = LOADING
    breeds: list[BreedOption] = field(default_factory=list)
    _latest_ticket: int = 0

    @property
    def loading(self) -> bool:
        return isinstance(self.outcome, Loading)

    def begin_fetch(self) -> int:
        self._latest_ticket += 1
        self.outcome = LOADING
        return self._latest_ticket

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest_ticket

    def apply(self, ticket: int, outcome: Outcome) -> bool:
        if not self.is_current(ticket):
            return False
        self.outcome = outcome
        return True

    def finish(self, ticket: int) -> None:
        """Clear the in-progress state for the current fetch if nothing was applied."""
        if self.is_current(ticket) and self.loading:
            self.outcome = Failed("Dog listing request was interrupted")
