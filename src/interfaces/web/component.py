from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from src.interfaces.web.api_client import ShelterApiClient
from src.interfaces.web.fetcher import fetch_breeds, fetch_listing
from src.interfaces.web.renderer import ListingRenderer
from src.interfaces.web.state import FilterState, ListingState

logger = logging.getLogger(__name__)


class DogListComponent:
    """
    Dog listing with breed/status filters.

    mount() loads breeds once and the listing concurrently; every filter
    change switches the listing to loading right away and refetches in a
    background task. Previous fetches are not cancelled.
    """

    def __init__(
        self,
        api: ShelterApiClient,
        *,
        filters: FilterState | None = None,
        renderer: ListingRenderer | None = None,
    ) -> None:
        self._api = api
        self._renderer = renderer or ListingRenderer.create_default()
        self.state = ListingState(filters=filters or FilterState())
        self._mounted = False
        self._pending: set[asyncio.Task] = set()

    async def mount(self) -> None:
        if self._mounted:
            raise RuntimeError("DogListComponent is already mounted")
        self._mounted = True
        ticket = self.state.begin_fetch()
        await asyncio.gather(
            fetch_breeds(self.state, self._api),
            fetch_listing(self.state, self._api, ticket=ticket, filters=replace(self.state.filters)),
        )

    def select_breed(self, breed_id: str) -> asyncio.Task:
        self.state.filters.breed_id = breed_id
        return self._refresh_listing()

    def select_status(self, status: str) -> asyncio.Task:
        self.state.filters.status = status
        return self._refresh_listing()

    def _refresh_listing(self) -> asyncio.Task:
        ticket = self.state.begin_fetch()
        logger.debug("Refreshing dog listing (ticket %d, filters=%s)", ticket, self.state.filters)
        snapshot = replace(self.state.filters)
        task = asyncio.create_task(
            fetch_listing(self.state, self._api, ticket=ticket, filters=snapshot)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def settle(self) -> None:
        """Wait for every outstanding listing fetch."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def render(self) -> str:
        return self._renderer.render_listing(self.state)
