from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from src.interfaces.web.api_client import ShelterApiClient, ShelterApiError, describe_error
from src.interfaces.web.models import BreedOption
from src.interfaces.web.state import Failed, FilterState, ListingState, Outcome, Succeeded

logger = logging.getLogger(__name__)

FETCH_ERRORS = (ShelterApiError, httpx.HTTPError, ValueError)


def build_listing_query(filters: FilterState) -> str:
    """Query string for /api/dogs: breed_id then status, empty selections omitted."""
    params: list[tuple[str, str]] = []
    if filters.breed_id:
        params.append(("breed_id", filters.breed_id))
    if filters.status:
        params.append(("status", filters.status))
    if not params:
        return ""
    return "?" + urlencode(params)


async def fetch_listing(
    state: ListingState,
    api: ShelterApiClient,
    *,
    ticket: int | None = None,
    filters: FilterState | None = None,
) -> Outcome:
    """
    Fetch /api/dogs for the given filter snapshot (default: current filters).
    The outcome is written to the state only while the ticket is the newest one.
    """
    if ticket is None:
        ticket = state.begin_fetch()
    query = build_listing_query(filters if filters is not None else state.filters)
    outcome: Outcome
    try:
        try:
            dogs = await api.get_dogs(query)
            outcome = Succeeded(tuple(dogs))
        except FETCH_ERRORS as exc:
            logger.info("Dog listing fetch failed for %r: %s", query, describe_error(exc))
            outcome = Failed(describe_error(exc))
        except Exception as exc:
            logger.exception("Unexpected error fetching dogs for %r", query)
            outcome = Failed(describe_error(exc))
        if not state.apply(ticket, outcome):
            logger.debug("Discarding superseded listing response (ticket %d)", ticket)
        return outcome
    finally:
        state.finish(ticket)


async def fetch_breeds(state: ListingState, api: ShelterApiClient) -> list[BreedOption]:
    try:
        state.breeds = await api.get_breeds()
    except Exception as exc:
        logger.warning("Error fetching breeds: %s", describe_error(exc))
    return state.breeds
