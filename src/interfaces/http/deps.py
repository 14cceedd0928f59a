from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Request

from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.web.api_client import ShelterApiClient
from src.interfaces.web.renderer import ListingRenderer


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_listing_renderer(request: Request) -> ListingRenderer:
    renderer = getattr(request.app.state, "listing_renderer", None)
    if renderer is None:
        raise RuntimeError("Listing renderer not configured")
    return renderer


async def get_shelter_api(request: Request) -> AsyncIterator[ShelterApiClient]:
    """API client for the pages; talks to this app in-process unless api_base_url is set."""
    settings = get_app_settings(request)
    if settings.api_base_url:
        api = ShelterApiClient.create(
            settings.api_base_url, timeout=settings.listing_timeout_seconds
        )
    else:
        api = ShelterApiClient.create(
            "http://shelter.internal",
            timeout=settings.listing_timeout_seconds,
            transport=httpx.ASGITransport(app=request.app),
        )
    async with api:
        yield api
