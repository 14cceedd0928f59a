from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from src.domain.value_objects.dog_status import DogStatus
from src.interfaces.http.deps import get_listing_renderer, get_shelter_api
from src.interfaces.web.api_client import ShelterApiClient, ShelterApiError
from src.interfaces.web.component import DogListComponent
from src.interfaces.web.renderer import ListingRenderer
from src.interfaces.web.state import FilterState

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def dog_list_page(
    breed_id: str = Query(""),
    status: str = Query(DogStatus.AVAILABLE.value),
    api: ShelterApiClient = Depends(get_shelter_api),
    renderer: ListingRenderer = Depends(get_listing_renderer),
) -> HTMLResponse:
    component = DogListComponent(
        api, filters=FilterState(breed_id=breed_id, status=status), renderer=renderer
    )
    await component.mount()
    html = renderer.render_page(title="Available Dogs", content=component.render())
    return HTMLResponse(html)


@router.get("/dog/{dog_id}", response_class=HTMLResponse)
async def dog_detail_page(
    dog_id: int,
    api: ShelterApiClient = Depends(get_shelter_api),
    renderer: ListingRenderer = Depends(get_listing_renderer),
) -> HTMLResponse:
    try:
        dog = await api.get_dog(dog_id)
    except ShelterApiError as exc:
        if exc.status_code != 404:
            raise
        html = renderer.render_page(
            title="Dog not found", content=renderer.render_not_found("Dog not found")
        )
        return HTMLResponse(html, status_code=404)
    html = renderer.render_page(title=dog.name, content=renderer.render_dog_detail(dog))
    return HTMLResponse(html)
