from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.dogs import (
    create_dog,
    delete_dog,
    get_dog,
    list_dogs,
    update_dog,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.dogs import (
    DogCreate,
    DogResponse,
    DogSummaryResponse,
    DogUpdate,
)

router = APIRouter(prefix="/dogs", tags=["dogs"])


@router.get("", response_model=list[DogSummaryResponse])
async def list_dogs_endpoint(
    breed_id: int | None = Query(None, description="Only dogs of this breed"),
    status_filter: str | None = Query(
        None,
        alias="status",
        description="Adoption status: AVAILABLE, PENDING or ADOPTED",
    ),
    uow=Depends(get_uow),
) -> list[DogSummaryResponse]:
    dogs = await list_dogs.execute(uow, breed_id=breed_id, status=status_filter)
    return [DogSummaryResponse.model_validate(dog) for dog in dogs]


@router.post("", response_model=DogResponse, status_code=status.HTTP_201_CREATED)
async def create_dog_endpoint(payload: DogCreate, uow=Depends(get_uow)) -> DogResponse:
    created = await create_dog.execute(
        uow,
        create_dog.CreateDogInput(
            name=payload.name,
            breed_id=payload.breed_id,
            age=payload.age,
            gender=payload.gender,
            description=payload.description,
            status=payload.status,
        ),
    )
    return DogResponse.model_validate(created)


@router.get("/{dog_id}", response_model=DogResponse)
async def get_dog_endpoint(dog_id: int, uow=Depends(get_uow)) -> DogResponse:
    dog = await get_dog.execute(uow, dog_id)
    return DogResponse.model_validate(dog)


@router.patch("/{dog_id}", response_model=DogResponse)
async def update_dog_endpoint(
    dog_id: int,
    payload: DogUpdate,
    uow=Depends(get_uow),
) -> DogResponse:
    updated = await update_dog.execute(
        uow,
        dog_id,
        update_dog.UpdateDogInput(
            version=payload.version,
            name=payload.name,
            breed_id=payload.breed_id,
            age=payload.age,
            gender=payload.gender,
            description=payload.description,
            status=payload.status,
        ),
    )
    return DogResponse.model_validate(updated)


@router.delete("/{dog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dog_endpoint(dog_id: int, uow=Depends(get_uow)) -> None:
    await delete_dog.execute(uow, dog_id)
    return None
