from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.errors import NotFound
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.breeds import BreedDetailResponse, BreedResponse

router = APIRouter(prefix="/breeds", tags=["breeds"])


@router.get("", response_model=list[BreedResponse])
async def list_breeds(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breeds = await uow.breeds.list()
    return [BreedResponse(id=b.id, name=b.name) for b in breeds]


@router.get("/{breed_id}", response_model=BreedDetailResponse)
async def get_breed(breed_id: int, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await uow.breeds.get(breed_id)
    if not breed:
        raise NotFound("Breed not found")
    return BreedDetailResponse(id=breed.id, name=breed.name, description=breed.description)
