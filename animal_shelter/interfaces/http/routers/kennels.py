from __future__ import annotations

from fastapi import APIRouter, Depends

from animal_shelter.application.use_cases.shelter import list_kennels, reorganize_kennels
from animal_shelter.domain.models.shelter import Shelter
from animal_shelter.interfaces.http.deps import get_shelter
from animal_shelter.interfaces.http.schemas.kennels import KennelResponse

router = APIRouter(prefix="/kennels", tags=["kennels"])


@router.get("/", response_model=list[KennelResponse])
async def list_shelter_kennels(shelter: Shelter = Depends(get_shelter)):
    """Current status of every kennel, in kennel id order."""
    kennels = list_kennels.execute(shelter)
    return [KennelResponse.model_validate(k) for k in kennels]


@router.get("/available", response_model=list[KennelResponse])
async def list_available_kennels(shelter: Shelter = Depends(get_shelter)):
    kennels = list_kennels.execute(shelter, available_only=True)
    return [KennelResponse.model_validate(k) for k in kennels]


# GET kept for clients of the original endpoint
@router.api_route("/reorganize", methods=["GET", "POST"], response_model=list[KennelResponse])
async def reorganize(shelter: Shelter = Depends(get_shelter)):
    """Move animals into smaller vacant kennels and return every kennel."""
    kennels = reorganize_kennels.execute(shelter)
    return [KennelResponse.model_validate(k) for k in kennels]
