from __future__ import annotations

from fastapi import APIRouter, Depends

from animal_shelter.application.use_cases.shelter import add_animal, get_animal, remove_animal
from animal_shelter.domain.models.shelter import Shelter
from animal_shelter.interfaces.http.deps import get_shelter
from animal_shelter.interfaces.http.schemas.animals import AnimalCreate, AnimalResponse

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_by_id(animal_id: int, shelter: Shelter = Depends(get_shelter)):
    animal = get_animal.execute(shelter, animal_id)
    return AnimalResponse.model_validate(animal)


@router.post("/", response_model=AnimalResponse)
async def add_animal_to_shelter(payload: AnimalCreate, shelter: Shelter = Depends(get_shelter)):
    """Add an animal to the shelter if there's room."""
    animal = add_animal.execute(
        shelter,
        add_animal.AddAnimalInput(type=payload.type, name=payload.name, weight=payload.weight),
    )
    return AnimalResponse.model_validate(animal)


@router.delete("/{animal_id}", response_model=AnimalResponse)
async def remove_animal_from_shelter(animal_id: int, shelter: Shelter = Depends(get_shelter)):
    animal = remove_animal.execute(shelter, animal_id)
    return AnimalResponse.model_validate(animal)
