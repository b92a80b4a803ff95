from __future__ import annotations

from animal_shelter.application.errors import NotFound
from animal_shelter.domain.models.animal import Animal
from animal_shelter.domain.models.shelter import Shelter


def execute(shelter: Shelter, animal_id: int) -> Animal:
    found, animal = shelter.try_get_animal(animal_id)
    if not found or animal is None:
        raise NotFound("Animal not found")
    return animal
