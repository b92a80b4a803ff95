from __future__ import annotations

from animal_shelter.application.errors import NotFound
from animal_shelter.domain.models.animal import Animal
from animal_shelter.domain.models.shelter import Shelter


def execute(shelter: Shelter, animal_id: int) -> Animal:
    removed, animal = shelter.try_remove_animal(animal_id)
    if not removed or animal is None:
        raise NotFound("Animal not found", details={"id": animal_id})
    return animal
