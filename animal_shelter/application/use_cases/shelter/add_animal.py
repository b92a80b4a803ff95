from __future__ import annotations

import logging
from dataclasses import dataclass

from animal_shelter.application.errors import CapacityExhausted
from animal_shelter.domain.models.animal import Animal
from animal_shelter.domain.models.shelter import Shelter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddAnimalInput:
    type: str
    name: str
    weight: float


def execute(shelter: Shelter, payload: AddAnimalInput) -> Animal:
    animal = Animal.create(type=payload.type, name=payload.name, weight=payload.weight)
    added, placed = shelter.try_add_animal(animal)
    if not added:
        logger.info(
            "No kennel available for %s %s (weight %s)", animal.type, animal.name, animal.weight
        )
        raise CapacityExhausted(
            "No kennel available for animal",
            details={
                "id": animal.id,
                "kennel_id": animal.kennel_id,
                "type": animal.type,
                "name": animal.name,
                "weight": animal.weight,
            },
        )
    return placed
