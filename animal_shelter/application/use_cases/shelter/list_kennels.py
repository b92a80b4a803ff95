from __future__ import annotations

from animal_shelter.domain.models.kennel import Kennel
from animal_shelter.domain.models.shelter import Shelter


def execute(shelter: Shelter, *, available_only: bool = False) -> list[Kennel]:
    if available_only:
        return shelter.get_available_kennels()
    return shelter.get_shelter_kennels()
