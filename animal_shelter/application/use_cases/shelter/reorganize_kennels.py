from __future__ import annotations

import logging

from animal_shelter.domain.models.kennel import Kennel
from animal_shelter.domain.models.shelter import Shelter

logger = logging.getLogger(__name__)


def execute(shelter: Shelter) -> list[Kennel]:
    before = {k.occupant.id: k.id for k in shelter.get_shelter_kennels() if k.occupant}
    kennels = shelter.reorganize()
    moved = sum(1 for k in kennels if k.occupant and before.get(k.occupant.id) != k.id)
    logger.info("Reorganized shelter: %d animal(s) moved", moved)
    return kennels
