from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from animal_shelter.domain.value_objects.kennel_size import KennelSize
from animal_shelter.interfaces.http.schemas.animals import AnimalResponse


class KennelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    size: KennelSize
    occupant: AnimalResponse | None = None
