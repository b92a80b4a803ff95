from __future__ import annotations

from dataclasses import dataclass, field

from animal_shelter.domain.models.animal import Animal
from animal_shelter.domain.value_objects.kennel_size import KennelSize


@dataclass(slots=True)
class Kennel:
    """Single-occupant housing slot of a fixed size class.

    The occupant is only ever replaced through the ``try_*`` methods so the
    occupant's ``kennel_id`` always matches ``id``.
    """

    id: int
    size: KennelSize
    occupant: Animal | None = field(default=None)

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    def can_occupy(self, animal: Animal) -> bool:
        if self.occupant is not None:
            return False
        return self.size.accepts(animal.weight)

    def try_add_animal(self, animal: Animal) -> tuple[bool, Animal]:
        if not self.can_occupy(animal):
            return False, animal
        placed = animal.with_kennel(self.id)
        self.occupant = placed
        return True, placed

    def try_remove_animal(self, animal_id: int | None = None) -> tuple[bool, Animal | None]:
        """Vacate the kennel, optionally only when it holds ``animal_id``."""
        occupant = self.occupant
        if occupant is None:
            return False, None
        if animal_id is not None and occupant.id != animal_id:
            return False, None
        self.occupant = None
        return True, occupant
