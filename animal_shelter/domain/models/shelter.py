from __future__ import annotations

import logging
from copy import copy

from animal_shelter.domain.models.animal import Animal
from animal_shelter.domain.models.kennel import Kennel
from animal_shelter.domain.value_objects.kennel_size import KennelSize

logger = logging.getLogger(__name__)

DEFAULT_SMALL_KENNELS = 16
DEFAULT_MEDIUM_KENNELS = 10
DEFAULT_LARGE_KENNELS = 8


class Shelter:
    """Fixed set of kennels with first-fit placement of animals.

    Kennel ids run 1..N in one contiguous block per size class: Small first,
    then Medium, then Large. Kennels live in a list at index ``id - 1`` and
    every scan walks that list in ascending id order.
    """

    def __init__(
        self,
        small: int = DEFAULT_SMALL_KENNELS,
        medium: int = DEFAULT_MEDIUM_KENNELS,
        large: int = DEFAULT_LARGE_KENNELS,
    ) -> None:
        if min(small, medium, large) < 0:
            raise ValueError("Kennel counts must be non-negative")
        sizes = (
            [KennelSize.SMALL] * small + [KennelSize.MEDIUM] * medium + [KennelSize.LARGE] * large
        )
        self._kennels: list[Kennel] = [
            Kennel(id=index, size=size) for index, size in enumerate(sizes, start=1)
        ]
        self._animal_index = 0

    @property
    def total_kennels(self) -> int:
        return len(self._kennels)

    @property
    def next_animal_id(self) -> int:
        return self._animal_index

    def _kennel(self, kennel_id: int) -> Kennel | None:
        if 1 <= kennel_id <= len(self._kennels):
            return self._kennels[kennel_id - 1]
        return None

    def try_add_animal(self, animal: Animal) -> tuple[bool, Animal]:
        """Place ``animal`` in the first kennel that accepts it.

        On success the returned animal carries a fresh id and its kennel id.
        On failure nothing changes and the input is returned as is.
        """
        candidate = animal.with_id(self._animal_index)
        for kennel in self._kennels:
            added, placed = kennel.try_add_animal(candidate)
            if added:
                self._animal_index += 1
                logger.debug(
                    "Placed animal id=%s name=%s weight=%s in kennel %s (%s)",
                    placed.id,
                    placed.name,
                    placed.weight,
                    kennel.id,
                    kennel.size.value,
                )
                return True, placed
        return False, animal

    def try_get_animal(self, animal_id: int) -> tuple[bool, Animal | None]:
        for kennel in self._kennels:
            occupant = kennel.occupant
            if occupant is not None and occupant.id == animal_id:
                return True, occupant
        return False, None

    def try_remove_animal(self, animal_id: int) -> tuple[bool, Animal | None]:
        for kennel in self._kennels:
            removed, animal = kennel.try_remove_animal(animal_id)
            if removed:
                logger.debug("Removed animal id=%s from kennel %s", animal_id, kennel.id)
                return True, animal
        return False, None

    def get_shelter_kennels(self) -> list[Kennel]:
        return [copy(kennel) for kennel in self._kennels]

    def get_available_kennels(self) -> list[Kennel]:
        return [copy(kennel) for kennel in self._kennels if not kennel.is_occupied]

    def try_move_animal(self, source_id: int, target_id: int) -> bool:
        """Move the occupant of ``source_id`` into the vacant ``target_id``.

        A target that turns the animal down leaves it back in the source.
        """
        source = self._kennel(source_id)
        target = self._kennel(target_id)
        if source is None or target is None or not source.is_occupied or target.is_occupied:
            return False
        removed, animal = source.try_remove_animal()
        if not removed or animal is None:
            return False
        moved, _ = target.try_add_animal(animal)
        if moved:
            logger.debug("Moved animal id=%s from kennel %s to %s", animal.id, source_id, target_id)
            return True
        source.try_add_animal(animal)
        return False

    def reorganize(self) -> list[Kennel]:
        """Single compaction pass from the highest kennel id down.

        Each occupant is offered every lower kennel in ascending order and
        moves into the first one that can hold it. Once it has moved, the
        remaining offers for that source are no-ops, and vacancies opened
        later in the pass are not revisited, so a second call may still move
        animals.
        """
        for source_id in range(len(self._kennels), 0, -1):
            occupant = self._kennels[source_id - 1].occupant
            if occupant is None:
                continue
            for target_id in range(1, source_id):
                if self._kennels[target_id - 1].can_occupy(occupant):
                    self.try_move_animal(source_id, target_id)
        return self.get_shelter_kennels()
