from __future__ import annotations

import logging

from animal_shelter.domain.models.animal import Animal
from animal_shelter.domain.models.shelter import Shelter

logger = logging.getLogger(__name__)

DEMO_ANIMALS: tuple[tuple[str, str, float], ...] = (
    ("Dog", "Max", 34.5),
    ("Dog", "Sam", 18.4),
    ("Cat", "Kitty", 8.6),
    ("Dog", "Spot", 56.8),
    ("Dog", "Bella", 22.0),
    ("Cat", "Luna", 11.1),
    ("Cat", "Lily", 13.2),
    ("Cat", "Milo", 4.2),
    ("Dog", "Otis", 12.1),
    ("Pig", "Leo", 78.0),
    ("Snake", "Chloe", 8.2),
    ("Pony", "Jasper", 92.9),
    ("Ferret", "Lily", 2.1),
)


def demo_animals() -> list[Animal]:
    animals = [Animal.create(type=t, name=n, weight=w) for t, n, w in DEMO_ANIMALS]
    animals += [Animal.create(type="Cat", name=f"Dizzy{i}", weight=9.1) for i in range(1, 11)]
    animals += [Animal.create(type="Dog", name=f"Bob{i}", weight=34.5) for i in range(1, 11)]
    return animals


def seed_shelter(shelter: Shelter) -> int:
    """Add the demo animals in order; returns how many were placed."""
    placed = 0
    for animal in demo_animals():
        added, _ = shelter.try_add_animal(animal)
        if added:
            placed += 1
        else:
            logger.warning("Demo animal %s %s did not fit", animal.type, animal.name)
    logger.info("Seeded shelter with %d demo animal(s)", placed)
    return placed
