from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Animal:
    type: str
    name: str
    weight: float
    id: int | None = None
    kennel_id: int | None = None

    @classmethod
    def create(cls, type: str, name: str, weight: float) -> Animal:  # noqa: A002
        return cls(type=type, name=name, weight=weight)

    def with_id(self, animal_id: int) -> Animal:
        return replace(self, id=animal_id)

    def with_kennel(self, kennel_id: int) -> Animal:
        return replace(self, kennel_id=kennel_id)
