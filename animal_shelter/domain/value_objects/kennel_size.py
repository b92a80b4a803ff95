from __future__ import annotations

from enum import Enum


class KennelSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    @property
    def max_weight(self) -> float | None:
        """Heaviest occupant this size class holds; None means unbounded."""
        return _MAX_WEIGHTS[self]

    def accepts(self, weight: float) -> bool:
        limit = self.max_weight
        return limit is None or weight <= limit


_MAX_WEIGHTS: dict[KennelSize, float | None] = {
    KennelSize.SMALL: 20.0,
    KennelSize.MEDIUM: 50.0,
    KennelSize.LARGE: None,
}
