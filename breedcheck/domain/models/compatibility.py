from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(slots=True, frozen=True)
class CompatibilityResult:
    animal_id_a: UUID
    animal_id_b: UUID
    gender_compatible: bool
    relatedness: float  # percentage, unrounded
    relatedness_compatible: bool
    dysplasia_compatible: bool

    @property
    def overall_compatible(self) -> bool:
        return self.gender_compatible and self.relatedness_compatible and self.dysplasia_compatible
