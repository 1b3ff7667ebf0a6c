from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade
from breedcheck.domain.value_objects.sex import Sex


@dataclass(slots=True)
class Animal:
    id: UUID
    sex: Sex
    dysplasia_grade: DysplasiaGrade

    # Genealogy fields (weak references into the same animal set)
    sire_id: UUID | None = None
    dam_id: UUID | None = None

    # Descriptive fields
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    registration_number: str | None = None
    microchip: str | None = None
    owner_id: UUID | None = None

    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        sex: Sex,
        dysplasia_grade: DysplasiaGrade,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        name: str | None = None,
        breed: str | None = None,
        birth_date: date | None = None,
        registration_number: str | None = None,
        microchip: str | None = None,
        owner_id: UUID | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            sex=sex,
            dysplasia_grade=dysplasia_grade,
            sire_id=sire_id,
            dam_id=dam_id,
            name=name,
            breed=breed,
            birth_date=birth_date,
            registration_number=registration_number,
            microchip=microchip,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def parent_ids(self) -> list[UUID]:
        return [pid for pid in (self.sire_id, self.dam_id) if pid is not None]

    def is_parent_of(self, other: Animal) -> bool:
        return self.id in (other.sire_id, other.dam_id)

    def is_full_sibling_of(self, other: Animal) -> bool:
        if None in (self.sire_id, self.dam_id, other.sire_id, other.dam_id):
            return False
        return self.sire_id == other.sire_id and self.dam_id == other.dam_id

    def is_half_sibling_of(self, other: Animal) -> bool:
        same_sire = self.sire_id is not None and self.sire_id == other.sire_id
        same_dam = self.dam_id is not None and self.dam_id == other.dam_id
        return same_sire != same_dam
