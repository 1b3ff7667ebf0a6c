from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_serializer

from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade


def _present(value: float) -> float:
    """Relatedness is rounded only when it leaves the service."""
    return round(value, 2)


class AnimalPairRequest(BaseModel):
    animal_id_a: UUID
    animal_id_b: UUID


class DysplasiaPairRequest(BaseModel):
    grade_a: str
    grade_b: str


class RelatednessResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal_id_a: UUID
    animal_id_b: UUID
    relatedness: float

    @field_serializer("relatedness")
    def round_relatedness(self, value: float) -> float:
        return _present(value)


class DysplasiaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    grade_a: DysplasiaGrade
    grade_b: DysplasiaGrade
    compatible: bool


class CompatibilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal_id_a: UUID
    animal_id_b: UUID
    gender_compatible: bool
    relatedness: float
    relatedness_compatible: bool
    dysplasia_compatible: bool
    overall_compatible: bool

    @field_serializer("relatedness")
    def round_relatedness(self, value: float) -> float:
        return _present(value)
