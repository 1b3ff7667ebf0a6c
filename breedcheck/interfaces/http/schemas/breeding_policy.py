from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from breedcheck.domain.models.breeding_policy import BreedingPolicy

DysplasiaMatrixPayload = dict[str, dict[str, bool]]


class BreedingPolicyUpdate(BaseModel):
    dysplasia_matrix: DysplasiaMatrixPayload | None = None
    inbreeding_limit: float | None = Field(default=None, ge=0, le=100)
    max_generations: int | None = Field(default=None, ge=1, le=10)


class BreedingPolicyResponse(BaseModel):
    id: UUID
    dysplasia_matrix: DysplasiaMatrixPayload
    inbreeding_limit: float
    max_generations: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, policy: BreedingPolicy) -> BreedingPolicyResponse:
        return cls(
            id=policy.id,
            dysplasia_matrix=policy.dysplasia_matrix.to_mapping(),
            inbreeding_limit=policy.inbreeding_limit,
            max_generations=policy.max_generations,
            is_active=policy.is_active,
            created_at=policy.created_at,
            updated_at=policy.updated_at,
        )
