from __future__ import annotations

from typing import Protocol

from breedcheck.application.interfaces.repositories.animals import AnimalRepository
from breedcheck.application.interfaces.repositories.breeding_policy import (
    BreedingPolicyRepository,
)


class UnitOfWork(Protocol):
    animals: AnimalRepository
    breeding_policies: BreedingPolicyRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
