from __future__ import annotations

import asyncio
from types import SimpleNamespace
from uuid import UUID

import pytest

from breedcheck.application.errors import RepositoryUnavailable
from breedcheck.domain.models.animal import Animal
from breedcheck.domain.models.breeding_policy import BreedingPolicy
from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade
from breedcheck.domain.value_objects.sex import Sex


class InMemoryAnimals:
    def __init__(self) -> None:
        self.records: dict[UUID, Animal] = {}
        self.lookups: list[UUID] = []
        self.slow: dict[UUID, float] = {}
        self.failing: set[UUID] = set()
        self.completed: list[UUID] = []

    def add(
        self,
        sex: Sex = Sex.MALE,
        grade: DysplasiaGrade = DysplasiaGrade.A,
        *,
        sire: Animal | None = None,
        dam: Animal | None = None,
    ) -> Animal:
        animal = Animal.create(
            sex=sex,
            dysplasia_grade=grade,
            sire_id=sire.id if sire else None,
            dam_id=dam.id if dam else None,
        )
        self.records[animal.id] = animal
        return animal

    async def find_by_id(self, animal_id: UUID) -> Animal | None:
        self.lookups.append(animal_id)
        if animal_id in self.slow:
            await asyncio.sleep(self.slow[animal_id])
        if animal_id in self.failing:
            raise RepositoryUnavailable("store down")
        self.completed.append(animal_id)
        return self.records.get(animal_id)


class InMemoryPolicies:
    def __init__(self, policy: BreedingPolicy | None = None) -> None:
        self.active = policy
        self.created = 0
        self.loads = 0
        self.upserts: list[BreedingPolicy] = []

    async def find_active_policy(self) -> BreedingPolicy | None:
        return self.active

    async def get_or_create_active(self) -> BreedingPolicy:
        self.loads += 1
        if self.active is None:
            self.active = BreedingPolicy.create_default()
            self.created += 1
        return self.active

    async def upsert_policy(self, policy: BreedingPolicy) -> BreedingPolicy:
        self.upserts.append(policy)
        self.active = policy
        return policy


def make_uow(animals: InMemoryAnimals, policies: InMemoryPolicies):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        animals=animals,
        breeding_policies=policies,
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def animals() -> InMemoryAnimals:
    return InMemoryAnimals()


@pytest.fixture()
def policies() -> InMemoryPolicies:
    return InMemoryPolicies()


@pytest.fixture()
def uow(animals: InMemoryAnimals, policies: InMemoryPolicies):
    return make_uow(animals, policies)


@pytest.fixture()
def policy() -> BreedingPolicy:
    return BreedingPolicy.create_default()
