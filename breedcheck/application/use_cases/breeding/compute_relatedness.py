from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from breedcheck.application.errors import InvalidInput
from breedcheck.application.interfaces.unit_of_work import UnitOfWork
from breedcheck.application.pedigree.ancestry import AncestryTreeBuilder
from breedcheck.application.pedigree.lookups import load_pair
from breedcheck.application.pedigree.relatedness import RelatednessCalculator
from breedcheck.application.use_cases.breeding import get_policy


@dataclass(slots=True)
class RelatednessOutput:
    animal_id_a: UUID
    animal_id_b: UUID
    relatedness: float  # percentage, unrounded


def ensure_ids(animal_id_a: UUID | None, animal_id_b: UUID | None) -> None:
    if animal_id_a is None or animal_id_b is None:
        raise InvalidInput("Both animal identifiers are required")


async def execute(
    uow: UnitOfWork,
    animal_id_a: UUID,
    animal_id_b: UUID,
    *,
    lookup_timeout: float | None = None,
) -> RelatednessOutput:
    ensure_ids(animal_id_a, animal_id_b)
    policy = await get_policy.execute(uow)
    animal_a, animal_b = await load_pair(
        uow.animals, animal_id_a, animal_id_b, timeout=lookup_timeout
    )
    calculator = RelatednessCalculator(
        AncestryTreeBuilder(uow.animals, lookup_timeout=lookup_timeout)
    )
    relatedness = await calculator.calculate(animal_a, animal_b, policy)
    return RelatednessOutput(
        animal_id_a=animal_a.id, animal_id_b=animal_b.id, relatedness=relatedness
    )
