from __future__ import annotations

from uuid import UUID

from breedcheck.application.interfaces.unit_of_work import UnitOfWork
from breedcheck.application.pedigree.ancestry import AncestryTreeBuilder
from breedcheck.application.pedigree.compatibility import CompatibilityEvaluator
from breedcheck.application.pedigree.lookups import load_pair
from breedcheck.application.pedigree.relatedness import RelatednessCalculator
from breedcheck.application.use_cases.breeding import get_policy
from breedcheck.application.use_cases.breeding.compute_relatedness import ensure_ids
from breedcheck.domain.models.compatibility import CompatibilityResult


async def execute(
    uow: UnitOfWork,
    animal_id_a: UUID,
    animal_id_b: UUID,
    *,
    lookup_timeout: float | None = None,
) -> CompatibilityResult:
    ensure_ids(animal_id_a, animal_id_b)
    policy = await get_policy.execute(uow)
    animal_a, animal_b = await load_pair(
        uow.animals, animal_id_a, animal_id_b, timeout=lookup_timeout
    )
    evaluator = CompatibilityEvaluator(
        RelatednessCalculator(AncestryTreeBuilder(uow.animals, lookup_timeout=lookup_timeout))
    )
    return await evaluator.evaluate(animal_a, animal_b, policy)
