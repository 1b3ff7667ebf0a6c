from __future__ import annotations

import math
from uuid import UUID

from breedcheck.application.pedigree.ancestry import AncestryTreeBuilder, common_ancestors
from breedcheck.application.pedigree.lookups import gather_or_cancel
from breedcheck.domain.models.animal import Animal
from breedcheck.domain.models.breeding_policy import BreedingPolicy

IDENTICAL = 100.0
PARENT_CHILD = 50.0
FULL_SIBLINGS = 50.0
HALF_SIBLINGS = 25.0


class RelatednessCalculator:
    """Coefficient of relationship between two animals, as a percentage.

    Known relationships are answered directly. Everything else falls back to
    Wright's formula, summing ``0.5 ** (n1 + n2)`` once per common ancestor at
    its minimal generation distance from each animal. Multiple paths of the
    same length through one ancestor still contribute a single term.
    """

    def __init__(self, tree_builder: AncestryTreeBuilder) -> None:
        self.tree_builder = tree_builder

    async def calculate(self, animal_a: Animal, animal_b: Animal, policy: BreedingPolicy) -> float:
        if animal_a.id == animal_b.id:
            return IDENTICAL
        # Direct parentage transmits half the genome; Wright at (1, 1) would give 25.
        if animal_a.is_parent_of(animal_b) or animal_b.is_parent_of(animal_a):
            return PARENT_CHILD
        if animal_a.is_full_sibling_of(animal_b):
            return FULL_SIBLINGS
        if animal_a.is_half_sibling_of(animal_b):
            return HALF_SIBLINGS
        return await self.wright_coefficient(animal_a.id, animal_b.id, policy.max_generations)

    async def wright_coefficient(
        self, animal_id_a: UUID, animal_id_b: UUID, max_generations: int
    ) -> float:
        tree_a, tree_b = await gather_or_cancel(
            self.tree_builder.build(animal_id_a, max_generations),
            self.tree_builder.build(animal_id_b, max_generations),
        )
        shared = common_ancestors(tree_a, tree_b)
        if not shared:
            return 0.0
        # fsum keeps the result independent of set iteration order
        coefficient = math.fsum(0.5 ** (tree_a[ancestor] + tree_b[ancestor]) for ancestor in shared)
        return coefficient * 100
