from __future__ import annotations

import asyncio
import logging
from collections import deque
from uuid import UUID

from breedcheck.application.interfaces.repositories.animals import AnimalRepository
from breedcheck.application.pedigree.lookups import lookup_animal

logger = logging.getLogger(__name__)

# ancestor id -> generation distance at which it was first reached
AncestryMap = dict[UUID, int]


def lookup_budget(max_generations: int) -> int:
    """Lookups needed for a complete binary pedigree of the given depth, root included."""
    return 2 ** (max_generations + 1) - 1


def common_ancestors(tree_a: AncestryMap, tree_b: AncestryMap) -> set[UUID]:
    return set(tree_a.keys() & tree_b.keys())


class AncestryTreeBuilder:
    """Breadth-first ancestry traversal bounded by generation depth.

    The worklist is strictly FIFO, so the first time an ancestor is dequeued
    is at its minimal distance from the root; later sightings are ignored.
    Pedigree data is not guaranteed acyclic. The visited map, the depth
    bound and the lookup budget together keep self-referencing or circular
    lineages finite.
    """

    def __init__(self, animals: AnimalRepository, *, lookup_timeout: float | None = None) -> None:
        self.animals = animals
        self.lookup_timeout = lookup_timeout

    async def build(self, root_id: UUID, max_generations: int) -> AncestryMap:
        visited: AncestryMap = {}
        pruned: set[UUID] = set()
        queue: deque[tuple[UUID, int]] = deque([(root_id, 0)])
        budget = lookup_budget(max_generations)
        lookups = 0

        while queue:
            animal_id, generation = queue.popleft()
            if generation > max_generations:
                continue
            if animal_id in visited or animal_id in pruned:
                continue
            if lookups >= budget:
                logger.warning(
                    "Ancestry lookup budget of %d exhausted for root %s; stopping traversal",
                    budget,
                    root_id,
                )
                break
            lookups += 1
            try:
                animal = await lookup_animal(self.animals, animal_id, self.lookup_timeout)
            except asyncio.TimeoutError:
                logger.warning("Lookup of ancestor %s timed out; pruning branch", animal_id)
                animal = None
            if animal is None:
                pruned.add(animal_id)
                continue
            visited[animal_id] = generation
            if generation < max_generations:
                for parent_id in animal.parent_ids():
                    queue.append((parent_id, generation + 1))

        logger.debug(
            "Ancestry of %s: %d members within %d generations (%d lookups, %d pruned)",
            root_id,
            len(visited),
            max_generations,
            lookups,
            len(pruned),
        )
        return visited
