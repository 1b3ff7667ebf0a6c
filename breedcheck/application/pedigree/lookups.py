from __future__ import annotations

import asyncio
from typing import Any, Awaitable
from uuid import UUID

from breedcheck.application.errors import NotFound, RepositoryUnavailable
from breedcheck.application.interfaces.repositories.animals import AnimalRepository
from breedcheck.domain.models.animal import Animal


async def gather_or_cancel(*reads: Awaitable[Any]) -> list[Any]:
    """Await reads concurrently; if one fails, cancel and drain the rest before re-raising."""
    tasks = [asyncio.ensure_future(read) for read in reads]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def lookup_animal(
    animals: AnimalRepository, animal_id: UUID, timeout: float | None = None
) -> Animal | None:
    """Fetch one animal, raising ``asyncio.TimeoutError`` when ``timeout`` elapses."""
    if timeout is None:
        return await animals.find_by_id(animal_id)
    return await asyncio.wait_for(animals.find_by_id(animal_id), timeout)


async def load_pair(
    animals: AnimalRepository,
    animal_id_a: UUID,
    animal_id_b: UUID,
    *,
    timeout: float | None = None,
) -> tuple[Animal, Animal]:
    """Fetch both breeding candidates concurrently.

    Unlike ancestor lookups, a missing or timed-out candidate aborts the
    whole request.
    """
    try:
        animal_a, animal_b = await gather_or_cancel(
            lookup_animal(animals, animal_id_a, timeout),
            lookup_animal(animals, animal_id_b, timeout),
        )
    except asyncio.TimeoutError as exc:
        raise RepositoryUnavailable("Timed out fetching breeding candidates") from exc
    missing = [
        str(animal_id)
        for animal_id, found in ((animal_id_a, animal_a), (animal_id_b, animal_b))
        if found is None
    ]
    if missing:
        raise NotFound("One or both animals were not found", details={"missing": missing})
    return animal_a, animal_b
