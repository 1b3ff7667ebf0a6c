from __future__ import annotations

from typing import Protocol

from breedcheck.domain.models.breeding_policy import BreedingPolicy


class BreedingPolicyRepository(Protocol):
    async def find_active_policy(self) -> BreedingPolicy | None: ...

    async def get_or_create_active(self) -> BreedingPolicy:
        """Return the active policy, atomically inserting the default if absent."""
        ...

    async def upsert_policy(self, policy: BreedingPolicy) -> BreedingPolicy:
        """Replace every field of the active policy in a single statement."""
        ...
