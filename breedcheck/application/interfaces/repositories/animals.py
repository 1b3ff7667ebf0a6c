from __future__ import annotations

from typing import Protocol
from uuid import UUID

from breedcheck.domain.models.animal import Animal


class AnimalRepository(Protocol):
    """Read-only pedigree lookups.

    Implementations must tolerate concurrent ``find_by_id`` calls and raise
    ``RepositoryUnavailable`` on transient backing-store failures.
    """

    async def find_by_id(self, animal_id: UUID) -> Animal | None: ...
