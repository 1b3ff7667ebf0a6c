from __future__ import annotations

from breedcheck.application.interfaces.unit_of_work import UnitOfWork
from breedcheck.domain.models.breeding_policy import BreedingPolicy


async def execute(uow: UnitOfWork) -> BreedingPolicy:
    policy = await uow.breeding_policies.get_or_create_active()
    # Persist the default if this call materialised it
    await uow.commit()
    return policy
