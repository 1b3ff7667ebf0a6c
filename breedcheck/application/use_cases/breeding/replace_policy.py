from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Mapping

from breedcheck.application.errors import InvalidInput, PermissionDenied
from breedcheck.application.interfaces.unit_of_work import UnitOfWork
from breedcheck.domain.models.breeding_policy import (
    INBREEDING_LIMIT_RANGE,
    MAX_GENERATIONS_RANGE,
    BreedingPolicy,
    DysplasiaMatrix,
)
from breedcheck.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReplacePolicyInput:
    dysplasia_matrix: Mapping[str, Mapping[str, bool]] | None = None
    inbreeding_limit: float | None = None
    max_generations: int | None = None


def ensure_can_manage(role: Role) -> None:
    if not role.can_manage_policy():
        raise PermissionDenied("Only admin can update the breeding policy")


def _validate(payload: ReplacePolicyInput) -> DysplasiaMatrix | None:
    if (
        payload.dysplasia_matrix is None
        and payload.inbreeding_limit is None
        and payload.max_generations is None
    ):
        raise InvalidInput("No policy fields provided for update")
    if payload.inbreeding_limit is not None:
        low, high = INBREEDING_LIMIT_RANGE
        if not low <= payload.inbreeding_limit <= high:
            raise InvalidInput(
                f"inbreeding_limit must be between {low:g} and {high:g}",
                details={"inbreeding_limit": payload.inbreeding_limit},
            )
    if payload.max_generations is not None:
        low, high = MAX_GENERATIONS_RANGE
        if not low <= payload.max_generations <= high:
            raise InvalidInput(
                f"max_generations must be between {low} and {high}",
                details={"max_generations": payload.max_generations},
            )
    if payload.dysplasia_matrix is None:
        return None
    try:
        return DysplasiaMatrix.from_mapping(payload.dysplasia_matrix)
    except ValueError as exc:
        raise InvalidInput("Dysplasia matrix keys must be grades A to E") from exc


async def execute(uow: UnitOfWork, role: Role, payload: ReplacePolicyInput) -> BreedingPolicy:
    ensure_can_manage(role)
    matrix = _validate(payload)
    current = await uow.breeding_policies.get_or_create_active()
    candidate = replace(
        current,
        dysplasia_matrix=matrix if matrix is not None else current.dysplasia_matrix,
        inbreeding_limit=(
            payload.inbreeding_limit
            if payload.inbreeding_limit is not None
            else current.inbreeding_limit
        ),
        max_generations=(
            payload.max_generations
            if payload.max_generations is not None
            else current.max_generations
        ),
        updated_at=datetime.now(timezone.utc),
    )
    updated = await uow.breeding_policies.upsert_policy(candidate)
    await uow.commit()
    logger.info(
        "Breeding policy %s replaced: inbreeding_limit=%s max_generations=%s",
        updated.id,
        updated.inbreeding_limit,
        updated.max_generations,
    )
    return updated
