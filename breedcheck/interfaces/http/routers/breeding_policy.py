from __future__ import annotations

from fastapi import APIRouter, Depends

from breedcheck.application.use_cases.breeding import get_policy, replace_policy
from breedcheck.infrastructure.auth.context import AuthContext
from breedcheck.interfaces.http.deps import get_auth_context, get_uow
from breedcheck.interfaces.http.schemas.breeding_policy import (
    BreedingPolicyResponse,
    BreedingPolicyUpdate,
)

router = APIRouter(prefix="/breeding-policy", tags=["breeding-policy"])


@router.get("", response_model=BreedingPolicyResponse)
async def get_breeding_policy(
    _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> BreedingPolicyResponse:
    policy = await get_policy.execute(uow)
    return BreedingPolicyResponse.from_domain(policy)


@router.put("", response_model=BreedingPolicyResponse)
async def replace_breeding_policy(
    payload: BreedingPolicyUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingPolicyResponse:
    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    policy = await replace_policy.execute(
        uow, context.role, replace_policy.ReplacePolicyInput(**updates)
    )
    return BreedingPolicyResponse.from_domain(policy)
