from __future__ import annotations

from fastapi import APIRouter, Depends

from breedcheck.application.use_cases.breeding import (
    compute_relatedness,
    evaluate_compatibility,
    evaluate_dysplasia,
)
from breedcheck.config.settings import Settings
from breedcheck.infrastructure.auth.context import AuthContext
from breedcheck.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from breedcheck.interfaces.http.schemas.breeding import (
    AnimalPairRequest,
    CompatibilityResponse,
    DysplasiaPairRequest,
    DysplasiaResponse,
    RelatednessResponse,
)

router = APIRouter(prefix="/breeding", tags=["breeding"])


@router.post("/compatibility", response_model=CompatibilityResponse)
async def check_compatibility(
    payload: AnimalPairRequest,
    _: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> CompatibilityResponse:
    result = await evaluate_compatibility.execute(
        uow,
        payload.animal_id_a,
        payload.animal_id_b,
        lookup_timeout=settings.pedigree_lookup_timeout_seconds,
    )
    return CompatibilityResponse.model_validate(result)


@router.post("/relatedness", response_model=RelatednessResponse)
async def compute_relatedness_endpoint(
    payload: AnimalPairRequest,
    _: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> RelatednessResponse:
    result = await compute_relatedness.execute(
        uow,
        payload.animal_id_a,
        payload.animal_id_b,
        lookup_timeout=settings.pedigree_lookup_timeout_seconds,
    )
    return RelatednessResponse.model_validate(result)


@router.post("/dysplasia", response_model=DysplasiaResponse)
async def check_dysplasia(
    payload: DysplasiaPairRequest,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> DysplasiaResponse:
    result = await evaluate_dysplasia.execute(uow, payload.grade_a, payload.grade_b)
    return DysplasiaResponse.model_validate(result)
