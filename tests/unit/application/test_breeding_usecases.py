from __future__ import annotations

import asyncio
from dataclasses import replace
from uuid import uuid4

import pytest

from breedcheck.application.errors import (
    InvalidInput,
    NotFound,
    PermissionDenied,
    RepositoryUnavailable,
)
from breedcheck.application.use_cases.breeding import (
    compute_relatedness,
    evaluate_compatibility,
    evaluate_dysplasia,
    get_policy,
    replace_policy,
)
from breedcheck.domain.models.breeding_policy import BreedingPolicy
from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade
from breedcheck.domain.value_objects.role import Role
from breedcheck.domain.value_objects.sex import Sex


async def test_get_policy_materialises_default_once(uow, policies):
    first = await get_policy.execute(uow)
    second = await get_policy.execute(uow)

    assert first is second
    assert policies.created == 1
    assert first.inbreeding_limit == 12.5
    assert first.max_generations == 5
    assert uow.commits


async def test_relatedness_missing_animal_raises_not_found(uow, animals):
    present = animals.add()
    missing = uuid4()

    with pytest.raises(NotFound) as exc_info:
        await compute_relatedness.execute(uow, present.id, missing)

    assert exc_info.value.details == {"missing": [str(missing)]}


async def test_relatedness_requires_both_ids(uow):
    with pytest.raises(InvalidInput):
        await compute_relatedness.execute(uow, uuid4(), None)  # type: ignore[arg-type]


async def test_root_lookup_timeout_is_fatal(uow, animals):
    male = animals.add()
    female = animals.add(Sex.FEMALE)
    animals.slow[female.id] = 1.0

    with pytest.raises(RepositoryUnavailable):
        await evaluate_compatibility.execute(uow, male.id, female.id, lookup_timeout=0.01)


async def test_repository_failure_is_not_swallowed(uow, animals):
    male = animals.add()
    female = animals.add(Sex.FEMALE)
    animals.failing.add(female.id)

    with pytest.raises(RepositoryUnavailable):
        await compute_relatedness.execute(uow, male.id, female.id)


async def test_failed_candidate_cancels_the_other_fetch(uow, animals):
    male = animals.add()
    female = animals.add(Sex.FEMALE)
    animals.failing.add(male.id)
    animals.slow[female.id] = 0.2

    with pytest.raises(RepositoryUnavailable):
        await evaluate_compatibility.execute(uow, male.id, female.id)
    await asyncio.sleep(0.3)

    assert female.id not in animals.completed


async def test_relatedness_uses_configured_depth(uow, animals, policies):
    founder = animals.add()
    left = animals.add(sire=animals.add(sire=animals.add(sire=founder)))
    right = animals.add(Sex.FEMALE, sire=animals.add(sire=animals.add(sire=founder)))

    deep = await compute_relatedness.execute(uow, left.id, right.id)
    policies.active = replace(policies.active, max_generations=2)
    shallow = await compute_relatedness.execute(uow, left.id, right.id)

    assert deep.relatedness == pytest.approx(1.5625)
    assert shallow.relatedness == 0


async def test_compatibility_loads_policy_once(uow, animals, policies):
    male = animals.add()
    female = animals.add(Sex.FEMALE)

    result = await evaluate_compatibility.execute(uow, male.id, female.id)

    assert result.overall_compatible is True
    assert policies.loads == 1


async def test_compatibility_respects_stored_limit(uow, animals, policies):
    sire = animals.add()
    male = animals.add(sire=sire)
    female = animals.add(Sex.FEMALE, sire=sire)
    policies.active = replace(BreedingPolicy.create_default(), inbreeding_limit=25.0)

    result = await evaluate_compatibility.execute(uow, male.id, female.id)

    assert result.relatedness == 25
    assert result.relatedness_compatible is True


async def test_compatibility_missing_animal_aborts(uow, animals):
    with pytest.raises(NotFound):
        await evaluate_compatibility.execute(uow, animals.add().id, uuid4())


async def test_evaluate_dysplasia_accepts_lowercase(uow):
    result = await evaluate_dysplasia.execute(uow, "a", " B ")

    assert result.grade_a is DysplasiaGrade.A
    assert result.grade_b is DysplasiaGrade.B
    assert result.compatible is True


@pytest.mark.parametrize("grade", ["", "F", "AB", None])
async def test_evaluate_dysplasia_rejects_unknown_grade(uow, grade):
    with pytest.raises(InvalidInput):
        await evaluate_dysplasia.execute(uow, "A", grade)


async def test_replace_policy_requires_admin(uow, policies):
    with pytest.raises(PermissionDenied):
        await replace_policy.execute(
            uow, Role.BREEDER, replace_policy.ReplacePolicyInput(inbreeding_limit=20)
        )
    assert policies.upserts == []


@pytest.mark.parametrize(
    "payload",
    [
        replace_policy.ReplacePolicyInput(),
        replace_policy.ReplacePolicyInput(inbreeding_limit=-0.1),
        replace_policy.ReplacePolicyInput(inbreeding_limit=100.5),
        replace_policy.ReplacePolicyInput(max_generations=0),
        replace_policy.ReplacePolicyInput(max_generations=11),
        replace_policy.ReplacePolicyInput(dysplasia_matrix={"Z": {"A": True}}),
    ],
)
async def test_replace_policy_rejects_invalid_input(uow, policies, payload):
    with pytest.raises(InvalidInput):
        await replace_policy.execute(uow, Role.ADMIN, payload)
    assert policies.upserts == []


async def test_replace_policy_merges_partial_update(uow, policies):
    original = await get_policy.execute(uow)

    updated = await replace_policy.execute(
        uow, Role.ADMIN, replace_policy.ReplacePolicyInput(max_generations=8)
    )

    assert updated.id == original.id
    assert updated.max_generations == 8
    assert updated.inbreeding_limit == original.inbreeding_limit
    assert updated.dysplasia_matrix == original.dysplasia_matrix
    assert policies.upserts == [updated]


async def test_replace_policy_fills_missing_matrix_cells(uow):
    updated = await replace_policy.execute(
        uow,
        Role.ADMIN,
        replace_policy.ReplacePolicyInput(dysplasia_matrix={"C": {"A": True}}),
    )

    mapping = updated.dysplasia_matrix.to_mapping()
    assert mapping["C"]["A"] is True
    assert mapping["A"]["C"] is False
    assert mapping["A"]["A"] is False


async def test_replace_policy_accepts_lowercase_grades(uow):
    updated = await replace_policy.execute(
        uow,
        Role.ADMIN,
        replace_policy.ReplacePolicyInput(dysplasia_matrix={"c": {" a ": True}}),
    )

    assert updated.dysplasia_matrix.is_compatible(DysplasiaGrade.C, DysplasiaGrade.A) is True
    dysplasia = await evaluate_dysplasia.execute(uow, "c", "a")
    assert dysplasia.compatible is True
