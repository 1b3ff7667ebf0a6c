from __future__ import annotations

from uuid import uuid4

from sqlalchemy import func, select, update

from breedcheck.domain.models.breeding_policy import BreedingPolicy
from breedcheck.domain.value_objects.sex import Sex
from breedcheck.infrastructure.db.orm.breeding_policy import BreedingPolicyORM
from breedcheck.infrastructure.db.session import SQLAlchemyUnitOfWork


async def _count_policies(session_factory) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(BreedingPolicyORM))


async def test_separate_units_of_work_share_one_active_row(app, client):
    session_factory = app.state.session_factory

    async def materialise():
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            policy = await uow.breeding_policies.get_or_create_active()
            await uow.commit()
            return policy.id

    first = await materialise()
    second = await materialise()

    assert first == second
    assert await _count_policies(session_factory) == 1


async def test_insert_if_absent_keeps_existing_row(app, client):
    session_factory = app.state.session_factory
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        original = await uow.breeding_policies.get_or_create_active()
        await uow.breeding_policies._insert_if_absent(BreedingPolicy.create_default())
        await uow.commit()

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        active = await uow.breeding_policies.find_active_policy()

    assert active.id == original.id
    assert await _count_policies(session_factory) == 1


async def test_upsert_replaces_all_fields(app, client):
    session_factory = app.state.session_factory
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        current = await uow.breeding_policies.get_or_create_active()
        candidate = BreedingPolicy.create_default()
        candidate.inbreeding_limit = 6.25
        candidate.max_generations = 9
        updated = await uow.breeding_policies.upsert_policy(candidate)
        await uow.commit()

    assert updated.id == current.id
    assert updated.inbreeding_limit == 6.25
    assert updated.max_generations == 9
    assert await _count_policies(session_factory) == 1


async def test_find_by_id_returns_inactive_animals(app, client, seed_animal):
    retired = await seed_animal(Sex.FEMALE, is_active=False, name="Retired")

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        found = await uow.animals.find_by_id(retired)
        missing = await uow.animals.find_by_id(uuid4())

    assert found is not None
    assert found.is_active is False
    assert found.sex is Sex.FEMALE
    assert found.name == "Retired"
    assert missing is None


async def test_stored_matrix_with_unknown_grade_still_loads(app, client):
    session_factory = app.state.session_factory
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        await uow.breeding_policies.get_or_create_active()
        await uow.commit()
    async with session_factory() as session:
        await session.execute(
            update(BreedingPolicyORM).values(
                dysplasia_matrix={"A": {"A": True, "X": True}, "X": {"A": True}}
            )
        )
        await session.commit()

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        policy = await uow.breeding_policies.find_active_policy()

    mapping = policy.dysplasia_matrix.to_mapping()
    assert mapping["A"]["A"] is True
    assert mapping["A"]["B"] is False
    assert sorted(mapping) == ["A", "B", "C", "D", "E"]
