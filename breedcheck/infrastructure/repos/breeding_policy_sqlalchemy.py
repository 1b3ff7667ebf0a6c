from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from breedcheck.application.errors import InfrastructureError, RepositoryUnavailable
from breedcheck.application.interfaces.repositories.breeding_policy import (
    BreedingPolicyRepository,
)
from breedcheck.domain.models.breeding_policy import BreedingPolicy, DysplasiaMatrix
from breedcheck.infrastructure.db.orm.breeding_policy import ACTIVE_KEY, BreedingPolicyORM

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BreedingPolicySQLAlchemyRepository(BreedingPolicyRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingPolicyORM) -> BreedingPolicy:
        return BreedingPolicy(
            id=orm.id,
            dysplasia_matrix=DysplasiaMatrix.from_mapping(orm.dysplasia_matrix, strict=False),
            inbreeding_limit=float(orm.inbreeding_limit),
            max_generations=int(orm.max_generations),
            is_active=orm.is_active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def find_active_policy(self) -> BreedingPolicy | None:
        stmt = (
            select(BreedingPolicyORM)
            .where(BreedingPolicyORM.active_key == ACTIVE_KEY)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
        except (DBAPIError, OSError) as exc:
            raise RepositoryUnavailable("Breeding policy store unavailable") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_or_create_active(self) -> BreedingPolicy:
        existing = await self.find_active_policy()
        if existing:
            return existing
        await self._insert_if_absent(BreedingPolicy.create_default())
        # Re-read: a concurrent request may have won the insert
        created = await self.find_active_policy()
        if created is None:
            raise InfrastructureError("Active breeding policy could not be materialised")
        return created

    async def upsert_policy(self, policy: BreedingPolicy) -> BreedingPolicy:
        await self._insert_if_absent(policy)
        stmt = (
            update(BreedingPolicyORM)
            .where(BreedingPolicyORM.active_key == ACTIVE_KEY)
            .values(
                dysplasia_matrix=policy.dysplasia_matrix.to_mapping(),
                inbreeding_limit=policy.inbreeding_limit,
                max_generations=policy.max_generations,
                is_active=True,
                updated_at=policy.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            await self.session.execute(stmt)
        except (DBAPIError, OSError) as exc:
            raise RepositoryUnavailable("Breeding policy store unavailable") from exc
        updated = await self.find_active_policy()
        if updated is None:
            raise InfrastructureError("Active breeding policy disappeared during update")
        return updated

    async def _insert_if_absent(self, policy: BreedingPolicy) -> None:
        dialect = self.session.get_bind().dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            raise InfrastructureError(f"Unsupported database dialect: {dialect}")
        stmt = (
            insert(BreedingPolicyORM.__table__)
            .values(
                id=policy.id,
                active_key=ACTIVE_KEY,
                dysplasia_matrix=policy.dysplasia_matrix.to_mapping(),
                inbreeding_limit=policy.inbreeding_limit,
                max_generations=policy.max_generations,
                is_active=True,
                created_at=policy.created_at,
                updated_at=policy.updated_at,
            )
            .on_conflict_do_nothing(index_elements=["active_key"])
        )
        try:
            await self.session.execute(stmt)
        except (DBAPIError, OSError) as exc:
            raise RepositoryUnavailable("Breeding policy store unavailable") from exc
