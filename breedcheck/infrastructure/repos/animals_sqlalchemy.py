from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from breedcheck.application.errors import RepositoryUnavailable
from breedcheck.application.interfaces.repositories.animals import AnimalRepository
from breedcheck.domain.models.animal import Animal
from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade
from breedcheck.domain.value_objects.sex import Sex
from breedcheck.infrastructure.db.orm.animal import AnimalORM


class AnimalsSQLAlchemyRepository(AnimalRepository):
    """Read-only pedigree repository.

    Each lookup opens its own short-lived session, so ancestry trees for both
    candidates can be expanded concurrently without sharing a session.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            sex=Sex(orm.sex),
            dysplasia_grade=DysplasiaGrade(orm.dysplasia_grade),
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            name=orm.name,
            breed=orm.breed,
            birth_date=orm.birth_date,
            registration_number=orm.registration_number,
            microchip=orm.microchip,
            owner_id=orm.owner_id,
            is_active=orm.is_active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def find_by_id(self, animal_id: UUID) -> Animal | None:
        # Deactivated animals are still returned; their lineage still counts.
        try:
            async with self._session_factory() as session:
                orm = await session.get(AnimalORM, animal_id)
        except (DBAPIError, OSError) as exc:
            raise RepositoryUnavailable("Pedigree store unavailable") from exc
        return self._to_domain(orm) if orm else None
