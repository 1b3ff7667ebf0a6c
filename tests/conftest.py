from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from breedcheck.config.settings import Settings
from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade
from breedcheck.domain.value_objects.role import Role
from breedcheck.domain.value_objects.sex import Sex
from breedcheck.infrastructure.db.base import Base
from breedcheck.infrastructure.db.orm import animal, breeding_policy  # noqa: F401
from breedcheck.infrastructure.db.orm.animal import AnimalORM
from breedcheck.interfaces.http.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        jwt_secret_key=TEST_SECRET,
        jwt_algorithm="HS256",
        log_level="INFO",
        environment="test",
        pedigree_lookup_timeout_seconds=5.0,
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await engine.dispose()


@pytest.fixture()
def token_factory() -> Callable[..., str]:
    def _make(user_id: UUID | None = None, role: Role = Role.BREEDER) -> str:
        claims = {"sub": str(user_id or uuid4()), "role": role.value, "typ": "access"}
        return jwt.encode(claims, TEST_SECRET, algorithm="HS256")

    return _make


@pytest.fixture()
def admin_headers(token_factory) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_factory(role=Role.ADMIN)}"}


@pytest.fixture()
def breeder_headers(token_factory) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_factory(role=Role.BREEDER)}"}


@pytest.fixture()
def seed_animal(app, client) -> Callable[..., Awaitable[UUID]]:
    """Insert an animal row directly; animal CRUD lives outside this service."""

    async def _seed(
        sex: Sex = Sex.MALE,
        grade: DysplasiaGrade = DysplasiaGrade.A,
        *,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        is_active: bool = True,
        name: str | None = None,
    ) -> UUID:
        animal_id = uuid4()
        async with app.state.session_factory() as session:
            session.add(
                AnimalORM(
                    id=animal_id,
                    sex=sex.value,
                    dysplasia_grade=grade.value,
                    sire_id=sire_id,
                    dam_id=dam_id,
                    name=name,
                    is_active=is_active,
                )
            )
            await session.commit()
        return animal_id

    return _seed
