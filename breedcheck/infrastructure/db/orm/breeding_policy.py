from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from breedcheck.infrastructure.db.base import Base

ACTIVE_KEY = "active"


class BreedingPolicyORM(Base):
    __tablename__ = "breeding_policies"
    __table_args__ = (
        # At most one row may hold the active key; inactive rows keep NULL.
        UniqueConstraint("active_key", name="ux_breeding_policies_active_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    active_key: Mapped[str | None] = mapped_column(String(16), nullable=True)
    dysplasia_matrix: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    inbreeding_limit: Mapped[float] = mapped_column(Float, nullable=False, default=12.5)
    max_generations: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
