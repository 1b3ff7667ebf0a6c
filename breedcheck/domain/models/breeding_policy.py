from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping
from uuid import UUID, uuid4

from breedcheck.domain.value_objects.dysplasia_grade import GRADE_ORDER, DysplasiaGrade

DEFAULT_INBREEDING_LIMIT = 12.5  # first-cousin level
DEFAULT_MAX_GENERATIONS = 5
INBREEDING_LIMIT_RANGE = (0.0, 100.0)
MAX_GENERATIONS_RANGE = (1, 10)

_DEFAULT_ALLOWED_PAIRS = {
    (DysplasiaGrade.A, DysplasiaGrade.A),
    (DysplasiaGrade.A, DysplasiaGrade.B),
    (DysplasiaGrade.B, DysplasiaGrade.A),
    (DysplasiaGrade.B, DysplasiaGrade.B),
}


def _parse_key(key: str, strict: bool) -> DysplasiaGrade | None:
    try:
        return DysplasiaGrade.parse(key)
    except ValueError:
        if strict:
            raise
        return None


@dataclass(slots=True, frozen=True)
class DysplasiaMatrix:
    """Fixed 5x5 table of allowed grade pairings.

    Rows are indexed by the first animal's grade and columns by the second.
    The table is read directionally, so asymmetric authoring is honoured.
    Cells absent from the source mapping are filled with ``False``. Grade keys
    are matched case-insensitively; with ``strict=False`` unknown keys are
    skipped, leaving their cells closed.
    """

    cells: tuple[tuple[bool, ...], ...]

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Mapping[str, bool] | None] | None,
        *,
        strict: bool = True,
    ) -> DysplasiaMatrix:
        rows = [[False] * len(GRADE_ORDER) for _ in GRADE_ORDER]
        for row_key, row in (mapping or {}).items():
            grade_a = _parse_key(row_key, strict)
            if grade_a is None:
                continue
            for col_key, allowed in (row or {}).items():
                grade_b = _parse_key(col_key, strict)
                if grade_b is None:
                    continue
                rows[grade_a.position][grade_b.position] = bool(allowed)
        return cls(cells=tuple(tuple(row) for row in rows))

    @classmethod
    def default(cls) -> DysplasiaMatrix:
        return cls(
            cells=tuple(
                tuple((a, b) in _DEFAULT_ALLOWED_PAIRS for b in GRADE_ORDER) for a in GRADE_ORDER
            )
        )

    def is_compatible(self, grade_a: DysplasiaGrade, grade_b: DysplasiaGrade) -> bool:
        return self.cells[grade_a.position][grade_b.position]

    def to_mapping(self) -> dict[str, dict[str, bool]]:
        return {
            a.value: {b.value: self.cells[a.position][b.position] for b in GRADE_ORDER}
            for a in GRADE_ORDER
        }


@dataclass(slots=True)
class BreedingPolicy:
    id: UUID
    dysplasia_matrix: DysplasiaMatrix = field(default_factory=DysplasiaMatrix.default)
    inbreeding_limit: float = DEFAULT_INBREEDING_LIMIT
    max_generations: int = DEFAULT_MAX_GENERATIONS
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create_default(cls) -> BreedingPolicy:
        now = datetime.now(timezone.utc)
        return cls(id=uuid4(), created_at=now, updated_at=now)
