from __future__ import annotations

from enum import Enum


class DysplasiaGrade(str, Enum):
    """Hip dysplasia classification, A (best) through E (worst)."""

    A = "A"  # normal
    B = "B"  # near normal
    C = "C"  # mild
    D = "D"  # moderate
    E = "E"  # severe

    @classmethod
    def parse(cls, value: str) -> DysplasiaGrade:
        """Case- and whitespace-insensitive lookup; raises ``ValueError`` when unknown."""
        return cls(str(value).strip().upper())

    @property
    def position(self) -> int:
        return GRADE_ORDER.index(self)


GRADE_ORDER: tuple[DysplasiaGrade, ...] = tuple(DysplasiaGrade)
