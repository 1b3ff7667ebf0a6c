from __future__ import annotations

from dataclasses import dataclass

from breedcheck.application.errors import InvalidInput
from breedcheck.application.interfaces.unit_of_work import UnitOfWork
from breedcheck.application.pedigree.compatibility import dysplasia_compatible
from breedcheck.application.use_cases.breeding import get_policy
from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade


@dataclass(slots=True)
class DysplasiaOutput:
    grade_a: DysplasiaGrade
    grade_b: DysplasiaGrade
    compatible: bool


def parse_grade(value: str | None) -> DysplasiaGrade:
    if not value:
        raise InvalidInput("Dysplasia grade is required")
    try:
        return DysplasiaGrade.parse(value)
    except ValueError as exc:
        allowed = ", ".join(grade.value for grade in DysplasiaGrade)
        raise InvalidInput(f"Invalid dysplasia grade '{value}'. Must be one of: {allowed}") from exc


async def execute(uow: UnitOfWork, grade_a: str, grade_b: str) -> DysplasiaOutput:
    parsed_a = parse_grade(grade_a)
    parsed_b = parse_grade(grade_b)
    policy = await get_policy.execute(uow)
    return DysplasiaOutput(
        grade_a=parsed_a,
        grade_b=parsed_b,
        compatible=dysplasia_compatible(parsed_a, parsed_b, policy),
    )
