from __future__ import annotations

import logging

from breedcheck.application.pedigree.relatedness import RelatednessCalculator
from breedcheck.domain.models.animal import Animal
from breedcheck.domain.models.breeding_policy import BreedingPolicy
from breedcheck.domain.models.compatibility import CompatibilityResult
from breedcheck.domain.value_objects.dysplasia_grade import DysplasiaGrade

logger = logging.getLogger(__name__)


def dysplasia_compatible(
    grade_a: DysplasiaGrade, grade_b: DysplasiaGrade, policy: BreedingPolicy
) -> bool:
    # An unconfigured pairing is never compatible
    if policy.dysplasia_matrix is None:
        return False
    return policy.dysplasia_matrix.is_compatible(grade_a, grade_b)


class CompatibilityEvaluator:
    def __init__(self, calculator: RelatednessCalculator) -> None:
        self.calculator = calculator

    async def evaluate(
        self, animal_a: Animal, animal_b: Animal, policy: BreedingPolicy
    ) -> CompatibilityResult:
        relatedness = await self.calculator.calculate(animal_a, animal_b, policy)
        result = CompatibilityResult(
            animal_id_a=animal_a.id,
            animal_id_b=animal_b.id,
            gender_compatible=animal_a.sex != animal_b.sex,
            relatedness=relatedness,
            relatedness_compatible=relatedness <= policy.inbreeding_limit,
            dysplasia_compatible=dysplasia_compatible(
                animal_a.dysplasia_grade, animal_b.dysplasia_grade, policy
            ),
        )
        logger.info(
            "Compatibility %s x %s: relatedness=%.4f%% overall=%s",
            animal_a.id,
            animal_b.id,
            relatedness,
            result.overall_compatible,
        )
        return result
