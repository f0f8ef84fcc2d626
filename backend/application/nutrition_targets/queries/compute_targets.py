"""ComputeTargetsQuery - compute daily calorie and macro targets."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from domain.nutrition_targets.core.factories.profile_factory import ProfileFactory
from domain.nutrition_targets.core.ports.calculators import INutritionTargetCalculator
from domain.nutrition_targets.core.value_objects.nutrition_targets import (
    EnergyBreakdown,
    NutritionTargets,
)
from domain.nutrition_targets.core.value_objects.profile import Profile


@dataclass(frozen=True)
class ComputeTargetsQuery:
    """Query with raw profile values as received from a client.

    Attributes:
        gender: Gender label
        age: Age in years
        height: Height in cm
        weight: Weight in kg
        activity: Activity label
        goal: Goal label
        trains_per_week: Training sessions per week
    """

    gender: Any
    age: Any
    height: Any
    weight: Any
    activity: Any = None
    goal: Any = None
    trains_per_week: Optional[int] = None


@dataclass(frozen=True)
class ComputeTargetsResult:
    """Targets plus the profile and figures they came from.

    Attributes:
        profile: Profile built from the query
        targets: Rounded daily targets
        breakdown: Unrounded intermediate figures
        warnings: Human-readable notes about defaulted labels
    """

    profile: Profile
    targets: NutritionTargets
    breakdown: EnergyBreakdown
    warnings: List[str] = field(default_factory=list)


def _defaulted_warnings(profile: Profile) -> List[str]:
    defaults = {
        "gender": profile.gender.value,
        "activity_level": profile.activity_level.value,
        "goal": profile.goal.value,
    }
    return [
        f"Unrecognized {name}, defaulted to {defaults[name]}"
        for name in profile.defaulted_fields
    ]


class ComputeTargetsQueryHandler:
    """Handler for ComputeTargetsQuery.

    Builds the profile via the factory, then runs the calculator.
    Synchronous: the computation is pure arithmetic.
    """

    def __init__(
        self,
        calculator: INutritionTargetCalculator,
        factory: ProfileFactory,
    ):
        self._calculator = calculator
        self._factory = factory

    def handle(self, query: ComputeTargetsQuery) -> ComputeTargetsResult:
        """
        Handle compute targets query.

        Args:
            query: ComputeTargetsQuery with raw profile values

        Returns:
            ComputeTargetsResult with targets and breakdown

        Raises:
            InvalidProfileError: If the profile is invalid
        """
        profile = self._factory.from_raw(
            gender=query.gender,
            age=query.age,
            height=query.height,
            weight=query.weight,
            activity=query.activity,
            goal=query.goal,
            trains_per_week=query.trains_per_week,
        )
        targets, breakdown = self._calculator.compute_with_breakdown(profile)

        return ComputeTargetsResult(
            profile=profile,
            targets=targets,
            breakdown=breakdown,
            warnings=_defaulted_warnings(profile),
        )
