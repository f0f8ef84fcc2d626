"""Factory building Profile value objects from transport input."""

import logging
from typing import Any, List, Optional

from ..exceptions.domain_errors import InvalidProfileError
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.gender import Gender
from ..value_objects.goal import Goal
from ..value_objects.profile import Profile

logger = logging.getLogger(__name__)


class ProfileFactory:
    """Build a Profile from loosely typed labels.

    Unrecognized labels fall back to documented defaults:

    - activity -> Sedentary (multiplier 1.2)
    - goal -> Maintain (no offset)
    - gender -> Female (anything that is not recognized as male takes the
      female constant, as the mobile app always has)

    Every fallback is recorded in ``Profile.defaulted_fields`` and logged.
    With ``strict=True`` an unrecognized label raises InvalidProfileError.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    def from_raw(
        self,
        *,
        gender: Any,
        age: Any,
        height: Any,
        weight: Any,
        activity: Any = None,
        goal: Any = None,
        trains_per_week: Optional[int] = None,
    ) -> Profile:
        """Create a profile from raw request values.

        Args:
            gender: Gender label ("Male", "Female", "M", "F", ...)
            age: Age in years
            height: Height in cm
            weight: Weight in kg
            activity: Activity label (canonical or UI label)
            goal: Goal label ("Gain", "Lose", "Maintain", ...)
            trains_per_week: Training sessions per week

        Returns:
            Profile: Validated profile

        Raises:
            InvalidProfileError: On invalid biometrics, a negative
                trains_per_week, or an unrecognized label in strict mode
        """
        defaulted: List[str] = []

        parsed_gender = Gender.from_label(gender)
        if parsed_gender is None:
            parsed_gender = self._fallback("gender", gender, Gender.FEMALE, defaulted)

        parsed_activity = ActivityLevel.from_label(activity)
        if parsed_activity is None:
            parsed_activity = self._fallback(
                "activity_level", activity, ActivityLevel.default(), defaulted
            )

        parsed_goal = Goal.from_label(goal)
        if parsed_goal is None:
            parsed_goal = self._fallback("goal", goal, Goal.default(), defaulted)

        return Profile(
            gender=parsed_gender,
            age=age,
            height=height,
            weight=weight,
            activity_level=parsed_activity,
            goal=parsed_goal,
            trains_per_week=0 if trains_per_week is None else trains_per_week,
            defaulted_fields=tuple(defaulted),
        )

    def _fallback(self, field: str, raw: Any, default: Any, defaulted: List[str]) -> Any:
        if self._strict:
            raise InvalidProfileError(
                f"Unrecognized {field}: {raw!r}", field=field, value=raw
            )
        logger.warning(
            "Unrecognized profile label, using default",
            extra={"field": field, "raw_value": raw, "default": default.value},
        )
        defaulted.append(field)
        return default
