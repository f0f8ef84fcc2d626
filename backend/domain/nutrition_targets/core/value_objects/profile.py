"""Profile value object - biometric profile and goal of a person."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Tuple

from .activity_level import ActivityLevel
from .gender import Gender
from .goal import Goal


def require_positive_finite(field: str, value: object) -> float:
    """Return value as float, or raise InvalidProfileError.

    Booleans are rejected even though they are ints in Python.

    Raises:
        InvalidProfileError: If value is not a strictly positive finite number
    """
    # Import here to avoid circular dependency
    from ..exceptions.domain_errors import InvalidProfileError

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidProfileError(
            f"{field} must be a number, got {value!r}", field=field, value=value
        )
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise InvalidProfileError(
            f"{field} must be a positive finite number, got {value!r}",
            field=field,
            value=value,
        )
    return number


def require_non_negative_int(field: str, value: object) -> int:
    """Return value as int, or raise InvalidProfileError.

    Raises:
        InvalidProfileError: If value is not an integer >= 0 (bools rejected)
    """
    from ..exceptions.domain_errors import InvalidProfileError

    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidProfileError(
            f"{field} must be a non-negative integer, got {value!r}",
            field=field,
            value=value,
        )
    return value


@dataclass(frozen=True)
class Profile:
    """Biometric profile used for target calculation.

    Immutable value object constructed per call; it has no identity.

    Attributes:
        gender: Gender selecting the BMR constant
        age: Age in years (> 0)
        height: Height in centimeters (> 0)
        weight: Body weight in kilograms (> 0)
        trains_per_week: Training sessions per week (>= 0, not used by the formula)
        activity_level: Activity level selecting the multiplier
        goal: Goal selecting the calorie offset
        defaulted_fields: Names of fields whose raw label was unrecognized
            and replaced by the documented default
    """

    gender: Gender
    age: float
    height: float
    weight: float
    activity_level: ActivityLevel
    goal: Goal
    trains_per_week: int = 0
    defaulted_fields: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate biometric constraints.

        Raises:
            InvalidProfileError: If age, height or weight is not a
                strictly positive finite number, or trains_per_week is
                not a non-negative integer
        """
        require_positive_finite("age", self.age)
        require_positive_finite("height", self.height)
        require_positive_finite("weight", self.weight)
        require_non_negative_int("trains_per_week", self.trains_per_week)
