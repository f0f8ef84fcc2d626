"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Optional

from ._labels import normalize_label


class ActivityLevel(str, Enum):
    """Self-reported activity level used to scale BMR.

    - SEDENTARY: little or no exercise (also the fallback level)
    - LIGHTLY_ACTIVE: light exercise 1-3 days/week
    - NORMAL: moderate exercise 3-5 days/week
    - ACTIVE: hard exercise 6-7 days/week
    - VERY_ACTIVE: very hard exercise + physical job
    """

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "LightlyActive"
    NORMAL = "Normal"
    ACTIVE = "Active"
    VERY_ACTIVE = "VeryActive"

    def multiplier(self) -> float:
        """Get the activity multiplier applied to BMR.

        Returns:
            float: Multiplier for BMR to obtain daily expenditure

        Example:
            >>> ActivityLevel.NORMAL.multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.NORMAL: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    @classmethod
    def default(cls) -> "ActivityLevel":
        """Level used when the reported label is not recognized."""
        return cls.SEDENTARY

    @classmethod
    def from_label(cls, label: object) -> Optional["ActivityLevel"]:
        """Parse a transport label, returning None when unrecognized.

        Accepts canonical names in any case/spacing and the labels of the
        mobile UI ("Poco activo", "Activo", "Muy activo", ...).

        Example:
            >>> ActivityLevel.from_label("Muy activo")
            <ActivityLevel.VERY_ACTIVE: 'VeryActive'>
            >>> ActivityLevel.from_label("couch") is None
            True
        """
        if isinstance(label, ActivityLevel):
            return label
        return _ALIASES.get(normalize_label(label))


_ALIASES = {
    "sedentary": ActivityLevel.SEDENTARY,
    "sedentario": ActivityLevel.SEDENTARY,
    "lightlyactive": ActivityLevel.LIGHTLY_ACTIVE,
    "light": ActivityLevel.LIGHTLY_ACTIVE,
    "pocoactivo": ActivityLevel.LIGHTLY_ACTIVE,
    "normal": ActivityLevel.NORMAL,
    "moderate": ActivityLevel.NORMAL,
    "active": ActivityLevel.ACTIVE,
    "activo": ActivityLevel.ACTIVE,
    "veryactive": ActivityLevel.VERY_ACTIVE,
    "muyactivo": ActivityLevel.VERY_ACTIVE,
}
