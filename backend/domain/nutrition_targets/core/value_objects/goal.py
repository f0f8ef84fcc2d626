"""Goal value object - user's nutritional objective."""

from enum import Enum
from typing import Optional

from ._labels import normalize_label


class Goal(str, Enum):
    """User's nutritional goal determining the calorie offset.

    - GAIN: surplus of +300 kcal/day
    - LOSE: deficit of -300 kcal/day
    - MAINTAIN: no offset (also the fallback goal)
    """

    GAIN = "Gain"
    LOSE = "Lose"
    MAINTAIN = "Maintain"

    def calorie_offset(self) -> float:
        """Get the fixed kcal/day offset applied to expenditure.

        Example:
            >>> Goal.LOSE.calorie_offset()
            -300.0
        """
        offsets = {
            Goal.GAIN: 300.0,
            Goal.LOSE: -300.0,
            Goal.MAINTAIN: 0.0,
        }
        return offsets[self]

    @classmethod
    def default(cls) -> "Goal":
        """Goal used when the reported label is not recognized."""
        return cls.MAINTAIN

    @classmethod
    def from_label(cls, label: object) -> Optional["Goal"]:
        """Parse a transport label, returning None when unrecognized."""
        if isinstance(label, Goal):
            return label
        return _ALIASES.get(normalize_label(label))


_ALIASES = {
    "gain": Goal.GAIN,
    "bulk": Goal.GAIN,
    "ganar": Goal.GAIN,
    "lose": Goal.LOSE,
    "cut": Goal.LOSE,
    "perder": Goal.LOSE,
    "maintain": Goal.MAINTAIN,
    "maintenance": Goal.MAINTAIN,
    "mantener": Goal.MAINTAIN,
}
