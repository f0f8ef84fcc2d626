"""Gender value object - selects the BMR sex constant."""

from enum import Enum
from typing import Optional

from ._labels import normalize_label


class Gender(str, Enum):
    """Gender used by the BMR equation.

    - MALE: +5 kcal constant
    - FEMALE: -161 kcal constant
    """

    MALE = "Male"
    FEMALE = "Female"

    def bmr_constant(self) -> float:
        """Get the sex-specific constant added to the BMR base term.

        Example:
            >>> Gender.FEMALE.bmr_constant()
            -161.0
        """
        constants = {
            Gender.MALE: 5.0,
            Gender.FEMALE: -161.0,
        }
        return constants[self]

    @classmethod
    def from_label(cls, label: object) -> Optional["Gender"]:
        """Parse a transport label, returning None when unrecognized."""
        if isinstance(label, Gender):
            return label
        return _ALIASES.get(normalize_label(label))


_ALIASES = {
    "male": Gender.MALE,
    "m": Gender.MALE,
    "man": Gender.MALE,
    "hombre": Gender.MALE,
    "female": Gender.FEMALE,
    "f": Gender.FEMALE,
    "woman": Gender.FEMALE,
    "mujer": Gender.FEMALE,
}
