"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.profile import Profile


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate.

    The app labels this the Harris-Benedict equation; the coefficients are
    the ones of the revised (Mifflin-St Jeor) form:

    Formula:
        Male:   BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age + 5
        Female: BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age - 161
    """

    def calculate(self, profile: Profile) -> BMR:
        """Calculate BMR from profile biometrics.

        Extreme biometrics (very old, very small) can give zero or a
        negative value; it is returned as is and the calculator floors the
        final calorie figure at 0.

        Args:
            profile: Validated profile

        Returns:
            BMR: Basal metabolic rate in kcal/day

        Example:
            >>> profile = Profile(gender=Gender.MALE, age=25, height=180.0,
            ...                   weight=80.0, activity_level=ActivityLevel.NORMAL,
            ...                   goal=Goal.MAINTAIN)
            >>> BMRService().calculate(profile).value
            1805.0
        """
        base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
        return BMR(value=base + profile.gender.bmr_constant())
