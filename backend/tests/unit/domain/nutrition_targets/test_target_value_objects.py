"""Unit tests for nutrition targets value objects."""

import math

import pytest

from domain.nutrition_targets.core.exceptions import InvalidProfile, InvalidProfileError
from domain.nutrition_targets.core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    Gender,
    Goal,
    MacroSplit,
    NutritionTargets,
)


class TestActivityLevel:
    """Test activity multipliers and label parsing."""

    @pytest.mark.parametrize(
        "level, multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHTLY_ACTIVE, 1.375),
            (ActivityLevel.NORMAL, 1.55),
            (ActivityLevel.ACTIVE, 1.725),
            (ActivityLevel.VERY_ACTIVE, 1.9),
        ],
    )
    def test_multiplier(self, level, multiplier):
        assert level.multiplier() == multiplier

    def test_default_is_sedentary(self):
        assert ActivityLevel.default() is ActivityLevel.SEDENTARY

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Normal", ActivityLevel.NORMAL),
            ("LightlyActive", ActivityLevel.LIGHTLY_ACTIVE),
            ("lightly_active", ActivityLevel.LIGHTLY_ACTIVE),
            ("very-active", ActivityLevel.VERY_ACTIVE),
            ("Very Active", ActivityLevel.VERY_ACTIVE),
            ("Sedentario", ActivityLevel.SEDENTARY),
            ("Poco activo", ActivityLevel.LIGHTLY_ACTIVE),
            ("Activo", ActivityLevel.ACTIVE),
            ("Muy activo", ActivityLevel.VERY_ACTIVE),
            (ActivityLevel.ACTIVE, ActivityLevel.ACTIVE),
        ],
    )
    def test_from_label(self, label, expected):
        assert ActivityLevel.from_label(label) is expected

    @pytest.mark.parametrize("label", ["couch potato", "", None, 3])
    def test_from_label_unrecognized(self, label):
        assert ActivityLevel.from_label(label) is None


class TestGender:
    def test_bmr_constants(self):
        assert Gender.MALE.bmr_constant() == 5.0
        assert Gender.FEMALE.bmr_constant() == -161.0

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Male", Gender.MALE),
            ("male", Gender.MALE),
            ("M", Gender.MALE),
            ("Female", Gender.FEMALE),
            (" f ", Gender.FEMALE),
        ],
    )
    def test_from_label(self, label, expected):
        assert Gender.from_label(label) is expected

    def test_from_label_unrecognized(self):
        assert Gender.from_label("other") is None


class TestGoal:
    def test_offsets(self):
        assert Goal.GAIN.calorie_offset() == 300.0
        assert Goal.LOSE.calorie_offset() == -300.0
        assert Goal.MAINTAIN.calorie_offset() == 0.0

    def test_default_is_maintain(self):
        assert Goal.default() is Goal.MAINTAIN

    @pytest.mark.parametrize(
        "label, expected",
        [("Gain", Goal.GAIN), ("bulk", Goal.GAIN), ("CUT", Goal.LOSE), ("maintenance", Goal.MAINTAIN)],
    )
    def test_from_label(self, label, expected):
        assert Goal.from_label(label) is expected


class TestProfile:
    """Test biometric validation on Profile construction."""

    def test_valid_profile(self, male_profile):
        assert male_profile.age == 25
        assert male_profile.defaulted_fields == ()
        assert male_profile.trains_per_week == 0

    @pytest.mark.parametrize("field", ["age", "height", "weight"])
    @pytest.mark.parametrize("value", [0, -5, -0.1, math.inf, math.nan])
    def test_non_positive_or_non_finite_rejected(self, build_profile, field, value):
        with pytest.raises(InvalidProfileError) as exc_info:
            build_profile(**{field: value})

        assert exc_info.value.field == field

    @pytest.mark.parametrize("value", [True, "80", None])
    def test_non_numbers_rejected(self, build_profile, value):
        with pytest.raises(InvalidProfileError):
            build_profile(weight=value)

    def test_invalid_profile_alias(self):
        assert InvalidProfile is InvalidProfileError

    def test_profile_is_immutable(self, male_profile):
        with pytest.raises(Exception):
            male_profile.weight = 90.0  # type: ignore[misc]

    @pytest.mark.parametrize("value", [0, 3, 14])
    def test_trains_per_week_accepted(self, build_profile, value):
        assert build_profile(trains_per_week=value).trains_per_week == value

    @pytest.mark.parametrize("value", [-1, -3, 2.5, True, "3"])
    def test_trains_per_week_must_be_non_negative_int(self, build_profile, value):
        with pytest.raises(InvalidProfileError) as exc_info:
            build_profile(trains_per_week=value)

        assert exc_info.value.field == "trains_per_week"


class TestEnergyValueObjects:
    def test_bmr_may_be_negative(self):
        assert BMR(value=-149.75).value == -149.75

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_energy_must_be_finite(self, value):
        with pytest.raises(ValueError):
            BMR(value=value)
        with pytest.raises(ValueError):
            TDEE(value=value, multiplier=1.2)

    def test_tdee_str(self):
        assert str(TDEE(value=2797.75, multiplier=1.55)) == "2798 kcal/day (x1.55)"

    def test_macro_split_total_calories(self):
        assert MacroSplit(protein_g=210, fat_g=93, carbs_g=280).total_calories() == 2797

    def test_macro_split_rejects_negative(self):
        with pytest.raises(ValueError):
            MacroSplit(protein_g=-1, fat_g=0, carbs_g=0)


class TestNutritionTargets:
    def test_from_parts_and_drift(self):
        targets = NutritionTargets.from_parts(2798, MacroSplit(210, 93, 280))

        assert targets.to_dict() == {"calories": 2798, "protein": 210, "fat": 93, "carbs": 280}
        assert targets.macro_calories() == 2797

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            NutritionTargets(calories=-1, protein=0, fat=0, carbs=0)
