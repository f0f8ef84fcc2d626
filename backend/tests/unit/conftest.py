"""Unit test configuration.

Shared builders for unit tests. Unit tests should not depend on app.py
fixtures or external services.
"""

from typing import Any, Callable

import pytest

from domain.nutrition_targets.core.value_objects import (
    ActivityLevel,
    Gender,
    Goal,
    Profile,
)


def make_profile(**overrides: Any) -> Profile:
    """Scenario 1 profile (Male 25y 180cm 80kg, Normal, Maintain) with overrides."""
    values: dict[str, Any] = {
        "gender": Gender.MALE,
        "age": 25,
        "height": 180.0,
        "weight": 80.0,
        "activity_level": ActivityLevel.NORMAL,
        "goal": Goal.MAINTAIN,
    }
    values.update(overrides)
    return Profile(**values)


@pytest.fixture
def build_profile() -> Callable[..., Profile]:
    return make_profile


@pytest.fixture
def male_profile() -> Profile:
    return make_profile()


@pytest.fixture
def female_profile() -> Profile:
    """Scenario 3 profile (Female 30y 165cm 60kg, Active, Lose)."""
    return make_profile(
        gender=Gender.FEMALE,
        age=30,
        height=165.0,
        weight=60.0,
        activity_level=ActivityLevel.ACTIVE,
        goal=Goal.LOSE,
    )
