"""Unit tests for parsing the model's nutrition facts answer."""

import pytest
from pydantic import ValidationError

from domain.food_analysis.core.entities import Healthiness, NutritionFacts
from infrastructure.ai.openrouter import NutritionFactsResponse, parse_nutrition_facts


class TestParseNutritionFacts:
    def test_bare_json(self):
        facts = parse_nutrition_facts(
            '{"Calories": 450, "Protein": 25, "Fat": 12.5, "Carbohydrates": 60, "Healthiness": "Unhealthy"}'
        )

        assert facts == NutritionFacts(450, 25, 12.5, 60, Healthiness.UNHEALTHY)

    def test_markdown_fence(self):
        text = '```json\n{"Calories": 300, "Protein": 10, "Fat": 5, "Carbohydrates": 50}\n```'

        facts = parse_nutrition_facts(text)

        assert facts is not None
        assert facts.calories == 300
        assert facts.healthiness is None

    def test_json_inside_prose(self):
        text = 'Here you go: {"calories": 200, "protein": 8, "fat": 4, "carbs": 30, "healthiness": "healthy"} Enjoy!'

        facts = parse_nutrition_facts(text)

        assert facts == NutritionFacts(200, 8, 4, 30, Healthiness.HEALTHY)

    def test_skips_invalid_candidates(self):
        text = '{"note": "estimate"} {"Calories": 100, "Protein": 1, "Fat": 1, "Carbohydrates": 20}'

        assert parse_nutrition_facts(text).calories == 100

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "Food not detected",
            "{not json}",
            '{"Calories": -5, "Protein": 1, "Fat": 1, "Carbohydrates": 1}',
            '{"Calories": 100}',
        ],
    )
    def test_returns_none(self, text):
        assert parse_nutrition_facts(text) is None


class TestNutritionFactsResponse:
    def test_aliases_and_field_names(self):
        by_alias = NutritionFactsResponse.model_validate(
            {"Calories": 1, "Protein": 2, "Fat": 3, "Carbohydrates": 4}
        )
        by_name = NutritionFactsResponse(calories=1, protein=2, fat=3, carbohydrates=4)

        assert by_alias == by_name

    def test_kcal_alias(self):
        model = NutritionFactsResponse.model_validate(
            {"kcal": 10, "proteins": 1, "fats": 1, "carbs": 1}
        )

        assert model.calories == 10

    def test_unknown_healthiness_is_dropped(self):
        model = NutritionFactsResponse.model_validate(
            {"Calories": 1, "Protein": 1, "Fat": 1, "Carbohydrates": 1, "Healthiness": "Meh"}
        )

        assert model.healthiness is None

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            NutritionFactsResponse.model_validate(
                {"Calories": 1, "Protein": -1, "Fat": 1, "Carbohydrates": 1}
            )
