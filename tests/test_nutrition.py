"""Per-serving macro calculation."""
import pytest

from fitcooker_dashboard.models.schema import MacroSummary, NutritionTotals
from fitcooker_dashboard.transform.nutrition import ZERO_MACROS, per_serving_macros, round_half_up


def test_whole_recipe_totals_divided_by_servings(nutrition_totals):
    assert per_serving_macros(nutrition_totals, 4) == MacroSummary(calories=250, protein=25, carbs=30, fat=10)


def test_single_serving_keeps_totals(nutrition_totals):
    assert per_serving_macros(nutrition_totals, 1) == MacroSummary(calories=1000, protein=100, carbs=120, fat=40)


def test_rounds_half_up_not_to_even():
    totals = NutritionTotals(calories=5, protein=7, carbs=1, fat=0)
    # 2.5 -> 3, 3.5 -> 4, 0.5 -> 1
    assert per_serving_macros(totals, 2) == MacroSummary(calories=3, protein=4, carbs=1, fat=0)


def test_rounds_fractions_to_nearest():
    totals = NutritionTotals(calories=1000, protein=10, carbs=0, fat=1)
    assert per_serving_macros(totals, 3) == MacroSummary(calories=333, protein=3, carbs=0, fat=0)


@pytest.mark.parametrize("servings", [0, None, -2])
def test_degenerate_servings_give_zero_vector(nutrition_totals, servings):
    assert per_serving_macros(nutrition_totals, servings) == ZERO_MACROS


def test_missing_totals_give_zero_vector():
    assert per_serving_macros(None, 4) == MacroSummary(0, 0, 0, 0)


@pytest.mark.parametrize("value,expected", [(0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (9.99, 10)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("value,expected", [(0.49999999999999994, 0), (2.4999999999999996, 2), (1e-17, 0)])
def test_round_half_up_just_below_half(value, expected):
    assert round_half_up(value) == expected
