# src/fitcooker_dashboard/transform/nutrition.py
from __future__ import annotations

"""
nutrition.py

Purpose:
    Per-serving macro values from whole-recipe nutrition totals.

Notes:
    - Rounding is half-up (2.5 -> 3), not Python's banker's rounding.
    - Missing totals and servings < 1 both give the zero vector, so callers
      cannot tell "no nutrition data" from "degenerate servings" by output.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from fitcooker_dashboard.models.schema import MacroSummary, NutritionTotals

ZERO_MACROS = MacroSummary(calories=0, protein=0, carbs=0, fat=0)


def round_half_up(value: float) -> int:
    # Exact decimal of the float's shortest repr, rounded half-up
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def per_serving_macros(totals: Optional[NutritionTotals], servings: Optional[int]) -> MacroSummary:
    if totals is None or not servings or servings < 1:
        return ZERO_MACROS
    return MacroSummary(
        calories=round_half_up(totals.calories / servings),
        protein=round_half_up(totals.protein / servings),
        carbs=round_half_up(totals.carbs / servings),
        fat=round_half_up(totals.fat / servings),
    )
