"""Community-popular recipes: rating strictly above a threshold, best first."""
from __future__ import annotations

from typing import Iterable, List

from fitcooker_dashboard.models.schema import RecipeViewModel

POPULAR_MIN_RATING = 4.0
POPULAR_LIMIT = 4


def select_popular_recipes(
    recipes: Iterable[RecipeViewModel],
    limit: int = POPULAR_LIMIT,
    threshold: float = POPULAR_MIN_RATING,
) -> List[RecipeViewModel]:
    # No minimum rating count: a single 5-star review qualifies.
    # TODO: weigh rating_count once the feed exposes enough reviews per recipe.
    rated = [r for r in recipes if r.rating is not None and r.rating > threshold]
    rated.sort(key=lambda r: r.rating, reverse=True)
    return rated[:limit]
