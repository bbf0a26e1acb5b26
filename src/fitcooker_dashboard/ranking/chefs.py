"""
chefs.py

Featured-chef ranking.

Candidates arrive pre-filtered by the store (is_chef and receitas_count > 0).
Each chef gets an *effective* average rating computed only over recipe ratings
strictly above zero, then the list is ranked with a composite key:

  1. chefs with an effective rating before chefs without one
  2. higher effective rating first
  3. higher follower count first

Python's sort is stable, so anything still tied keeps the input order.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Tuple

from fitcooker_dashboard.logging_utils import get_logger
from fitcooker_dashboard.models.schema import ChefCandidate, ChefSummary

logger = get_logger(__name__)

FEATURED_CHEF_LIMIT = 4


def effective_average_rating(ratings: Iterable[Optional[float]]) -> Optional[float]:
    """Mean of the positive ratings, one decimal (half-up); None if there are none."""
    valid = [float(r) for r in ratings if r is not None and float(r) > 0]
    if not valid:
        return None
    avg = sum(valid) / len(valid)
    return float(Decimal(str(avg)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize_chef(candidate: ChefCandidate) -> ChefSummary:
    return ChefSummary(
        id=candidate.id,
        name=candidate.name,
        avatar_url=candidate.avatar_url,
        recipe_count=candidate.recipe_count,
        follower_count=candidate.follower_count,
        average_rating=effective_average_rating(candidate.recipe_ratings),
    )


def _ranking_key(chef: ChefSummary) -> Tuple[int, float, int]:
    if chef.average_rating is None:
        return (1, 0.0, -chef.follower_count)
    return (0, -chef.average_rating, -chef.follower_count)


def rank_featured_chefs(candidates: Iterable[ChefCandidate], limit: int = FEATURED_CHEF_LIMIT) -> List[ChefSummary]:
    summaries = [summarize_chef(c) for c in candidates]
    ranked = sorted(summaries, key=_ranking_key)
    logger.debug(
        "ranked %d chef candidates, keeping %d",
        len(ranked),
        min(limit, len(ranked)),
        extra={
            "invoking_func": "rank_featured_chefs",
            "invoking_purpose": "Pick featured chefs for the dashboard",
        },
    )
    return ranked[:limit]
