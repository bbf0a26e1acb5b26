# src/fitcooker_dashboard/models/schema.py
from __future__ import annotations

"""
schema.py

Purpose:
    Shared dataclasses for the dashboard engine.

    These are the contracts between:
      - the store adapter (Supabase rows -> raw records),
      - the transform / ranking layer (raw records -> view models),
      - the presentation layer (DashboardViewModel.to_dict()).

    Nothing in this module talks to Supabase directly.

Objects:
      - Raw side: NutritionTotals, AuthorJoin, RawRecipeRecord, ChefCandidate,
        ProfileRecord, UserStats
      - View side: MacroSummary, AuthorSummary, RecipeViewModel, ChefSummary,
        DashboardViewModel
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

ANONYMOUS_CHEF_NAME = "Anonymous Chef"


class SectionStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"


# Dashboard sections, in render order
SECTIONS = (
    "profile",
    "stats",
    "own_recipes",
    "saved_recipes",
    "featured_chefs",
    "popular_recipes",
)


# ---------------------------------------------------------------------------
# Raw records (as read from the store)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class NutritionTotals:
    """Whole-recipe nutrition totals, not per serving."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass(frozen=True)
class AuthorJoin:
    id: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class RawRecipeRecord:
    id: str
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    preparation_time: int = 0          # minutes
    servings: Optional[int] = 1        # 0 / None only in degenerate rows
    difficulty: Optional[str] = None
    rating: Optional[float] = None     # average rating in [0, 5]
    rating_count: int = 0
    created_at: Optional[datetime] = None
    owner_id: Optional[str] = None

    # Optional joins
    author: Optional[AuthorJoin] = None
    category_names: List[Optional[str]] = field(default_factory=list)
    nutrition: Optional[NutritionTotals] = None


@dataclass(frozen=True)
class ChefCandidate:
    id: str
    name: Optional[str]
    avatar_url: Optional[str] = None
    recipe_count: int = 0
    follower_count: int = 0
    # One entry per published recipe; None / <= 0 means "unrated"
    recipe_ratings: List[Optional[float]] = field(default_factory=list)


@dataclass(frozen=True)
class ProfileRecord:
    id: str
    name: Optional[str] = None
    registered_at: Optional[datetime] = None


@dataclass(frozen=True)
class UserStats:
    recipe_count: int = 0
    follower_count: int = 0
    review_count: int = 0
    average_rating: Optional[float] = None


# ---------------------------------------------------------------------------
# View models
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MacroSummary:
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0


@dataclass(frozen=True)
class AuthorSummary:
    id: Optional[str]
    name: str = ANONYMOUS_CHEF_NAME
    avatar_url: str = ""


@dataclass(frozen=True)
class RecipeViewModel:
    id: str
    title: str
    description: Optional[str]
    image_url: Optional[str]
    preparation_time: int
    servings: Optional[int]
    difficulty: Optional[str]
    rating: Optional[float]
    rating_count: int
    created_at: Optional[datetime]
    owner_id: Optional[str]
    author: AuthorSummary
    categories: List[str]
    macros: MacroSummary


@dataclass(frozen=True)
class ChefSummary:
    id: str
    name: Optional[str]
    avatar_url: Optional[str]
    recipe_count: int
    follower_count: int
    average_rating: Optional[float]


@dataclass(frozen=True)
class DashboardViewModel:
    user_name: str
    is_new_user: bool
    stats: UserStats
    own_recipes: List[RecipeViewModel] = field(default_factory=list)
    saved_recipes: List[RecipeViewModel] = field(default_factory=list)
    featured_chefs: List[ChefSummary] = field(default_factory=list)
    popular_recipes: List[RecipeViewModel] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly mapping; datetimes become ISO-8601 strings."""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value
