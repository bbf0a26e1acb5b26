"""
Shared pytest fixtures for the FitCooker dashboard tests.

Provides:
- FakeStore: in-memory DashboardStore with per-method failure injection
- Builders for raw rows, raw records and recipe view models
- Logging capture
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

from fitcooker_dashboard.models.schema import (
    AuthorJoin,
    ChefCandidate,
    NutritionTotals,
    ProfileRecord,
    RawRecipeRecord,
    UserStats,
)
from fitcooker_dashboard.store.base import StoreError
from fitcooker_dashboard.transform.recipes import to_view_model

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Builders
# ============================================================================

def make_record(recipe_id: str = "r1", **overrides: Any) -> RawRecipeRecord:
    fields: Dict[str, Any] = dict(
        id=recipe_id,
        title=f"Recipe {recipe_id}",
        description="Tasty",
        image_url=None,
        preparation_time=30,
        servings=4,
        difficulty="Fácil",
        rating=None,
        rating_count=0,
        created_at=NOW,
        owner_id="user-1",
        author=AuthorJoin(name="Ana", avatar_url="https://cdn/ana.png"),
        category_names=["Jantar"],
        nutrition=None,
    )
    fields.update(overrides)
    return RawRecipeRecord(**fields)


def make_vm(recipe_id: str, rating: Optional[float]):
    return to_view_model(make_record(recipe_id, rating=rating))


def make_recipe_row(recipe_id: str = "r1", **overrides: Any) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "id": recipe_id,
        "titulo": "Frango grelhado",
        "descricao": "Simples e proteico",
        "imagem_url": "https://cdn/frango.jpg",
        "tempo_preparo": 25,
        "porcoes": 4,
        "dificuldade": "Fácil",
        "nota_media": 4.6,
        "avaliacoes_count": 12,
        "created_at": "2026-10-15T08:30:00Z",
        "usuario_id": "user-1",
        "status": "ativa",
        "profiles": {"nome": "Ana", "avatar_url": "https://cdn/ana.png"},
        "receita_categorias": [
            {"categorias": {"nome": "Jantar"}},
            {"categorias": None},
            {"categorias": {"nome": "Low carb"}},
        ],
        "informacao_nutricional": [
            {
                "calorias_totais": 1000,
                "proteinas_totais": 100,
                "carboidratos_totais": 120,
                "gorduras_totais": 40,
            }
        ],
    }
    row.update(overrides)
    return row


# ============================================================================
# Fake store
# ============================================================================

class FakeStore:
    """DashboardStore backed by plain lists; `fail` names methods that raise."""

    def __init__(self) -> None:
        self.profile: Optional[ProfileRecord] = ProfileRecord(
            id="user-1", name="Ana", registered_at=datetime(2026, 10, 1, tzinfo=timezone.utc)
        )
        self.stats = UserStats(recipe_count=3, follower_count=10, review_count=7, average_rating=4.4)
        self.chefs: List[ChefCandidate] = []
        self.own: List[RawRecipeRecord] = []
        self.saved: List[RawRecipeRecord] = []
        self.feed: List[RawRecipeRecord] = []
        self.fail: Dict[str, BaseException] = {}
        self.calls: List[tuple] = []

    def _call(self, name: str, *args: Any) -> None:
        self.calls.append((name,) + args)
        if name in self.fail:
            raise self.fail[name]

    def get_profile(self, user_id: str) -> Optional[ProfileRecord]:
        self._call("get_profile", user_id)
        return self.profile

    def get_user_stats(self, user_id: str) -> UserStats:
        self._call("get_user_stats", user_id)
        return self.stats

    def get_chef_candidates(self) -> List[ChefCandidate]:
        self._call("get_chef_candidates")
        return list(self.chefs)

    def get_own_recipes(self, user_id: str, limit: int) -> List[RawRecipeRecord]:
        self._call("get_own_recipes", user_id, limit)
        return list(self.own)

    def get_saved_recipes(self, user_id: str, limit: int) -> List[RawRecipeRecord]:
        self._call("get_saved_recipes", user_id, limit)
        return list(self.saved)

    def get_all_recipes(self) -> List[RawRecipeRecord]:
        self._call("get_all_recipes")
        return list(self.feed)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def store_error() -> StoreError:
    return StoreError("connection reset")


@pytest.fixture
def nutrition_totals() -> NutritionTotals:
    return NutritionTotals(calories=1000, protein=100, carbs=120, fat=40)


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def configure_test_logging(caplog):
    """Configure logging for all tests."""
    caplog.set_level(logging.DEBUG)
    return caplog
