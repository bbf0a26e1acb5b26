"""
base.py

The read-only data-access contract the dashboard composer depends on.

The composer never imports Supabase; it receives any object implementing
DashboardStore. Production uses SupabaseDashboardStore, tests use an
in-memory fake.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from fitcooker_dashboard.models.schema import (
    ChefCandidate,
    ProfileRecord,
    RawRecipeRecord,
    UserStats,
)


class StoreError(RuntimeError):
    """A store read failed (network, PostgREST or permission error)."""


class DashboardStore(Protocol):
    def get_profile(self, user_id: str) -> Optional[ProfileRecord]:
        ...

    def get_user_stats(self, user_id: str) -> UserStats:
        ...

    def get_chef_candidates(self) -> List[ChefCandidate]:
        """Chefs with at least one published recipe."""
        ...

    def get_own_recipes(self, user_id: str, limit: int) -> List[RawRecipeRecord]:
        """Active recipes owned by user_id, newest first."""
        ...

    def get_saved_recipes(self, user_id: str, limit: int) -> List[RawRecipeRecord]:
        """Recipes saved by user_id, most recently saved first."""
        ...

    def get_all_recipes(self) -> List[RawRecipeRecord]:
        """The full active recipe feed."""
        ...
