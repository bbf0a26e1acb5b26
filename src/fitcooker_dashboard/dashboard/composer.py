# src/fitcooker_dashboard/dashboard/composer.py
"""
composer.py

Purpose:
    Build one DashboardViewModel for a user from independent store reads.

Flow:
    profile ─────────┐
    user stats ──────┤
    own recipes ─────┤  asyncio.gather (each read in a worker thread)
    saved recipes ───┤        │
    chef candidates ─┤        ▼
    recipe feed ─────┘  per-section transform / rank  ->  DashboardViewModel

Every section is wrapped on its own: a failed read leaves that section at its
default (empty list, zero stats, "not new") and never blocks the others.
There is no error state distinct from "empty".
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from fitcooker_dashboard.config import DashboardSettings
from fitcooker_dashboard.logging_utils import get_logger
from fitcooker_dashboard.models.schema import (
    ChefCandidate,
    ChefSummary,
    DashboardViewModel,
    ProfileRecord,
    RawRecipeRecord,
    RecipeViewModel,
    UserStats,
)
from fitcooker_dashboard.ranking.chefs import rank_featured_chefs
from fitcooker_dashboard.ranking.new_user import is_new_user
from fitcooker_dashboard.ranking.popular import select_popular_recipes
from fitcooker_dashboard.store.base import DashboardStore, StoreError
from fitcooker_dashboard.transform.recipes import to_view_models

logger = get_logger(__name__)

SectionCallback = Callable[[str], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DashboardComposer:
    def __init__(self, store: DashboardStore, settings: Optional[DashboardSettings] = None) -> None:
        self.store = store
        self.settings = settings or DashboardSettings()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def compose_dashboard(
        self,
        user_id: str,
        now: Optional[datetime] = None,
        on_section_ready: Optional[SectionCallback] = None,
    ) -> DashboardViewModel:
        """
        Fetch all sections concurrently and compose the dashboard snapshot.

        Args:
            user_id: viewing user
            now: reference instant for the new-user check (default: UTC now)
            on_section_ready: called with the section name as each one resolves

        Returns:
            DashboardViewModel. Sections whose read failed are empty.
        """
        now = now or _utcnow()
        limit = self.settings.section_limit

        profile, stats, own, saved, chefs, popular = await asyncio.gather(
            self._section("profile", None, on_section_ready, self.store.get_profile, user_id),
            self._section("stats", UserStats(), on_section_ready, self.store.get_user_stats, user_id),
            self._section(
                "own_recipes", [], on_section_ready,
                self.store.get_own_recipes, user_id, limit,
                transform=self._recent,
            ),
            self._section(
                "saved_recipes", [], on_section_ready,
                self.store.get_saved_recipes, user_id, limit,
                transform=self._recent,
            ),
            self._section(
                "featured_chefs", [], on_section_ready,
                self.store.get_chef_candidates,
                transform=self._featured,
            ),
            self._section(
                "popular_recipes", [], on_section_ready,
                self.store.get_all_recipes,
                transform=self._popular,
            ),
        )

        return DashboardViewModel(
            user_name=self._user_name(profile),
            is_new_user=is_new_user(
                profile.registered_at if profile else None,
                now,
                self.settings.new_user_window,
            ),
            stats=stats,
            own_recipes=own,
            saved_recipes=saved,
            featured_chefs=chefs,
            popular_recipes=popular,
        )

    # ------------------------------------------------------------------
    # Section pipelines
    # ------------------------------------------------------------------
    async def _section(
        self,
        section: str,
        default: Any,
        on_ready: Optional[SectionCallback],
        fetch: Callable[..., Any],
        *args: Any,
        transform: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        try:
            result = await asyncio.to_thread(fetch, *args)
            if transform is not None:
                result = transform(result)
        except StoreError as exc:
            logger.warning(
                "%s fetch failed: %s",
                section,
                exc,
                extra={
                    "invoking_func": "compose_dashboard",
                    "invoking_purpose": "Build dashboard snapshot",
                    "next_step": f"Render {section} with its default",
                    "resolution": "Transient; next dashboard load retries",
                },
            )
            result = default
        except Exception:  # noqa: BLE001
            logger.error(
                "%s pipeline raised unexpectedly",
                section,
                exc_info=True,
                extra={
                    "invoking_func": "compose_dashboard",
                    "invoking_purpose": "Build dashboard snapshot",
                    "next_step": f"Render {section} with its default",
                    "resolution": "Inspect the store rows for this user",
                },
            )
            result = default

        if on_ready is not None:
            on_ready(section)
        return result

    def _recent(self, records: List[RawRecipeRecord]) -> List[RecipeViewModel]:
        # Store already orders newest first; keep the limit even if it did not
        return to_view_models(records[: self.settings.section_limit])

    def _featured(self, candidates: List[ChefCandidate]) -> List[ChefSummary]:
        return rank_featured_chefs(candidates, limit=self.settings.section_limit)

    def _popular(self, feed: List[RawRecipeRecord]) -> List[RecipeViewModel]:
        return select_popular_recipes(
            to_view_models(feed),
            limit=self.settings.section_limit,
            threshold=self.settings.popular_min_rating,
        )

    def _user_name(self, profile: Optional[ProfileRecord]) -> str:
        if profile is not None and profile.name:
            return profile.name
        return self.settings.default_user_name
