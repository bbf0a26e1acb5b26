# src/fitcooker_dashboard/store/supabase_store.py
"""
supabase_store.py

Purpose:
    DashboardStore backed by Supabase (PostgREST through supabase-py).

    This is the only module that knows table / column names. Each method
    issues one (or two, for stats) round-trips with embedded joins and hands
    the rows to the pure parsers in transform/recipes.py.

Tables:
    profiles               (id, nome, avatar_url, data_cadastro, is_chef,
                            receitas_count, seguidores_count)
    receitas               (recipe rows, status 'ativa' for published)
    receitas_salvas        (usuario_id, receita_id, created_at)
    receita_categorias -> categorias(nome)
    informacao_nutricional (whole-recipe totals)

Note:
    - Use the anon / authenticated key here; RLS applies to every query.
    - PostgREST and HTTP failures are re-raised as StoreError so the
      composer can degrade a single section.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from fitcooker_dashboard.logging_utils import get_logger
from fitcooker_dashboard.models.schema import (
    ChefCandidate,
    ProfileRecord,
    RawRecipeRecord,
    UserStats,
)
from fitcooker_dashboard.ranking.chefs import effective_average_rating
from fitcooker_dashboard.store.base import StoreError
from fitcooker_dashboard.transform.recipes import (
    as_float,
    as_int,
    parse_timestamp,
    recipes_from_rows,
)

logger = get_logger(__name__)

ACTIVE_STATUS = "ativa"

RECIPE_JOINS = (
    "profiles(nome, avatar_url), "
    "receita_categorias(categorias(nome)), "
    "informacao_nutricional(*)"
)
RECIPE_SELECT = f"*, {RECIPE_JOINS}"
SAVED_RECIPE_SELECT = f"*, receitas(*, {RECIPE_JOINS})"
CHEF_SELECT = "id, nome, avatar_url, receitas_count, seguidores_count, receitas!inner(nota_media)"


class SupabaseDashboardStore:
    def __init__(self, client: Client) -> None:
        self.client = client

    # ------------------------------------------------------------------
    # Query execution
    # ------------------------------------------------------------------
    def _rows(self, query: Any, what: str) -> List[Dict[str, Any]]:
        try:
            res = query.execute()
        except (APIError, httpx.HTTPError) as exc:
            logger.warning(
                "%s query failed: %s",
                what,
                exc,
                extra={
                    "invoking_func": "SupabaseDashboardStore._rows",
                    "invoking_purpose": f"Fetch {what}",
                    "next_step": "Raise StoreError to the composer",
                    "resolution": "Check network / RLS policies / table names",
                },
            )
            raise StoreError(f"{what} query failed: {exc}") from exc
        return res.data or []

    # ------------------------------------------------------------------
    # DashboardStore
    # ------------------------------------------------------------------
    def get_profile(self, user_id: str) -> Optional[ProfileRecord]:
        rows = self._rows(
            self.client.table("profiles").select("id, nome, data_cadastro").eq("id", user_id).limit(1),
            "profile",
        )
        if not rows:
            return None
        row = rows[0]
        return ProfileRecord(
            id=str(row.get("id") or user_id),
            name=row.get("nome"),
            registered_at=parse_timestamp(row.get("data_cadastro")),
        )

    def get_user_stats(self, user_id: str) -> UserStats:
        profile_rows = self._rows(
            self.client.table("profiles")
            .select("receitas_count, seguidores_count")
            .eq("id", user_id)
            .limit(1),
            "user stats profile",
        )
        recipe_rows = self._rows(
            self.client.table("receitas")
            .select("nota_media, avaliacoes_count")
            .eq("usuario_id", user_id)
            .eq("status", ACTIVE_STATUS),
            "user stats recipes",
        )
        profile = profile_rows[0] if profile_rows else {}
        return UserStats(
            recipe_count=as_int(profile.get("receitas_count")),
            follower_count=as_int(profile.get("seguidores_count")),
            review_count=sum(as_int(r.get("avaliacoes_count")) for r in recipe_rows),
            average_rating=effective_average_rating(as_float(r.get("nota_media")) for r in recipe_rows),
        )

    def get_chef_candidates(self) -> List[ChefCandidate]:
        rows = self._rows(
            self.client.table("profiles")
            .select(CHEF_SELECT)
            .eq("is_chef", True)
            .gt("receitas_count", 0),
            "chef candidates",
        )
        out: List[ChefCandidate] = []
        for row in rows:
            out.append(
                ChefCandidate(
                    id=str(row["id"]),
                    name=row.get("nome"),
                    avatar_url=row.get("avatar_url"),
                    recipe_count=as_int(row.get("receitas_count")),
                    follower_count=as_int(row.get("seguidores_count")),
                    recipe_ratings=[as_float(r.get("nota_media")) for r in row.get("receitas") or []],
                )
            )
        return out

    def get_own_recipes(self, user_id: str, limit: int) -> List[RawRecipeRecord]:
        rows = self._rows(
            self.client.table("receitas")
            .select(RECIPE_SELECT)
            .eq("usuario_id", user_id)
            .eq("status", ACTIVE_STATUS)
            .order("created_at", desc=True)
            .limit(limit),
            "own recipes",
        )
        return recipes_from_rows(rows)

    def get_saved_recipes(self, user_id: str, limit: int) -> List[RawRecipeRecord]:
        rows = self._rows(
            self.client.table("receitas_salvas")
            .select(SAVED_RECIPE_SELECT)
            .eq("usuario_id", user_id)
            .order("created_at", desc=True)
            .limit(limit),
            "saved recipes",
        )
        records = recipes_from_rows(rows)
        if len(records) < len(rows):
            logger.info(
                "dropped %d saved rows without an embedded recipe",
                len(rows) - len(records),
                extra={
                    "invoking_func": "get_saved_recipes",
                    "invoking_purpose": "Fetch saved recipes",
                    "next_step": "Return remaining saved recipes",
                },
            )
        return records

    def get_all_recipes(self) -> List[RawRecipeRecord]:
        rows = self._rows(
            self.client.table("receitas")
            .select(RECIPE_SELECT)
            .eq("status", ACTIVE_STATUS)
            .order("created_at", desc=True),
            "recipe feed",
        )
        return recipes_from_rows(rows)
