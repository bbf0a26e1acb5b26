# src/fitcooker_dashboard/transform/recipes.py
from __future__ import annotations

"""
recipes.py

Purpose:
    Turn raw recipe rows (PostgREST JSON with nested joins) into
    RawRecipeRecord, and RawRecipeRecord into the flat RecipeViewModel.

    Row shape (table `receitas`):
        id, titulo, descricao, imagem_url, tempo_preparo, porcoes,
        dificuldade, nota_media, avaliacoes_count, created_at, usuario_id
        profiles(nome, avatar_url)                      -- optional author join
        receita_categorias(categorias(nome))            -- optional category links
        informacao_nutricional(*)                       -- optional, list or object

    Saved recipes arrive wrapped: {"id": ..., "receitas": {<recipe row>}}.

Every join is optional. Missing pieces degrade to defaults, rows are never
rejected.
"""

import re
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional

from fitcooker_dashboard.models.schema import (
    ANONYMOUS_CHEF_NAME,
    AuthorJoin,
    AuthorSummary,
    NutritionTotals,
    RawRecipeRecord,
    RecipeViewModel,
)
from fitcooker_dashboard.transform.nutrition import per_serving_macros

SAVED_RECIPE_KEY = "receitas"

# Fractional seconds followed by an optional UTC offset at the end of the string
_FRACTION_RE = re.compile(r"\.(\d+)(?=([+-]\d{2}:\d{2})?$)")


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------
def _normalize_fraction(text: str) -> str:
    """Pad / trim fractional seconds to 6 digits.

    Postgres drops trailing zeros (".12345"), which fromisoformat() rejects
    before Python 3.11.
    """
    return _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """ISO-8601 string / datetime -> aware datetime (naive values are UTC)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(_normalize_fraction(str(value).replace("Z", "+00:00")))
        except ValueError:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def as_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def as_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# ---------------------------------------------------------------------------
# Row -> RawRecipeRecord
# ---------------------------------------------------------------------------
def unwrap_saved_row(row: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """Return the embedded recipe of a saved-recipe row, or the row itself.

    A wrapper whose recipe join is null (recipe deleted / hidden by RLS)
    yields None.
    """
    if SAVED_RECIPE_KEY in row:
        inner = row.get(SAVED_RECIPE_KEY)
        if isinstance(inner, list):
            inner = inner[0] if inner else None
        return inner if isinstance(inner, Mapping) else None
    return row


def _author_from_join(joined: Any) -> Optional[AuthorJoin]:
    if not isinstance(joined, Mapping):
        return None
    return AuthorJoin(
        id=joined.get("id"),
        name=joined.get("nome"),
        avatar_url=joined.get("avatar_url"),
    )


def _category_names(links: Any) -> List[Optional[str]]:
    names: List[Optional[str]] = []
    for link in links or []:
        category = link.get("categorias") if isinstance(link, Mapping) else None
        names.append(category.get("nome") if isinstance(category, Mapping) else None)
    return names


def _nutrition_from_join(joined: Any) -> Optional[NutritionTotals]:
    if isinstance(joined, list):
        joined = joined[0] if joined else None
    if not isinstance(joined, Mapping):
        return None
    return NutritionTotals(
        calories=as_float(joined.get("calorias_totais")) or 0.0,
        protein=as_float(joined.get("proteinas_totais")) or 0.0,
        carbs=as_float(joined.get("carboidratos_totais")) or 0.0,
        fat=as_float(joined.get("gorduras_totais")) or 0.0,
    )


def recipe_from_row(row: Mapping[str, Any]) -> RawRecipeRecord:
    """Parse one recipe row (plain or saved-wrapped) into a RawRecipeRecord."""
    recipe = unwrap_saved_row(row)
    if recipe is None:
        raise ValueError(f"saved recipe row {row.get('id')!r} has no embedded recipe")

    servings = recipe.get("porcoes")
    return RawRecipeRecord(
        id=str(recipe.get("id") or ""),
        title=recipe.get("titulo") or "",
        description=recipe.get("descricao"),
        image_url=recipe.get("imagem_url"),
        preparation_time=as_int(recipe.get("tempo_preparo")),
        servings=as_int(servings) if servings is not None else None,
        difficulty=recipe.get("dificuldade"),
        rating=as_float(recipe.get("nota_media")),
        rating_count=as_int(recipe.get("avaliacoes_count")),
        created_at=parse_timestamp(recipe.get("created_at")),
        owner_id=recipe.get("usuario_id"),
        author=_author_from_join(recipe.get("profiles")),
        category_names=_category_names(recipe.get("receita_categorias")),
        nutrition=_nutrition_from_join(recipe.get("informacao_nutricional")),
    )


def recipes_from_rows(rows: Iterable[Mapping[str, Any]]) -> List[RawRecipeRecord]:
    """Parse many rows, dropping saved-recipe wrappers without a recipe."""
    return [recipe_from_row(r) for r in rows or [] if unwrap_saved_row(r) is not None]


# ---------------------------------------------------------------------------
# RawRecipeRecord -> RecipeViewModel
# ---------------------------------------------------------------------------
def author_summary(record: RawRecipeRecord) -> AuthorSummary:
    author = record.author
    if author is None:
        return AuthorSummary(id=record.owner_id, name=ANONYMOUS_CHEF_NAME, avatar_url="")
    return AuthorSummary(
        id=author.id or record.owner_id,
        name=author.name or ANONYMOUS_CHEF_NAME,
        avatar_url=author.avatar_url or "",
    )


def to_view_model(record: RawRecipeRecord) -> RecipeViewModel:
    return RecipeViewModel(
        id=record.id,
        title=record.title,
        description=record.description,
        image_url=record.image_url,
        preparation_time=record.preparation_time,
        servings=record.servings,
        difficulty=record.difficulty,
        rating=record.rating,
        rating_count=record.rating_count,
        created_at=record.created_at,
        owner_id=record.owner_id,
        author=author_summary(record),
        # keep source order and duplicates, drop null / empty names
        categories=[name for name in record.category_names if name],
        macros=per_serving_macros(record.nutrition, record.servings),
    )


def to_view_models(records: Iterable[RawRecipeRecord]) -> List[RecipeViewModel]:
    return [to_view_model(r) for r in records]
