"""
dashboard_example.py

Compose one dashboard against a live Supabase project and print it.

Run:
  python -m fitcooker_dashboard.dashboard.dashboard_example --user-id <uuid>
  python -m fitcooker_dashboard.dashboard.dashboard_example --user-id <uuid> --json

Requires:
  SUPABASE_URL
  SUPABASE_ANON_KEY (or SUPABASE_SERVICE_ROLE_KEY for local tooling)
"""
from __future__ import annotations

import argparse
import asyncio
import json
from typing import Optional, Sequence

from fitcooker_dashboard.config import DashboardSettings, get_supabase_client
from fitcooker_dashboard.dashboard.composer import DashboardComposer
from fitcooker_dashboard.dashboard.session import DashboardSession
from fitcooker_dashboard.models.schema import DashboardViewModel
from fitcooker_dashboard.store.supabase_store import SupabaseDashboardStore


def format_summary(vm: DashboardViewModel) -> str:
    stats = vm.stats
    rating = f"{stats.average_rating}" if stats.average_rating is not None else "N/A"
    lines = [f"Welcome, {vm.user_name}!"]
    if vm.is_new_user:
        lines.append("  (new chef, registered in the last 24h)")
    lines.append(
        f"  recipes={stats.recipe_count} followers={stats.follower_count} "
        f"reviews={stats.review_count} rating={rating}"
    )

    def section(title: str, rows: Sequence[str]) -> None:
        lines.append(f"{title}:")
        if not rows:
            lines.append("    (empty)")
        for i, row in enumerate(rows, start=1):
            lines.append(f"  {i:02d}. {row}")

    section("My recipes", [f"{r.title}  {r.macros.calories} kcal/serving" for r in vm.own_recipes])
    section("Saved", [f"{r.title}  by {r.author.name}" for r in vm.saved_recipes])
    section(
        "Featured chefs",
        [f"{c.name}  rating={c.average_rating}  followers={c.follower_count}" for c in vm.featured_chefs],
    )
    section("Popular", [f"{r.title}  rating={r.rating}" for r in vm.popular_recipes])
    return "\n".join(lines)


async def run(user_id: str) -> Optional[DashboardViewModel]:
    store = SupabaseDashboardStore(get_supabase_client())
    session = DashboardSession(DashboardComposer(store, DashboardSettings.from_env()))
    session.set_viewing_user(user_id)
    return await session.wait()


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Preview a FitCooker user dashboard")
    ap.add_argument("--user-id", required=True)
    ap.add_argument("--json", action="store_true", help="Print the full view model as JSON")
    args = ap.parse_args(argv)

    vm = asyncio.run(run(args.user_id))
    if vm is None:
        return
    if args.json:
        print(json.dumps(vm.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_summary(vm))


if __name__ == "__main__":
    main()
