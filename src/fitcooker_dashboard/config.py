"""
config.py

Purpose:
    - get_supabase_client(): build a Supabase Python client from env vars.
    - DashboardSettings: the small set of knobs the dashboard engine reads
      (section size, new-user window, popularity threshold, greeting default).

Usage:
    from fitcooker_dashboard.config import get_supabase_client, DashboardSettings
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, TypeVar

from dotenv import load_dotenv
from supabase import Client, create_client

from fitcooker_dashboard.logging_utils import get_logger

load_dotenv()  # loads .env

logger = get_logger(__name__)

T = TypeVar("T")


def get_supabase_client() -> Client:
    """Create a Supabase client using env vars.

    The dashboard only reads, so the anon key is preferred; the service role
    key is accepted for local tooling.
    """
    url = os.environ["SUPABASE_URL"]
    key = os.environ.get("SUPABASE_ANON_KEY") or os.environ["SUPABASE_SERVICE_ROLE_KEY"]
    return create_client(url, key)


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(
            "Invalid value %r for %s, using default %r",
            raw,
            name,
            default,
            extra={
                "invoking_func": "DashboardSettings.from_env",
                "invoking_purpose": "Load dashboard settings",
                "next_step": "Continue with default",
                "resolution": f"Fix {name} in the environment / .env",
            },
        )
        return default


@dataclass(frozen=True)
class DashboardSettings:
    section_limit: int = 4
    new_user_window_hours: float = 24.0
    popular_min_rating: float = 4.0
    default_user_name: str = "Chef"

    @property
    def new_user_window(self) -> timedelta:
        return timedelta(hours=self.new_user_window_hours)

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        return cls(
            section_limit=_env("DASHBOARD_SECTION_LIMIT", cls.section_limit, int),
            new_user_window_hours=_env("DASHBOARD_NEW_USER_WINDOW_HOURS", cls.new_user_window_hours, float),
            popular_min_rating=_env("DASHBOARD_POPULAR_MIN_RATING", cls.popular_min_rating, float),
            default_user_name=_env("DASHBOARD_DEFAULT_USER_NAME", cls.default_user_name, str),
        )
