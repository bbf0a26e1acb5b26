"""New-user check used for the welcome banner."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

NEW_USER_WINDOW = timedelta(hours=24)


def _as_utc(dt: datetime) -> datetime:
    return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt


def is_new_user(
    registered_at: Optional[datetime],
    now: datetime,
    window: timedelta = NEW_USER_WINDOW,
) -> bool:
    """True iff less than `window` has elapsed since registration.

    Exactly `window` is not new. Unknown registration is not new.
    """
    if registered_at is None:
        return False
    return (_as_utc(now) - _as_utc(registered_at)) < window
