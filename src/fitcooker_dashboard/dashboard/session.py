# src/fitcooker_dashboard/dashboard/session.py
"""
session.py

Purpose:
    Own the dashboard state for one client: the viewing user, the per-section
    loading flags and the latest composed snapshot.

Rules:
    - A new viewing user (sign-in / user switch) cancels any composition still
      running for the previous user and starts a fresh one.
    - Every composition carries a generation number. Section flags and the
      snapshot are only written while that generation is still current, so
      late results for a superseded user are dropped.
    - Sections flip LOADING -> READY one by one; the snapshot is published
      only after all of them resolved.
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from fitcooker_dashboard.dashboard.composer import DashboardComposer
from fitcooker_dashboard.logging_utils import get_logger
from fitcooker_dashboard.models.schema import SECTIONS, DashboardViewModel, SectionStatus

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DashboardSession:
    def __init__(self, composer: DashboardComposer, clock: Callable[[], datetime] = _utcnow) -> None:
        self.composer = composer
        self._clock = clock
        self._user_id: Optional[str] = None
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._snapshot: Optional[DashboardViewModel] = None
        self._sections: Dict[str, SectionStatus] = self._all(SectionStatus.LOADING)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def viewing_user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def snapshot(self) -> Optional[DashboardViewModel]:
        return self._snapshot

    @property
    def sections(self) -> Mapping[str, SectionStatus]:
        return MappingProxyType(self._sections)

    @property
    def is_ready(self) -> bool:
        return all(s is SectionStatus.READY for s in self._sections.values())

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------
    def set_viewing_user(self, user_id: str) -> asyncio.Task:
        """Start composing for user_id unless it is already the viewing user."""
        if user_id == self._user_id and self._task is not None:
            return self._task
        self._snapshot = None
        return self._start(user_id)

    def refresh(self) -> asyncio.Task:
        """Recompose for the current viewing user, keeping the old snapshot until done."""
        if self._user_id is None:
            raise RuntimeError("no viewing user; call set_viewing_user() first")
        return self._start(self._user_id)

    def clear(self) -> None:
        """Sign-out: drop pending work and the snapshot."""
        self._cancel_pending()
        self._generation += 1
        self._user_id = None
        self._snapshot = None
        self._sections = self._all(SectionStatus.LOADING)

    async def wait(self) -> Optional[DashboardViewModel]:
        """Wait until the current composition (including any that replace it) settles."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self._snapshot

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _start(self, user_id: str) -> asyncio.Task:
        self._cancel_pending()
        self._generation += 1
        self._user_id = user_id
        self._sections = self._all(SectionStatus.LOADING)
        self._task = asyncio.get_running_loop().create_task(self._run(user_id, self._generation))
        return self._task

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _run(self, user_id: str, generation: int) -> Optional[DashboardViewModel]:
        def on_section_ready(section: str) -> None:
            if generation == self._generation:
                self._sections[section] = SectionStatus.READY

        vm = await self.composer.compose_dashboard(user_id, self._clock(), on_section_ready=on_section_ready)

        if generation != self._generation:
            logger.info(
                "discarding dashboard for superseded user %s",
                user_id,
                extra={
                    "invoking_func": "DashboardSession._run",
                    "invoking_purpose": "Publish dashboard snapshot",
                    "next_step": "Keep state of the current viewing user",
                },
            )
            return None

        self._snapshot = vm
        return vm

    @staticmethod
    def _all(status: SectionStatus) -> Dict[str, SectionStatus]:
        return {name: status for name in SECTIONS}
