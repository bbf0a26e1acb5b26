# src/fitcooker_dashboard/logging_utils.py
"""
Shared structured logging for the FitCooker dashboard engine.

Format (one line per log entry):
<RunId>|<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<ModulePurpose>|
<InvokingFunc>|<InvokingFuncPurpose>|<Detail>|<NextStep>|<Resolution>|<END>

Usage:
    logger = get_logger(__name__)
    logger.warning(
        "saved_recipes fetch failed: %s",
        exc,
        extra={
            "invoking_func": "compose_dashboard",
            "invoking_purpose": "Build dashboard snapshot",
            "next_step": "Render section as empty",
            "resolution": "Check Supabase availability",
        },
    )
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Dict

RUN_ID: str = uuid.uuid4().hex[:8]


class StructuredFormatter(logging.Formatter):
    """Emit one '|' separated line per record following the template above."""

    # High-level purposes by module name
    MODULE_PURPOSES: Dict[str, str] = {
        "composer": "Compose the dashboard view model from independent store fetches",
        "session": "Track viewing user, section loading flags and the latest snapshot",
        "supabase_store": "Read dashboard rows from Supabase and parse them into records",
        "chefs": "Rank featured chefs by effective rating and followers",
        "config": "Create Supabase client and dashboard settings from env",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        dt = datetime.datetime.fromtimestamp(record.created)
        date_str = dt.strftime("%Y-%m-%d")
        time_str = dt.strftime("%H:%M:%S")

        run_id = getattr(record, "run_id", RUN_ID)
        module_name = record.module
        module_purpose = self.MODULE_PURPOSES.get(module_name, "")

        invoking_func = getattr(record, "invoking_func", "")
        invoking_purpose = getattr(record, "invoking_purpose", "")
        next_step = getattr(record, "next_step", "")
        resolution = getattr(record, "resolution", "")

        detail = record.getMessage()
        if record.exc_info:
            detail = f"{detail} | EXC={record.exc_info[1]!r}"

        line = (
            f"{run_id}|{date_str}|{time_str}|{record.levelname}|"
            f"{record.filename}:{record.lineno}|"
            f"{module_name}.{record.funcName}|{module_purpose}|"
            f"{invoking_func}|{invoking_purpose}|"
            f"{detail}|{next_step}|{resolution}|<END>"
        )
        if record.exc_info:
            # Traceback follows the structured line
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def init_logging(level: int = logging.INFO) -> None:
    """
    Attach the StructuredFormatter to the root logger once.

    Modules call get_logger() instead of logging.basicConfig() so that
    configuration stays in one place.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (REPL, pytest caplog, host application)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    init_logging()
    return logging.getLogger(name)
