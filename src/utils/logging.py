from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

# Context variables for structured logging
session_id_var: ContextVar[str] = ContextVar("session_id", default="-")
run_id_var: ContextVar[str] = ContextVar("run_id", default="-")


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = session_id_var.get()
        record.run_id = run_id_var.get()
        return True


class SimpleStructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
        msg = record.getMessage()
        return (
            f"{ts} level={record.levelname} logger={record.name} "
            f"session_id={getattr(record, 'session_id', '-')} run_id={getattr(record, 'run_id', '-')} "
            f"msg={msg}"
        )


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(lvl)

    # Replace handlers (avoid duplicate logs in Streamlit reloads)
    root.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(lvl)
    handler.addFilter(ContextFilter())
    handler.setFormatter(SimpleStructuredFormatter())

    root.addHandler(handler)


def set_log_context(*, session_id: str, run_id: Optional[str] = None) -> None:
    session_id_var.set(session_id)
    if run_id is not None:
        run_id_var.set(str(run_id))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
