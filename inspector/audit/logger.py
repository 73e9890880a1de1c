"""
Audit Logger — JSON-lines trail of analysis events.

One line per event: ``code_analyzed``, ``tree_analyzed`` or ``error_diagnosed``
plus its details and a UTC timestamp. Recording is fire-and-forget: a write
failure is logged, never raised into an analysis call.
"""

from __future__ import annotations

import json
import logging
import time
from collections import deque
from pathlib import Path
from typing import Any, Protocol

from inspector.config import settings

logger = logging.getLogger("inspector.audit")


class AuditSink(Protocol):
    def record(self, event_name: str, details: dict[str, Any]) -> None: ...


class AuditLogger:
    """File-backed AuditSink."""

    def __init__(self, log_path: str | None = None, enabled: bool | None = None) -> None:
        self.log_path = Path(log_path or settings.audit_log_path)
        self.enabled = settings.audit_enabled if enabled is None else enabled

    def record(self, event_name: str, details: dict[str, Any]) -> None:
        if not self.enabled:
            return

        line = json.dumps(
            {
                "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
                "event": event_name,
                **details,
            },
            default=str,
        )
        try:
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error(f"Audit event '{event_name}' not written to {self.log_path}: {e}")

    def read_recent(self, count: int = 50, event_name: str | None = None) -> list[dict]:
        """Last ``count`` events, oldest first, optionally of one event type.

        Lines that are not valid JSON are ignored.
        """
        if not self.log_path.is_file():
            return []

        recent: deque[dict] = deque(maxlen=max(count, 0))
        try:
            with self.log_path.open(encoding="utf-8") as f:
                for raw in f:
                    if not raw.strip():
                        continue
                    try:
                        event = json.loads(raw)
                    except json.JSONDecodeError:
                        continue
                    if event_name is None or event.get("event") == event_name:
                        recent.append(event)
        except OSError as e:
            logger.warning(f"Cannot read audit log {self.log_path}: {e}")
            return []

        return list(recent)
