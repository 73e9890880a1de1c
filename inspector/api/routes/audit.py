"""
Audit Route — GET /audit/recent
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from inspector.api.dependencies import get_audit_logger
from inspector.audit.logger import AuditLogger

router = APIRouter(prefix="/audit")


@router.get("/recent")
async def recent_events(
    count: int = Query(default=50, ge=1, le=1000),
    event: str | None = Query(default=None, description="Only events with this name"),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Most recent analysis events, oldest first."""
    return {"events": audit.read_recent(count, event_name=event)}
