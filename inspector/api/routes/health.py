"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from inspector.api.dependencies import get_report_cache
from inspector.cache.report_cache import ReportCache
from inspector.config import settings
from inspector.core.rule_registry import list_security_rules, list_style_rules

router = APIRouter()


@router.get("/health")
async def health(cache: ReportCache = Depends(get_report_cache)):
    """Liveness plus the loaded catalog sizes and cache counters."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "source_extension": settings.source_extension,
        "security_rules": len(list_security_rules()),
        "style_rules": len(list_style_rules()),
        "cache": cache.stats(),
    }
