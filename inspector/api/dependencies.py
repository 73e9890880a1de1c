"""
FastAPI Dependencies — Process-wide collaborators injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from inspector.audit.logger import AuditLogger
from inspector.cache.report_cache import ReportCache
from inspector.config import settings
from inspector.sources.reader import LocalFileReader
from inspector.workers.inspection_worker import InspectionWorker


@lru_cache
def get_file_reader() -> LocalFileReader:
    return LocalFileReader(max_file_size_bytes=settings.max_file_size_bytes)


@lru_cache
def get_report_cache() -> ReportCache:
    return ReportCache(ttl_seconds=settings.cache_ttl_seconds)


@lru_cache
def get_audit_logger() -> AuditLogger:
    return AuditLogger(log_path=settings.audit_log_path, enabled=settings.audit_enabled)


@lru_cache
def get_inspection_worker() -> InspectionWorker:
    """Worker shared by every route; its cache persists across requests."""
    return InspectionWorker(
        reader=get_file_reader(),
        cache=get_report_cache(),
        audit=get_audit_logger(),
        max_workers=settings.max_workers,
    )
