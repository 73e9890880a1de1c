"""
Diagnostic Routes — POST /diagnose, POST /snippet/check, GET /debug-log
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Query

from inspector.api.dependencies import get_inspection_worker
from inspector.api.routes.analyze import raise_for_failure
from inspector.models.diagnostic_models import DebugLogResult, DiagnosticResult, SnippetCheckResult
from inspector.models.scan_models import AnalysisFailure, DiagnoseRequest, SnippetRequest
from inspector.workers.inspection_worker import InspectionWorker

router = APIRouter()


@router.post("/diagnose", response_model=DiagnosticResult)
async def diagnose(
    request: DiagnoseRequest,
    worker: InspectionWorker = Depends(get_inspection_worker),
):
    """Context window and remediation hints for a reported error."""
    return await asyncio.to_thread(
        worker.diagnose, request.error_message, request.file, request.line
    )


@router.post("/snippet/check", response_model=SnippetCheckResult)
async def check_snippet(
    request: SnippetRequest,
    worker: InspectionWorker = Depends(get_inspection_worker),
):
    """Syntax and security vetting of a snippet. The snippet is not executed."""
    return await asyncio.to_thread(worker.check_snippet, request.code)


@router.get("/debug-log", response_model=DebugLogResult)
async def debug_log(
    lines: int = Query(default=100, ge=1, le=10_000),
    worker: InspectionWorker = Depends(get_inspection_worker),
):
    """Most recent entries of the host platform's debug log."""
    result = await asyncio.to_thread(worker.read_debug_log, lines)
    if isinstance(result, AnalysisFailure):
        raise_for_failure(result)
    return result
