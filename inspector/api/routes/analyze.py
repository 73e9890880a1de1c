"""
Analyze Routes — POST /analyze/file, /analyze/content, /analyze/tree

Authorization and rate limiting belong to the host in front of this app.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

from inspector.api.dependencies import get_inspection_worker
from inspector.models.report_models import FileReport, TreeReport
from inspector.models.scan_models import (
    AnalysisFailure,
    AnalyzeContentRequest,
    AnalyzeFileRequest,
    AnalyzeTreeRequest,
    FailureKind,
)
from inspector.workers.inspection_worker import InspectionWorker

logger = logging.getLogger("inspector.api.analyze")

router = APIRouter(prefix="/analyze")

FAILURE_STATUS: dict[FailureKind, int] = {
    FailureKind.EMPTY_PATH: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.TOO_LARGE: 413,
    FailureKind.UNREADABLE: 422,
    FailureKind.DECODE_ERROR: 422,
}


def raise_for_failure(failure: AnalysisFailure) -> None:
    raise HTTPException(
        status_code=FAILURE_STATUS.get(failure.error, 422),
        detail=failure.model_dump(mode="json"),
    )


@router.post("/file", response_model=FileReport)
async def analyze_file(
    request: AnalyzeFileRequest,
    worker: InspectionWorker = Depends(get_inspection_worker),
):
    """Analyze a single file read from disk."""
    result = await asyncio.to_thread(worker.analyze_file, request.path)
    if isinstance(result, AnalysisFailure):
        raise_for_failure(result)
    return result


@router.post("/content", response_model=FileReport)
async def analyze_content(
    request: AnalyzeContentRequest,
    worker: InspectionWorker = Depends(get_inspection_worker),
):
    """Analyze file content submitted inline."""
    return await asyncio.to_thread(worker.analyze_content, request.path, request.content)


@router.post("/tree", response_model=TreeReport)
async def analyze_tree(
    request: AnalyzeTreeRequest,
    worker: InspectionWorker = Depends(get_inspection_worker),
):
    """Analyze every source file under a directory."""
    result = await asyncio.to_thread(
        worker.analyze_tree, request.root, request.pattern, request.recursive
    )
    if isinstance(result, AnalysisFailure):
        raise_for_failure(result)

    logger.info(
        f"Tree {request.root}: {len(result.files)} files, "
        f"{result.skipped_count} skipped, {result.total_issues} issues"
    )
    return result
