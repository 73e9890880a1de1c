"""
Inspection Worker — Caller-side orchestrator around the analysis core.

The core is pure; this layer owns everything around it:
1. Reading files through the content provider
2. Report caching keyed by content hash
3. Resolving a root directory to a file list
4. Turning input errors into tagged AnalysisFailure results
5. Recording audit events (fire-and-forget)
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable

from inspector.audit.logger import AuditLogger, AuditSink
from inspector.cache.report_cache import ReportCache
from inspector.config import settings
from inspector.core.diagnostics import diagnose, parse_debug_log
from inspector.core.report_builder import build_report
from inspector.core.snippet_checker import check_snippet
from inspector.core.tree_aggregator import analyze_tree
from inspector.models.diagnostic_models import DebugLogResult, DiagnosticResult, SnippetCheckResult
from inspector.models.report_models import FileReport, TreeReport
from inspector.models.scan_models import AnalysisFailure, FailureKind
from inspector.sources.lister import list_source_files
from inspector.sources.reader import FileReader, FileReadError, LocalFileReader, LogTailReader

logger = logging.getLogger("inspector.worker")

FileLister = Callable[[str, str, bool], list[str]]


class InspectionWorker:
    """Exposes file, tree and diagnostic analysis to callers."""

    def __init__(
        self,
        reader: FileReader | None = None,
        lister: FileLister | None = None,
        cache: ReportCache | None = None,
        audit: AuditSink | None = None,
        max_workers: int | None = None,
        log_reader: LogTailReader | None = None,
    ) -> None:
        self.reader = reader or LocalFileReader()
        self.log_reader = log_reader or LogTailReader()
        self.lister = lister or list_source_files
        self.cache = cache or ReportCache()
        self.audit = audit if audit is not None else AuditLogger()
        self.max_workers = max_workers

    # ── Single file ──

    def analyze_file(self, path: str) -> FileReport | AnalysisFailure:
        """Read and analyze one file; read errors come back as AnalysisFailure."""
        try:
            content = self.reader.read(path)
        except FileReadError as e:
            logger.warning(f"Cannot analyze {path!r}: {e}")
            return AnalysisFailure(path=path, error=e.kind, detail=e.detail)

        return self.analyze_content(path, content)

    def analyze_content(self, path: str, content: str) -> FileReport:
        """Analyze already-loaded content, serving unchanged files from cache."""
        cached = self.cache.get(path, content)
        if cached is not None:
            logger.debug(f"Cache hit: {path}")
            return cached

        start = time.monotonic()
        report = build_report(path, content)
        self.cache.put(path, content, report)

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            f"Analyzed {path} in {elapsed_ms:.1f}ms — "
            f"{report.summary.total_issues} issues, grade {report.summary.grade.value}"
        )
        self._record(
            "code_analyzed",
            {
                "file": path,
                "security_count": len(report.security_findings),
                "style_count": len(report.style_findings),
                "grade": report.summary.grade.value,
            },
        )
        return report

    # ── Tree ──

    def analyze_tree(
        self,
        root: str,
        pattern: str | None = None,
        recursive: bool = True,
    ) -> TreeReport | AnalysisFailure:
        """Analyze every source file under ``root``.

        Unreadable files are skipped and listed in the report; only an empty
        or missing root fails the whole call.
        """
        if not root or not root.strip():
            return AnalysisFailure(path=root, error=FailureKind.EMPTY_PATH, detail="Root is required")

        glob = pattern or f"*{settings.source_extension}"
        files = self.lister(root, glob, recursive)
        if not files and not Path(root).is_dir():
            return AnalysisFailure(path=root, error=FailureKind.NOT_FOUND, detail="Directory not found")

        report = analyze_tree(
            files,
            self.reader.read,
            root=root,
            max_workers=self.max_workers,
        )
        self._record(
            "tree_analyzed",
            {
                "root": root,
                "files": len(report.files),
                "skipped": report.skipped_count,
                "total_issues": report.total_issues,
            },
        )
        return report

    # ── Diagnostics ──

    def diagnose(self, error_message: str, file: str, line: int) -> DiagnosticResult:
        """Context and hints for an error; an unreadable file gives no context."""
        file_text: str | None
        try:
            file_text = self.reader.read(file)
        except FileReadError as e:
            logger.info(f"No context for diagnosis, {e}")
            file_text = None

        result = diagnose(error_message, file_text, line, file=file)
        self._record(
            "error_diagnosed",
            {"file": file, "line": line, "category": result.category},
        )
        return result

    def check_snippet(self, code: str) -> SnippetCheckResult:
        return check_snippet(code)

    def read_debug_log(self, lines: int | None = None) -> DebugLogResult | AnalysisFailure:
        """Entries from the tail of the debug log; the source size cap does not apply."""
        path = settings.debug_log_path
        max_lines = lines or settings.debug_log_lines
        try:
            tail, total_lines = self.log_reader.read_tail(path, max_lines)
        except FileReadError as e:
            return AnalysisFailure(
                path=path,
                error=e.kind,
                detail=e.detail or "Debug log not found. Enable WP_DEBUG_LOG in wp-config.php",
            )
        return parse_debug_log(tail, max_lines, path=path, total_lines=total_lines)

    # ------------------------------------------------------------------
    def _record(self, event_name: str, details: dict[str, Any]) -> None:
        try:
            self.audit.record(event_name, details)
        except Exception:
            # fire-and-forget
            logger.warning(f"Audit sink failed for event '{event_name}'", exc_info=True)
