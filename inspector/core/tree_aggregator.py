"""
Tree Aggregator — Runs the report builder over a list of files and rolls up
issue totals and a severity histogram.

Per-file analyses are independent and run on a thread pool. One unreadable
file never aborts the batch: it is recorded as skipped and the scan goes on.
Rows follow the order of the input list.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

from inspector.config import settings
from inspector.core.report_builder import build_report
from inspector.models.report_models import (
    FileReport,
    FileSummaryRow,
    SkippedFile,
    TreeReport,
    empty_histogram,
)
from inspector.models.rule_models import Severity
from inspector.sources.reader import FileReadError

logger = logging.getLogger("inspector.core.tree")

ReadFn = Callable[[str], str]

CANCELLED = "cancelled"


@dataclass
class _Outcome:
    path: str
    report: FileReport | None = None
    skip_reason: str | None = None


def severity_histogram(report: FileReport) -> dict[Severity, int]:
    histogram = empty_histogram()
    for finding in report.security_findings + report.style_findings:
        histogram[finding.severity] += 1
    return histogram


def merge_histograms(
    left: Mapping[Severity, int], right: Mapping[Severity, int]
) -> dict[Severity, int]:
    """Associative and commutative, so partial results merge in any order."""
    merged = empty_histogram()
    for histogram in (left, right):
        for severity, count in histogram.items():
            merged[severity] += count
    return merged


def _relative_path(path: str, root: str | None) -> str:
    if not root:
        return path
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return path


def _skip_reason(exc: Exception) -> str:
    if isinstance(exc, FileReadError):
        return exc.kind.value
    return f"{type(exc).__name__}: {exc}"


def analyze_tree(
    file_list: Iterable[str],
    read: ReadFn,
    *,
    root: str | None = None,
    root_description: str | None = None,
    max_workers: int | None = None,
    should_stop: Callable[[], bool] | None = None,
    **report_options: Any,
) -> TreeReport:
    """
    Analyze every file in ``file_list``.

    Args:
        file_list: Paths to analyze, typically from the file lister.
        read: Content provider; may raise FileReadError, OSError or
            UnicodeDecodeError for a single file.
        root: Directory the rows' relative paths are computed against.
        root_description: Label for the report; defaults to ``root``.
        max_workers: Thread pool size; defaults to settings, then CPU count.
        should_stop: Polled before each file starts; once it returns True the
            remaining files are recorded as skipped with reason "cancelled".
        **report_options: Forwarded to ``build_report`` (rule overrides,
            extra rule sets).

    Returns:
        TreeReport with rows in input order.
    """
    paths = list(file_list)
    description = root_description if root_description is not None else (root or "")

    if not paths:
        return TreeReport(root_description=description)

    workers = max_workers or settings.max_workers or os.cpu_count() or 1
    workers = max(1, min(workers, len(paths)))

    def analyze_one(path: str) -> _Outcome:
        if should_stop is not None and should_stop():
            return _Outcome(path=path, skip_reason=CANCELLED)

        try:
            text = read(path)
        except (FileReadError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable file {path}: {e}")
            return _Outcome(path=path, skip_reason=_skip_reason(e))

        try:
            return _Outcome(path=path, report=build_report(path, text, **report_options))
        except Exception as e:
            logger.exception(f"Analysis failed for {path}")
            return _Outcome(path=path, skip_reason=f"analysis_error: {type(e).__name__}: {e}")

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="inspector-tree") as pool:
        outcomes = list(pool.map(analyze_one, paths))

    rows: list[FileSummaryRow] = []
    skipped: list[SkippedFile] = []
    total_issues = 0
    histogram = empty_histogram()

    for outcome in outcomes:
        if outcome.report is None:
            skipped.append(SkippedFile(path=outcome.path, reason=outcome.skip_reason or "unknown"))
            continue

        report = outcome.report
        rows.append(FileSummaryRow.from_report(report, _relative_path(report.path, root)))
        total_issues += report.summary.total_issues
        histogram = merge_histograms(histogram, severity_histogram(report))

    logger.info(
        f"Tree scan of {description or '<files>'}: {len(rows)} analyzed, "
        f"{len(skipped)} skipped, {total_issues} issues"
    )

    return TreeReport(
        root_description=description,
        files=rows,
        total_issues=total_issues,
        severity_histogram=histogram,
        skipped=skipped,
    )
