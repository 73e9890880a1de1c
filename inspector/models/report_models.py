"""
Report Data Models — Per-file and tree-level analysis results.

Everything here is built fresh per analysis call and never mutated afterwards.
Serialization (JSON/HTTP) is left to the caller via ``model_dump()``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from inspector.models.rule_models import Finding, Severity, worst_severity


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class SyntaxIssue(BaseModel):
    """A syntax problem; ``line == 0`` means the check cannot localize it."""

    model_config = ConfigDict(frozen=True)

    message: str
    line: int = Field(default=0, ge=0)


class SyntaxResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[SyntaxIssue] = Field(default_factory=list)


class ComplexityMetrics(BaseModel):
    """Line-category counts, construct counts and approximate complexity."""

    model_config = ConfigDict(frozen=True)

    total_lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    blank_lines: int = 0
    function_count: int = 0
    class_count: int = 0
    cyclomatic_complexity: int = Field(default=1, ge=1)


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_issues: int
    critical_count: int
    high_count: int
    grade: Grade


def assign_grade(critical_count: int, high_count: int, total_issues: int) -> Grade:
    """First matching threshold wins."""
    if critical_count > 0:
        return Grade.F
    if high_count > 0:
        return Grade.D
    if total_issues > 10:
        return Grade.C
    if total_issues > 5:
        return Grade.B
    return Grade.A


def summarize(findings: list[Finding]) -> Summary:
    critical_count = sum(1 for f in findings if f.severity == Severity.CRITICAL)
    high_count = sum(1 for f in findings if f.severity == Severity.HIGH)
    return Summary(
        total_issues=len(findings),
        critical_count=critical_count,
        high_count=high_count,
        grade=assign_grade(critical_count, high_count, len(findings)),
    )


class FileReport(BaseModel):
    """Full analysis of a single file."""

    model_config = ConfigDict(frozen=True)

    path: str
    syntax_valid: bool
    syntax_errors: list[SyntaxIssue] = Field(default_factory=list)
    security_findings: list[Finding] = Field(default_factory=list)
    style_findings: list[Finding] = Field(default_factory=list)
    complexity: ComplexityMetrics = Field(default_factory=ComplexityMetrics)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def summary(self) -> Summary:
        # Derived on every access, never stored on the report.
        return summarize(self.security_findings + self.style_findings)


class FileSummaryRow(BaseModel):
    """Per-file row of a tree report."""

    model_config = ConfigDict(frozen=True)

    path: str
    relative_path: str
    syntax_valid: bool
    security_findings: list[Finding] = Field(default_factory=list)
    style_findings: list[Finding] = Field(default_factory=list)
    issue_count: int = 0
    grade: Grade = Grade.A
    worst_severity: Severity | None = None

    @classmethod
    def from_report(cls, report: FileReport, relative_path: str) -> FileSummaryRow:
        return cls(
            path=report.path,
            relative_path=relative_path,
            syntax_valid=report.syntax_valid,
            security_findings=report.security_findings,
            style_findings=report.style_findings,
            issue_count=report.summary.total_issues,
            grade=report.summary.grade,
            worst_severity=worst_severity(report.security_findings + report.style_findings),
        )


class SkippedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    reason: str


def empty_histogram() -> dict[Severity, int]:
    return {severity: 0 for severity in Severity}


class TreeReport(BaseModel):
    """Aggregated analysis across a caller-supplied list of files."""

    model_config = ConfigDict(frozen=True)

    root_description: str = ""
    files: list[FileSummaryRow] = Field(default_factory=list)
    total_issues: int = 0
    severity_histogram: dict[Severity, int] = Field(default_factory=empty_histogram)
    skipped: list[SkippedFile] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
