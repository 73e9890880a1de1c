"""
Diagnostic Data Models — Error triage, debug log entries and snippet checks.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from inspector.models.report_models import SyntaxIssue
from inspector.models.rule_models import Finding


class DiagnosticResult(BaseModel):
    """Context window plus heuristic hints for a reported runtime error.

    Suggestions are advisory text, not root-cause analysis.
    """

    model_config = ConfigDict(frozen=True)

    error_message: str
    file: str = ""
    line: int = 0
    context_lines: dict[int, str] = Field(
        default_factory=dict, description="1-based line number -> line text, in order"
    )
    line_content: str = ""
    category: str | None = Field(
        default=None, description="Matched suggestion category, None for the fallback"
    )
    suggestions: list[str] = Field(default_factory=list)


class DebugLogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    message: str
    full: str


class DebugLogResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = ""
    total_lines: int = 0
    entries: list[DebugLogEntry] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def entry_count(self) -> int:
        return len(self.entries)


class SnippetCheckResult(BaseModel):
    """Outcome of vetting a code snippet. Snippets are never executed."""

    model_config = ConfigDict(frozen=True)

    success: bool
    syntax_valid: bool
    errors: list[SyntaxIssue] = Field(default_factory=list)
    blocked_findings: list[Finding] = Field(default_factory=list)
    message: str = ""
