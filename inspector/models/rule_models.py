"""
Rule Data Models — Severity tiers and per-line findings.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Position in the total order; higher is more severe."""
        return SEVERITY_RANK[self]


SEVERITY_RANK: dict[Severity, int] = {
    Severity.CRITICAL: 3,
    Severity.HIGH: 2,
    Severity.MEDIUM: 1,
    Severity.LOW: 0,
}


class RuleCategory(str, Enum):
    """Which bucket of a file report a rule set reports into."""

    SECURITY = "security"
    STYLE = "style"


class Finding(BaseModel):
    """A single rule match against one line of source text."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., description="Rule identifier, e.g. 'xss_echo'")
    message: str
    severity: Severity
    line_number: int = Field(..., ge=1, description="1-based line number")
    snippet: str = Field(default="", description="Trimmed text of the offending line")


def worst_severity(findings: list[Finding]) -> Severity | None:
    """Most severe level among ``findings``, None when there are none."""
    return max((f.severity for f in findings), key=lambda s: s.rank, default=None)
