"""
Snippet Checker — Vets a code fragment before anyone considers running it.

The fragment is checked for syntax with an implicit opening tag, then
scanned with the security catalog. Any critical finding blocks it. Nothing
is ever executed here.
"""

from __future__ import annotations

from inspector.core import line_scanner, syntax_validator
from inspector.core.rule_registry import list_security_rules
from inspector.models.diagnostic_models import SnippetCheckResult
from inspector.models.report_models import SyntaxIssue
from inspector.models.rule_models import Severity

OPEN_TAG = "<?php\n"


def check_snippet(code: str) -> SnippetCheckResult:
    syntax = syntax_validator.check_syntax(OPEN_TAG + code)
    # Report lines relative to the snippet, not the prefixed text.
    errors = [
        SyntaxIssue(message=issue.message, line=max(issue.line - 1, 1) if issue.line else 0)
        for issue in syntax.errors
    ]

    if not syntax.valid:
        return SnippetCheckResult(
            success=False,
            syntax_valid=False,
            errors=errors,
            message="Snippet has syntax errors",
        )

    critical = [
        finding
        for finding in line_scanner.scan(code, list_security_rules())
        if finding.severity == Severity.CRITICAL
    ]
    if critical:
        return SnippetCheckResult(
            success=False,
            syntax_valid=True,
            blocked_findings=critical,
            message="Code contains security issues and cannot be executed",
        )

    return SnippetCheckResult(
        success=True,
        syntax_valid=True,
        message="Code syntax is valid. For security, live execution is disabled.",
    )
