"""
Report Builder — Combines syntax, rule and complexity results for one file.

The three analyses are independent of each other. No I/O happens here: the
caller supplies the file text.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from inspector.core import complexity, line_scanner, syntax_validator
from inspector.core.rule_registry import SECURITY_RULE_SET, STYLE_RULE_SET
from inspector.core.rules.base import Rule, RuleSet
from inspector.models.report_models import FileReport
from inspector.models.rule_models import Finding, RuleCategory


def build_report(
    path: str,
    text: str,
    *,
    security_rules: Iterable[Rule] | None = None,
    style_rules: Iterable[Rule] | None = None,
    extra_rule_sets: Sequence[RuleSet] = (),
    max_line_length: int | None = None,
) -> FileReport:
    """
    Analyze ``text`` and assemble a FileReport labelled with ``path``.

    Args:
        path: Label for the report; not opened.
        text: File content.
        security_rules: Replaces the built-in security catalog when given.
        style_rules: Replaces the built-in style catalog when given.
        extra_rule_sets: Additional rule sets, each reporting into the bucket
            named by its category.
        max_line_length: Per-line matching bound passed to the line scanner.

    Returns:
        FileReport whose summary and grade derive from the findings.
    """
    syntax = syntax_validator.check_syntax(text)
    metrics = complexity.analyze(text)

    buckets: dict[RuleCategory, list[Finding]] = {
        RuleCategory.SECURITY: line_scanner.scan(
            text,
            SECURITY_RULE_SET.rules if security_rules is None else security_rules,
            max_line_length=max_line_length,
        ),
        RuleCategory.STYLE: line_scanner.scan(
            text,
            STYLE_RULE_SET.rules if style_rules is None else style_rules,
            max_line_length=max_line_length,
        ),
    }
    for rule_set in extra_rule_sets:
        buckets[rule_set.category].extend(
            line_scanner.scan(text, rule_set.rules, max_line_length=max_line_length)
        )

    return FileReport(
        path=path,
        syntax_valid=syntax.valid,
        syntax_errors=syntax.errors,
        security_findings=buckets[RuleCategory.SECURITY],
        style_findings=buckets[RuleCategory.STYLE],
        complexity=metrics,
    )
