"""
Line Scanner — Applies a rule set to every line of a file.

Lines are scanned in increasing order and, for each line, rules fire in
registration order. Every matching rule is reported; there is no
first-match-wins. Callers wanting another presentation order re-sort.
"""

from __future__ import annotations

from typing import Iterable

from inspector.config import settings
from inspector.core.rules.base import Rule
from inspector.models.rule_models import Finding


def _last_non_blank_index(lines: list[str]) -> int | None:
    for index in range(len(lines) - 1, -1, -1):
        if lines[index].strip():
            return index
    return None


def scan(
    text: str,
    rules: Iterable[Rule],
    *,
    max_line_length: int | None = None,
) -> list[Finding]:
    """Match ``rules`` against each ``\\n``-delimited line of ``text``.

    Only the first ``max_line_length`` characters of a line are matched, which
    bounds the work per line on minified or generated sources.
    """
    rule_list = list(rules)
    if not rule_list:
        return []

    limit = settings.max_scan_line_length if max_line_length is None else max_line_length
    lines = text.split("\n")
    last_index = _last_non_blank_index(lines)

    findings: list[Finding] = []
    for index, line in enumerate(lines):
        window = line[:limit]
        for rule in rule_list:
            if rule.last_line_only and index != last_index:
                continue
            if rule.matches(window):
                findings.append(
                    Finding(
                        rule_id=rule.id,
                        message=rule.message,
                        severity=rule.severity,
                        line_number=index + 1,
                        snippet=line.strip(),
                    )
                )

    return findings
