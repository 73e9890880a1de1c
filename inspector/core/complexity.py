"""
Complexity Analyzer — Line classification, construct counts and an
approximate cyclomatic complexity, all derived from raw text.

Limitations:
- Line comments are only recognized at the start of a trimmed line, so a
  line with a trailing comment counts as code.
- Declaration counts are textual: commented-out or nested declarations
  inflate them.
- Cyclomatic complexity is McCabe approximated by keyword counting, not by
  building a control-flow graph. Keywords inside strings and comments are
  counted too.
"""

from __future__ import annotations

import re

from inspector.models.report_models import ComplexityMetrics

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"

FUNCTION_PATTERN = re.compile(r"\bfunction\s+&?\w+\s*\(")
CLASS_PATTERN = re.compile(r"\bclass\s+\w+")

# Each occurrence adds one independent path.
DECISION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bif\s*\("),
    re.compile(r"\belseif\s*\("),
    re.compile(r"\belse\s*\{"),
    re.compile(r"\bfor\s*\("),
    re.compile(r"\bforeach\s*\("),
    re.compile(r"\bwhile\s*\("),
    re.compile(r"\bcase\s+"),
    re.compile(r"\bcatch\s*\("),
    # Ternary and ?: on one line. Skips ??, ?->, <?, ?> and nullable types.
    re.compile(r"(?<![?<(,:|])(?<![?<(,:|]\s)\?(?![?>\-=])[^;:?\n]*:"),
    re.compile(r"&&"),
    re.compile(r"\|\|"),
)


def _is_line_comment(trimmed: str) -> bool:
    if trimmed.startswith("//"):
        return True
    # "#[" opens a PHP 8 attribute, not a comment.
    return trimmed.startswith("#") and not trimmed.startswith("#[")


def classify_lines(lines: list[str]) -> tuple[int, int, int]:
    """Return ``(code, comment, blank)`` counts for ``lines``.

    Blank takes precedence, so a blank line inside a block comment counts as
    blank and the three counts always sum to ``len(lines)``.
    """
    code = comment = blank = 0
    in_block = False

    for line in lines:
        trimmed = line.strip()

        if not trimmed:
            blank += 1
            continue

        if in_block:
            comment += 1
            if BLOCK_CLOSE in trimmed:
                in_block = False
            continue

        open_at = trimmed.find(BLOCK_OPEN)
        if open_at != -1:
            in_block = BLOCK_CLOSE not in trimmed[open_at + len(BLOCK_OPEN):]
            if open_at == 0:
                comment += 1
            else:
                code += 1
            continue

        if _is_line_comment(trimmed):
            comment += 1
        else:
            code += 1

    return code, comment, blank


def cyclomatic_complexity(text: str) -> int:
    """1 for the baseline path plus one per decision keyword/operator."""
    return 1 + sum(len(pattern.findall(text)) for pattern in DECISION_PATTERNS)


def analyze(text: str) -> ComplexityMetrics:
    lines = text.split("\n")
    code, comment, blank = classify_lines(lines)

    return ComplexityMetrics(
        total_lines=len(lines),
        code_lines=code,
        comment_lines=comment,
        blank_lines=blank,
        function_count=len(FUNCTION_PATTERN.findall(text)),
        class_count=len(CLASS_PATTERN.findall(text)),
        cyclomatic_complexity=cyclomatic_complexity(text),
    )
