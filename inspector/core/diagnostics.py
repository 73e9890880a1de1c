"""
Diagnostic Assistant — Context extraction and remediation hints for a
reported runtime error.

Suggestions come from keyword matching on the error text. They are hints for
a human, not root-cause analysis.
"""

from __future__ import annotations

import re

from inspector.config import settings
from inspector.models.diagnostic_models import DebugLogEntry, DebugLogResult, DiagnosticResult

# Ordered; the first category whose pattern matches the lower-cased message wins.
SUGGESTION_TABLE: tuple[tuple[str, re.Pattern[str], tuple[str, ...]], ...] = (
    (
        "undefined_variable",
        re.compile(r"undefined variable"),
        (
            "Check if the variable is defined before use",
            "Ensure the variable is in the correct scope",
            "Use isset() or null coalescing operator (??) to handle undefined variables",
        ),
    ),
    (
        "undefined_function",
        re.compile(r"undefined function"),
        (
            "Check if the function is defined or included",
            "Ensure the file containing the function is loaded",
            "Check for typos in the function name",
        ),
    ),
    (
        "class_not_found",
        re.compile(r"class not found|class ['\"]?[\w\\]+['\"]? not found"),
        (
            "Verify the class file is included or autoloaded",
            "Check the namespace declaration",
            "Ensure the class name matches the file name",
        ),
    ),
    (
        "syntax_error",
        re.compile(r"syntax error"),
        (
            "Check for missing semicolons or brackets",
            "Verify proper quote matching",
            "Look for unexpected tokens",
        ),
    ),
    (
        "undefined_method",
        re.compile(r"undefined method"),
        (
            "Verify the method exists in the class",
            "Check for typos in the method name",
            "Ensure you are calling the method on the correct object",
        ),
    ),
    (
        "access_violation",
        re.compile(r"cannot access"),
        (
            "Check the visibility (public/private/protected) of the property or method",
            "Use getters/setters for private properties",
        ),
    ),
)

FALLBACK_SUGGESTIONS: tuple[str, ...] = (
    "Check the error log for more details",
    "Enable WP_DEBUG for more verbose error reporting",
    "Search the WordPress documentation or forums for similar issues",
)


def suggest(error_message: str) -> tuple[str | None, list[str]]:
    """Return ``(category, suggestions)``; category is None for the fallback."""
    lowered = error_message.lower()
    for category, pattern, suggestions in SUGGESTION_TABLE:
        if pattern.search(lowered):
            return category, list(suggestions)
    return None, list(FALLBACK_SUGGESTIONS)


def context_window(lines: list[str], line_number: int, radius: int) -> dict[int, str]:
    """Lines ``line_number - radius .. line_number + radius``, clamped, 1-based keys."""
    start = max(1, line_number - radius)
    end = min(len(lines), line_number + radius)
    return {number: lines[number - 1] for number in range(start, end + 1)}


def diagnose(
    error_message: str,
    file_text: str | None,
    line_number: int,
    *,
    file: str = "",
    radius: int | None = None,
) -> DiagnosticResult:
    """Build a DiagnosticResult. ``file_text=None`` means the file was unreadable."""
    category, suggestions = suggest(error_message)

    context: dict[int, str] = {}
    line_content = ""
    if file_text is not None:
        lines = file_text.split("\n")
        context = context_window(lines, line_number, settings.context_radius if radius is None else radius)
        if 1 <= line_number <= len(lines):
            line_content = lines[line_number - 1]

    return DiagnosticResult(
        error_message=error_message,
        file=file,
        line=line_number,
        context_lines=context,
        line_content=line_content,
        category=category,
        suggestions=suggestions,
    )


LOG_TIMESTAMP = re.compile(r"^\[(\d{2}-\w{3}-\d{4}\s+\d{2}:\d{2}:\d{2}\s+\w+)\]")


def parse_debug_log(
    text: str,
    max_lines: int = 100,
    *,
    path: str = "",
    total_lines: int | None = None,
) -> DebugLogResult:
    """Group the last ``max_lines`` lines of a PHP error log into entries.

    A line starting with ``[DD-Mon-YYYY HH:MM:SS TZ]`` opens an entry; lines
    without a timestamp (stack traces) continue the current one. Leading
    continuation lines with no opening entry are dropped.

    ``total_lines`` is the line count of the whole log when ``text`` is
    already only its tail.
    """
    lines = text.rstrip("\n").split("\n") if text else []
    tail = lines[-max_lines:] if max_lines > 0 else []

    entries: list[DebugLogEntry] = []
    timestamp: str | None = None
    message_parts: list[str] = []
    full_parts: list[str] = []

    def flush() -> None:
        if timestamp is not None:
            entries.append(
                DebugLogEntry(
                    timestamp=timestamp,
                    message="\n".join(message_parts),
                    full="\n".join(full_parts),
                )
            )

    for line in tail:
        match = LOG_TIMESTAMP.match(line)
        if match:
            flush()
            timestamp = match.group(1)
            message_parts = [line[match.end():].strip()]
            full_parts = [line]
        elif timestamp is not None:
            message_parts.append(line)
            full_parts.append(line)
    flush()

    return DebugLogResult(
        path=path,
        total_lines=len(lines) if total_lines is None else total_lines,
        entries=entries,
    )
