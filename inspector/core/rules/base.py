"""
Rule Definitions — Immutable rule records and caller-supplied rule sets.

Rules are plain data: an id, a compiled line matcher, a message and a
severity. Anything malformed is rejected when the rule is defined, never
halfway through a scan.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from inspector.models.rule_models import RuleCategory, Severity


class RuleDefinitionError(ValueError):
    """Raised when a rule or rule set cannot be built."""


@dataclass(frozen=True)
class Rule:
    """A named line matcher."""

    id: str
    pattern: re.Pattern[str]
    message: str
    severity: Severity
    # Only the last non-blank line of the file is matched.
    last_line_only: bool = False

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


def define_rule(
    rule_id: str,
    pattern: str | re.Pattern[str],
    message: str,
    severity: Severity | str,
    *,
    flags: int = re.IGNORECASE,
    last_line_only: bool = False,
) -> Rule:
    """Compile and validate a rule.

    Raises:
        RuleDefinitionError: empty id or message, unknown severity, or a
            pattern that does not compile.
    """
    if not rule_id or not rule_id.strip():
        raise RuleDefinitionError("Rule id must not be empty")
    if not message:
        raise RuleDefinitionError(f"Rule '{rule_id}' has no message")

    try:
        severity_value = Severity(severity.lower() if isinstance(severity, str) else severity)
    except ValueError as exc:
        raise RuleDefinitionError(f"Rule '{rule_id}' has unknown severity {severity!r}") from exc

    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(pattern, flags)
        except re.error as exc:
            raise RuleDefinitionError(f"Rule '{rule_id}' has a malformed pattern: {exc}") from exc

    return Rule(
        id=rule_id.strip(),
        pattern=compiled,
        message=message,
        severity=severity_value,
        last_line_only=last_line_only,
    )


@dataclass(frozen=True)
class RuleSet:
    """A named group of rules reporting into one category of a file report."""

    name: str
    category: RuleCategory
    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise RuleDefinitionError(
                    f"Duplicate rule id '{rule.id}' in rule set '{self.name}'"
                )
            seen.add(rule.id)
        # Accept any iterable but store a tuple.
        object.__setattr__(self, "rules", tuple(self.rules))
