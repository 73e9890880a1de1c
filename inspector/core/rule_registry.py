"""
Rule Registry — The built-in security and style catalogs.

Catalogs are built once at import time and never mutated. Callers extend
scanning by passing their own ``RuleSet``s to the report builder.
"""

from __future__ import annotations

from inspector.core.rules.base import Rule, RuleSet
from inspector.core.rules.security import SECURITY_RULES
from inspector.core.rules.style import STYLE_RULES
from inspector.models.rule_models import RuleCategory

SECURITY_RULE_SET = RuleSet(name="security", category=RuleCategory.SECURITY, rules=SECURITY_RULES)
STYLE_RULE_SET = RuleSet(name="style", category=RuleCategory.STYLE, rules=STYLE_RULES)


def list_security_rules() -> list[Rule]:
    return list(SECURITY_RULE_SET.rules)


def list_style_rules() -> list[Rule]:
    return list(STYLE_RULE_SET.rules)
