"""
Style Rules — WordPress coding standard checks.
"""

from __future__ import annotations

from inspector.core.rules.base import Rule, define_rule
from inspector.models.rule_models import Severity

STYLE_RULES: tuple[Rule, ...] = (
    define_rule(
        "missing_text_domain",
        r"(?<![\w>:])(?:__|_e|esc_html__|esc_html_e|esc_attr__|esc_attr_e)\s*\(\s*"
        r"(?:'[^']*'|\"[^\"]*\")\s*\)",
        "Missing text domain in translation function",
        Severity.LOW,
    ),
    define_rule(
        "direct_database",
        r"\$wpdb\s*->\s*query\s*\((?!\s*\$wpdb\s*->\s*prepare\b)",
        "Use $wpdb->prepare() for database queries",
        Severity.MEDIUM,
    ),
    define_rule(
        "short_php_tags",
        r"<\?(?!php|=|xml)",
        "Use full <?php tags instead of short tags",
        Severity.LOW,
    ),
    define_rule(
        "closing_php_tag",
        r"\?>\s*$",
        "Omit closing PHP tag at end of file",
        Severity.LOW,
        last_line_only=True,
    ),
)
