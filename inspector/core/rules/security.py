"""
Security Rules — Line patterns for common plugin/theme vulnerabilities.

Every rule is lexical. ``missing_nonce`` and ``missing_capability`` only look
at the matching line itself, so a check performed on another line is not
seen (false positives) and input copied into a variable first is not
tracked at all (false negatives).
"""

from __future__ import annotations

from inspector.core.rules.base import Rule, define_rule
from inspector.models.rule_models import Severity

# Superglobals carrying raw request input.
_INPUT = r"\$_(?:GET|POST|REQUEST|COOKIE)\b"

SECURITY_RULES: tuple[Rule, ...] = (
    define_rule(
        "sql_injection",
        r"\$wpdb\s*->\s*(?:query|prepare|get_results|get_var|get_row|get_col)\s*\([^)]*" + _INPUT,
        "Potential SQL injection: User input used directly in database query",
        Severity.CRITICAL,
    ),
    define_rule(
        "xss_echo",
        r"\becho\s*\(?\s*" + _INPUT,
        "Potential XSS: Echoing user input without escaping",
        Severity.CRITICAL,
    ),
    define_rule(
        "xss_print",
        r"\bprint\s*\(?\s*" + _INPUT,
        "Potential XSS: Printing user input without escaping",
        Severity.CRITICAL,
    ),
    define_rule(
        "eval_usage",
        r"\beval\s*\(",
        "Dangerous: eval() function usage detected",
        Severity.CRITICAL,
    ),
    define_rule(
        "shell_exec",
        r"(?<![\w>$:])(?:shell_exec|exec|system|passthru|popen|proc_open)\s*\(",
        "Dangerous: Shell execution function detected",
        Severity.HIGH,
    ),
    define_rule(
        "file_inclusion",
        r"\b(?:include|require)(?:_once)?\s*\(?\s*" + _INPUT,
        "Critical: Potential remote file inclusion vulnerability",
        Severity.CRITICAL,
    ),
    define_rule(
        "unserialize",
        r"\bunserialize\s*\(\s*" + _INPUT,
        "Dangerous: Unserializing user input can lead to object injection",
        Severity.CRITICAL,
    ),
    define_rule(
        "missing_nonce",
        r"^(?!.*\b(?:wp_verify_nonce|check_admin_referer|check_ajax_referer)\b).*\$_POST\s*\[",
        "Warning: Processing POST data without nonce verification",
        Severity.MEDIUM,
    ),
    define_rule(
        "missing_capability",
        r"^(?!.*\bcurrent_user_can\b).*\badd_action\s*\(\s*['\"]admin_init['\"]",
        "Warning: Admin action without capability check",
        Severity.MEDIUM,
    ),
    define_rule(
        "hardcoded_credentials",
        r"(?:password|passwd|secret|api_key|apikey|token)['\"]?\s*=>?\s*['\"][^'\"]{8,}['\"]",
        "Warning: Possible hardcoded credentials detected",
        Severity.HIGH,
    ),
)
