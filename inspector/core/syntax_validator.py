"""
Syntax Validator — Cheap structural checks for gross malformation.

Two independent checks:

1. A best-effort tokenization pass with the tree-sitter PHP grammar. Only the
   first failure is reported, with its 1-based line, the way ``php -l`` stops
   at the first parse error.
2. Net counts of ``{}``, ``()`` and ``[]``. Counts are taken over the raw text,
   brackets inside strings and comments included, and an imbalance cannot be
   localized, so it is reported with line 0.

This catches truncated or corrupted files; it is not a replacement for the
PHP parser.
"""

from __future__ import annotations

import logging
import re
import threading

import tree_sitter_php as tsphp
from tree_sitter import Language, Node, Parser

from inspector.models.report_models import SyntaxIssue, SyntaxResult

logger = logging.getLogger("inspector.core.syntax")

PHP_LANGUAGE = Language(tsphp.language_php())

DELIMITER_PAIRS: tuple[tuple[str, str, str], ...] = (
    ("{", "}", "Mismatched curly braces"),
    ("(", ")", "Mismatched parentheses"),
    ("[", "]", "Mismatched square brackets"),
)

_BRACKETS = {"{", "}", "(", ")", "[", "]"}

# Text left over once brackets, whitespace and open/close tags are removed.
_NOT_BRACKET_NOISE = re.compile(r"<\?php|<\?=|<\?|\?>|[{}()\[\]\s]", re.IGNORECASE)


class PHPTokenizer:
    """Thin wrapper around tree-sitter for PHP source code."""

    def __init__(self) -> None:
        self._parser = Parser(PHP_LANGUAGE)

    def first_failure(self, code: str) -> SyntaxIssue | None:
        """Return the first tokenizer failure in ``code``, or None.

        Raises UnicodeEncodeError if the text cannot be encoded as UTF-8.
        """
        source_bytes = code.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        if not tree.root_node.has_error:
            return None
        return _find_failure(tree.root_node)


def _is_bracket_noise(node: Node) -> bool:
    text = (node.text or b"").decode("utf-8", errors="replace")
    return not _NOT_BRACKET_NOISE.sub("", text)


def _find_failure(root: Node) -> SyntaxIssue | None:
    # Depth-first with an explicit stack; nesting depth is unbounded in input.
    # Children are pushed in reverse so failures come out in source order.
    stack = [root]
    while stack:
        node = stack.pop()

        if node.is_missing:
            if node.type not in _BRACKETS:
                return SyntaxIssue(
                    message=f"syntax error, missing '{node.type}'",
                    line=node.start_point[0] + 1,
                )
            continue

        if node.type == "ERROR" and not _is_bracket_noise(node):
            snippet = (node.text or b"").decode("utf-8", errors="replace").strip().splitlines()
            unexpected = snippet[0][:40] if snippet else ""
            return SyntaxIssue(
                message=f"syntax error, unexpected '{unexpected}'",
                line=node.start_point[0] + 1,
            )

        if node.has_error:
            stack.extend(reversed(node.children))

    return None


def count_delimiters(text: str) -> list[SyntaxIssue]:
    """One unlocalized issue per bracket kind whose open/close counts differ."""
    return [
        SyntaxIssue(message=message, line=0)
        for opening, closing, message in DELIMITER_PAIRS
        if text.count(opening) != text.count(closing)
    ]


# tree-sitter parsers are not thread-safe; tree scans run on a thread pool.
_local = threading.local()


def _get_tokenizer() -> PHPTokenizer:
    tokenizer = getattr(_local, "tokenizer", None)
    if tokenizer is None:
        tokenizer = _local.tokenizer = PHPTokenizer()
    return tokenizer


def check_syntax(text: str) -> SyntaxResult:
    """Run both checks; ``valid`` only when neither records an error."""
    errors: list[SyntaxIssue] = []

    try:
        failure = _get_tokenizer().first_failure(text)
    except UnicodeEncodeError as e:
        logger.warning(f"Tokenizer could not run: {e}")
        errors.append(
            SyntaxIssue(message=f"Unable to tokenize source: unsupported encoding ({e.reason})")
        )
    else:
        if failure is not None:
            errors.append(failure)

    errors.extend(count_delimiters(text))
    return SyntaxResult(valid=not errors, errors=errors)
