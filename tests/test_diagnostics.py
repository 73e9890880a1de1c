"""
Tests for Diagnostic Assistant — context windows, suggestion categories and
debug log parsing.
"""

from inspector.core.diagnostics import (
    FALLBACK_SUGGESTIONS,
    context_window,
    diagnose,
    parse_debug_log,
    suggest,
)

TWENTY_LINES = "\n".join(f"line {n}" for n in range(1, 21))

DEBUG_LOG = """[01-Mar-2024 10:00:00 UTC] PHP Notice:  Undefined variable: foo in /var/www/a.php on line 3
[01-Mar-2024 10:00:05 UTC] PHP Fatal error:  Uncaught Error: Call to undefined function bar()
Stack trace:
#0 {main}
  thrown in /var/www/b.php on line 9
[01-Mar-2024 10:01:00 UTC] PHP Warning:  Cannot modify header information
"""


def test_undefined_method_diagnosis():
    result = diagnose("Call to undefined method Foo::bar()", TWENTY_LINES, 10, file="foo.php", radius=5)
    assert list(result.context_lines) == list(range(5, 16))
    assert result.context_lines[10] == "line 10"
    assert result.line_content == "line 10"
    assert result.category == "undefined_method"
    assert "Verify the method exists in the class" in result.suggestions
    assert result.file == "foo.php"


def test_context_is_clamped_at_file_start():
    result = diagnose("oops", TWENTY_LINES, 2, radius=5)
    assert list(result.context_lines) == list(range(1, 8))


def test_context_is_clamped_at_file_end():
    result = diagnose("oops", TWENTY_LINES, 20, radius=5)
    assert list(result.context_lines) == list(range(15, 21))


def test_line_past_end_of_file():
    result = diagnose("oops", "a\nb\nc", 6, radius=2)
    assert result.context_lines == {}
    assert result.line_content == ""
    assert context_window(["a", "b", "c"], 4, 2) == {2: "b", 3: "c"}


def test_unreadable_file_gives_no_context():
    result = diagnose("PHP Parse error: syntax error, unexpected '}'", None, 4)
    assert result.context_lines == {}
    assert result.category == "syntax_error"


def test_unknown_error_uses_fallback():
    category, suggestions = suggest("Something odd happened")
    assert category is None
    assert suggestions == list(FALLBACK_SUGGESTIONS)


def test_first_matching_category_wins():
    category, _ = suggest("Undefined variable $x near a syntax error")
    assert category == "undefined_variable"


def test_class_not_found_variants():
    assert suggest('Class "App\\Models\\Post" not found')[0] == "class_not_found"
    assert suggest("Fatal error: Class not found")[0] == "class_not_found"


def test_access_violation():
    assert suggest("Cannot access private property Foo::$bar")[0] == "access_violation"


def test_debug_log_groups_stack_traces():
    result = parse_debug_log(DEBUG_LOG, path="debug.log")
    assert result.total_lines == 6
    assert result.entry_count == 3
    fatal = result.entries[1]
    assert fatal.timestamp == "01-Mar-2024 10:00:05 UTC"
    assert fatal.message.startswith("PHP Fatal error:")
    assert fatal.full.endswith("thrown in /var/www/b.php on line 9")


def test_debug_log_tail_drops_orphan_continuations():
    result = parse_debug_log(DEBUG_LOG, max_lines=3)
    # "#0 {main}" and "thrown in" have no opening entry in the tail
    assert result.entry_count == 1
    assert result.entries[0].message == "PHP Warning:  Cannot modify header information"


def test_empty_debug_log():
    result = parse_debug_log("")
    assert result.total_lines == 0
    assert result.entries == []
