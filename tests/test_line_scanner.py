"""
Tests for Line Scanner — each catalog rule fires on the lines it targets.
"""

from inspector.core.line_scanner import scan
from inspector.core.rule_registry import list_security_rules, list_style_rules
from inspector.core.rules.base import define_rule
from inspector.models.rule_models import Severity


def _ids(findings):
    return [f.rule_id for f in findings]


def test_echo_of_request_input_is_one_critical_finding():
    findings = scan("<?php echo $_GET['x'];", list_security_rules())
    assert len(findings) == 1
    assert findings[0].rule_id == "xss_echo"
    assert findings[0].severity == Severity.CRITICAL
    assert findings[0].line_number == 1


def test_sample_plugin_findings(sample_php_code):
    findings = scan(sample_php_code, list_security_rules())
    assert [(f.rule_id, f.line_number) for f in findings] == [
        ("xss_echo", 8),
        ("sql_injection", 9),
        ("eval_usage", 10),
        ("shell_exec", 11),
        ("hardcoded_credentials", 12),
        ("missing_nonce", 13),
        ("missing_nonce", 14),
        ("missing_capability", 18),
    ]


def test_clean_plugin_has_no_findings(clean_php_code):
    assert scan(clean_php_code, list_security_rules()) == []
    assert scan(clean_php_code, list_style_rules()) == []


def test_every_matching_rule_fires_on_one_line():
    findings = scan("echo $_GET['a']; eval( $_POST['b'] );", list_security_rules())
    # Registration order within the line
    assert _ids(findings) == ["xss_echo", "eval_usage", "missing_nonce"]
    assert {f.line_number for f in findings} == {1}


def test_findings_are_line_major():
    text = "<?php\neval( $a );\necho $_GET['x'];\n"
    findings = scan(text, list_security_rules())
    assert [(f.rule_id, f.line_number) for f in findings] == [
        ("eval_usage", 2),
        ("xss_echo", 3),
    ]


def test_snippet_is_trimmed_line():
    findings = scan("<?php\n        eval( $payload );   \n", list_security_rules())
    assert findings[0].snippet == "eval( $payload );"


def test_security_patterns():
    rules = list_security_rules()
    cases = {
        "file_inclusion": "include( $_GET['page'] );",
        "unserialize": "$data = unserialize( $_COOKIE['data'] );",
        "xss_print": "print $_REQUEST['q'];",
        "hardcoded_credentials": "'password' => 'hunter22secret',",
    }
    for rule_id, line in cases.items():
        assert rule_id in _ids(scan(line, rules)), rule_id


def test_method_named_exec_is_not_shell_execution():
    rules = list_security_rules()
    assert scan("$pdo->exec( $sql );", rules) == []
    assert scan("curl_exec( $ch );", rules) == []


def test_short_credential_values_are_ignored():
    assert scan("$token = 'abc';", list_security_rules()) == []


def test_nonce_check_on_same_line_suppresses_warning():
    line = "if ( wp_verify_nonce( $_POST['_wpnonce'], 'save' ) ) {"
    assert "missing_nonce" not in _ids(scan(line, list_security_rules()))


def test_nonce_check_on_previous_line_is_not_seen():
    text = "check_admin_referer( 'save' );\n$title = $_POST['title'];"
    findings = scan(text, list_security_rules())
    assert ("missing_nonce", 2) in [(f.rule_id, f.line_number) for f in findings]


def test_post_copied_into_variable_is_not_tracked():
    text = "$data = $_POST;\nupdate_option( 'title', $data['title'] );"
    assert "missing_nonce" not in _ids(scan(text, list_security_rules()))


def test_capability_check_on_same_line_suppresses_warning():
    line = "add_action( 'admin_init', function () { if ( current_user_can( 'manage_options' ) ) {} } );"
    assert "missing_capability" not in _ids(scan(line, list_security_rules()))


def test_style_patterns():
    rules = list_style_rules()
    assert _ids(scan("_e( 'Hello' );", rules)) == ["missing_text_domain"]
    assert _ids(scan("_e( 'Hello', 'demo' );", rules)) == []
    assert _ids(scan("$wpdb->query( \"DELETE FROM t\" );", rules)) == ["direct_database"]
    assert _ids(scan("$wpdb->query( $wpdb->prepare( 'DELETE FROM t WHERE id = %d', $id ) );", rules)) == []
    assert _ids(scan("<? echo 1;", rules)) == ["short_php_tags"]
    assert _ids(scan("<?= $title ?>\n<p>after</p>", rules)) == []


def test_closing_tag_only_flagged_on_last_non_blank_line():
    text = "<?php\n$a = 1; ?>\n<p>hi</p>\n<?php echo 'x'; ?>\n\n"
    findings = [f for f in scan(text, list_style_rules()) if f.rule_id == "closing_php_tag"]
    assert [f.line_number for f in findings] == [4]


def test_long_lines_are_matched_up_to_the_limit():
    line = "x" * 50 + " eval( $a );"
    assert scan(line, list_security_rules(), max_line_length=20) == []
    assert _ids(scan(line, list_security_rules(), max_line_length=200)) == ["eval_usage"]


def test_caller_supplied_rule():
    rule = define_rule("todo_marker", r"\bTODO\b", "TODO left in code", Severity.LOW)
    findings = scan("<?php\n// TODO: escape this\n", [rule])
    assert _ids(findings) == ["todo_marker"]
    assert findings[0].line_number == 2


def test_empty_inputs():
    assert scan("", list_security_rules()) == []
    assert scan("<?php eval( $a );", []) == []


def test_explicit_zero_line_length_is_not_replaced_by_default():
    assert scan("<?php eval( $a );", list_security_rules(), max_line_length=0) == []
