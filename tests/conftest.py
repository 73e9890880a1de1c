"""
Test fixtures shared across all inspector tests.
"""

import pytest

from inspector.sources.reader import FileReadError
from inspector.models.scan_models import FailureKind


@pytest.fixture
def sample_php_code():
    """Plugin file with known vulnerabilities."""
    return '''<?php
/**
 * Plugin Name: Vulnerable Demo
 */

function demo_render() {
    global $wpdb;
    echo $_GET['name'];
    $rows = $wpdb->get_results( "SELECT * FROM t WHERE id = " . $_GET['id'] );
    eval( $code );
    $out = shell_exec( 'ls' );
    $api_key = 'sk_live_1234567890';
    if ( isset( $_POST['title'] ) ) {
        update_option( 'demo_title', $_POST['title'] );
    }
}

add_action( 'admin_init', 'demo_render' );
'''


@pytest.fixture
def clean_php_code():
    """Plugin file with no findings."""
    return '''<?php
/**
 * Plugin Name: Clean Demo
 */

function clean_demo_title( $post_id ) {
    $title = get_the_title( $post_id );
    return esc_html( $title );
}
'''


class DictReader:
    """Content provider backed by a dict; unknown paths are unreadable."""

    def __init__(self, files):
        self.files = dict(files)
        self.reads = []

    def read(self, path):
        self.reads.append(path)
        if path not in self.files:
            raise FileReadError(path, FailureKind.NOT_FOUND)
        return self.files[path]


class RecordingAudit:
    def __init__(self):
        self.events = []

    def record(self, event_name, details):
        self.events.append((event_name, details))


class FailingAudit:
    def record(self, event_name, details):
        raise RuntimeError("audit store is down")


@pytest.fixture
def recording_audit():
    return RecordingAudit()


@pytest.fixture
def plugin_tree(tmp_path, sample_php_code, clean_php_code):
    """A small plugin directory on disk."""
    root = tmp_path / "demo-plugin"
    (root / "includes").mkdir(parents=True)
    (root / "demo-plugin.php").write_text(sample_php_code, encoding="utf-8")
    (root / "includes" / "clean.php").write_text(clean_php_code, encoding="utf-8")
    (root / "includes" / "xss.php").write_text("<?php echo $_GET['x'];\n", encoding="utf-8")
    (root / "readme.txt").write_text("=== Demo ===\n", encoding="utf-8")
    return root


@pytest.fixture
def failing_audit():
    return FailingAudit()


@pytest.fixture
def make_reader():
    """Build an in-memory content provider from a {path: text} dict."""
    return DictReader
