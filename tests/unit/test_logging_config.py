"""Tests for logging configuration helpers."""
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from logging_config import log_document_summary, resolve_level, setup_logging


class TestResolveLevel:
    """Test suite for resolve_level()."""

    def test_names(self):
        """Test level names resolve case-insensitively."""
        assert resolve_level('DEBUG') == logging.DEBUG
        assert resolve_level(' warning ') == logging.WARNING

    def test_int_passthrough(self):
        """Test numeric levels pass through."""
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown_and_missing_fall_back(self):
        """Test unknown or missing names fall back to the default."""
        assert resolve_level('LOUD') == logging.INFO
        assert resolve_level(None, default=logging.DEBUG) == logging.DEBUG


class TestSetupLogging:
    """Test suite for environment-aware setup_logging()."""

    def teardown_method(self):
        logging.basicConfig(force=True, handlers=[logging.NullHandler()])

    def test_local_mode_writes_log_file(self, tmp_path, monkeypatch):
        """Test local mode logs to logs/<script>_log.txt."""
        monkeypatch.delenv('RENDER', raising=False)
        monkeypatch.chdir(tmp_path)
        setup_logging('unit_test')
        logging.info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        log_file = tmp_path / 'logs' / 'unit_test_log.txt'
        assert log_file.exists()
        assert "hello from test" in log_file.read_text()

    def test_render_mode_logs_to_stdout(self, tmp_path, monkeypatch):
        """Test RENDER=true logs to stdout and writes no file."""
        monkeypatch.setenv('RENDER', 'true')
        monkeypatch.chdir(tmp_path)
        setup_logging('unit_test')
        handlers = logging.getLogger().handlers
        assert any(isinstance(h, logging.StreamHandler) and h.stream is sys.stdout for h in handlers)
        assert not (tmp_path / 'logs').exists()


class TestLogDocumentSummary:
    """Test suite for log_document_summary()."""

    def test_logs_length_and_preview(self, caplog):
        """Test the summary logs length and a single-line preview."""
        logger = logging.getLogger('summary_test')
        with caplog.at_level(logging.INFO, logger='summary_test'):
            log_document_summary("fetch()", "https://example.com", "<html>\n" + "a" * 500, logger)
        assert "507 chars" in caplog.text
        assert "<html> a" in caplog.text

    def test_empty_document_warns(self, caplog):
        """Test an empty document logs a warning."""
        logger = logging.getLogger('summary_test')
        with caplog.at_level(logging.WARNING, logger='summary_test'):
            log_document_summary("fetch()", "https://example.com", "", logger)
        assert "Empty document" in caplog.text
