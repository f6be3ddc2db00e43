"""
Tests for logging, progress and console helpers.
"""

import io
import logging

from colorama import Fore, Style

from zimcheck.errors import ArchiveOpenError, EntryReadError, SchemaValidationError, YAMLParseError
from zimcheck.utils.console import format_status, is_interactive
from zimcheck.utils.logger import UTF8StreamHandler, setup_logger
from zimcheck.utils.progress import ProgressBar


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


class TestLogger:
    """Test logger setup."""

    def test_level_and_handlers(self):
        logger = setup_logger("zimcheck.test", "DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_twice_does_not_duplicate_handlers(self):
        setup_logger("zimcheck.test", "INFO")
        logger = setup_logger("zimcheck.test", "INFO")
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logger("zimcheck.test", "LOUD").level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "zimcheck.log"
        logger = setup_logger("zimcheck.test", "INFO", str(log_file))
        logger.info("checked %s", "café.html")
        for handler in logger.handlers:
            handler.flush()
        assert "checked café.html" in log_file.read_text(encoding="utf-8")
        setup_logger("zimcheck.test")

    def test_console_goes_to_current_stderr(self, capsys):
        logger = setup_logger("zimcheck.test", "WARNING")
        logger.warning("broken entry")
        captured = capsys.readouterr()
        assert "broken entry" in captured.err
        assert captured.out == ""

    def test_unencodable_characters_replaced(self):
        stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        handler = UTF8StreamHandler(stream)
        record = logging.LogRecord("zimcheck", logging.WARNING, __file__, 1, "café", None, None)
        assert handler.format(record) == "caf?"


class TestProgressBar:
    """Test the progress bar wrapper."""

    def test_disabled_is_a_no_op(self, capsys):
        with ProgressBar(enabled=False) as progress:
            progress.reset(10)
            progress.update()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_enabled_draws_on_stderr(self, capsys):
        with ProgressBar(enabled=True) as progress:
            progress.reset(3, desc="Verifying articles")
            progress.update(3)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Verifying articles" in captured.err

    def test_reset_reuses_bar(self):
        progress = ProgressBar(enabled=True)
        progress.reset(3)
        first = progress._pbar
        progress.reset(5)
        assert progress._pbar is first
        assert progress._pbar.total == 5
        progress.close()
        assert progress._pbar is None


class TestConsole:
    """Test status colouring."""

    def test_plain_when_not_a_terminal(self):
        assert format_status(True, io.StringIO()) == "Pass"
        assert format_status(False, io.StringIO()) == "Fail"

    def test_coloured_on_terminal(self):
        assert format_status(True, FakeTerminal()) == f"{Fore.GREEN}Pass{Style.RESET_ALL}"
        assert format_status(False, FakeTerminal()) == f"{Fore.RED}Fail{Style.RESET_ALL}"

    def test_is_interactive(self):
        assert is_interactive(FakeTerminal())
        assert not is_interactive(io.StringIO())
        assert not is_interactive(object())


class TestErrors:
    """Test exception formatting."""

    def test_archive_open_error(self):
        error = ArchiveOpenError("x.zim", "bad magic", suggestion="Check the file")
        assert error.message == "Unable to open archive x.zim: bad magic"
        assert str(error) == "Unable to open archive x.zim: bad magic | Suggestion: Check the file"

    def test_entry_read_error(self):
        error = EntryReadError("a.html", "corrupted cluster")
        assert str(error) == "Failed to read entry a.html: corrupted cluster"
        assert error.path == "a.html"

    def test_yaml_parse_error_context(self):
        error = YAMLParseError("Invalid YAML syntax", line=3, column=7)
        assert error.context == {"line": 3, "column": 7}
        assert error.suggestion == "Check line 3 for syntax errors"

    def test_to_dict(self):
        error = SchemaValidationError("bad value", field_path="fingerprint_algorithm")
        assert error.to_dict() == {
            "error_type": "SchemaValidationError",
            "message": "bad value",
            "context": {"field": "fingerprint_algorithm"},
            "suggestion": None,
        }
