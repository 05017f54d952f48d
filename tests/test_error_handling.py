"""
Test error formatting and logging behavior
"""
import logging

import pytest

from doomsday import is_leap
from doomsday.exceptions import (
    ConfigError,
    DoomsdayError,
    InvalidMonthNameError,
    InvalidOrdinalError,
    OutOfRangeError,
    ValidationError,
)
from doomsday.logger import StructuredLogger, setup_logger


class TestErrorFormatting:
    """Test exception messages and context"""

    def test_plain_message(self):
        err = DoomsdayError("Something failed")
        assert str(err) == "Something failed"
        assert err.context == {}
        assert err.original_error is None

    def test_context_in_message(self):
        err = ValidationError("Bad input", context={"text": "x"})
        assert str(err) == "Bad input [text=x]"

    def test_original_error_in_message(self):
        cause = ValueError("boom")
        err = ConfigError("Failed", original_error=cause)
        assert "caused by: ValueError: boom" in str(err)

    def test_out_of_range(self):
        err = OutOfRangeError(1751)
        assert err.year == 1751
        assert err.context == {"year": 1751, "epoch": 1752}
        assert "1751" in str(err)

    def test_hierarchy(self):
        for err in (OutOfRangeError(1), InvalidOrdinalError(0), InvalidMonthNameError("x"),
                    ValidationError("v"), ConfigError("c")):
            assert isinstance(err, DoomsdayError)

    def test_out_of_range_from_public_api(self):
        with pytest.raises(DoomsdayError):
            is_leap(1751)


@pytest.fixture
def package_logger():
    """Package logger, restored to its import-time state afterwards"""
    base = logging.getLogger("doomsday")
    saved_level, saved_handlers = base.level, list(base.handlers)
    yield base
    for handler in base.handlers:
        if handler not in saved_handlers:
            handler.close()
    base.setLevel(saved_level)
    base.handlers = saved_handlers


class TestStructuredLogger:
    """Test key-value logging"""

    def test_formats_key_values(self, caplog):
        log = StructuredLogger(logging.getLogger("doomsday.test"))
        with caplog.at_level(logging.DEBUG, logger="doomsday.test"):
            log.debug("lookup.resolved", year=2020, weekday="Tuesday")
        assert "lookup.resolved year=2020 weekday=Tuesday" in caplog.text

    def test_plain_message(self, caplog):
        log = StructuredLogger(logging.getLogger("doomsday.test"))
        with caplog.at_level(logging.DEBUG, logger="doomsday.test"):
            log.debug("plain")
        assert caplog.records[-1].getMessage() == "plain"

    def test_disabled_level_emits_nothing(self, caplog):
        log = StructuredLogger(logging.getLogger("doomsday.test"))
        with caplog.at_level(logging.WARNING, logger="doomsday.test"):
            log.debug("hidden", year=2020)
        assert "hidden" not in caplog.text

    def test_set_level(self, package_logger):
        log = StructuredLogger(package_logger)
        log.set_level("error")
        assert package_logger.level == logging.ERROR
        log.set_level("debug")
        assert package_logger.level == logging.DEBUG


class TestSetupLogger:
    """Test opt-in logging output"""

    def test_import_attaches_only_null_handler(self, package_logger):
        """Library stays silent until an application opts in"""
        assert all(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    def test_console_output_opt_in(self, package_logger):
        setup_logger(level="debug", log_file=False)

        assert package_logger.level == logging.DEBUG
        streams = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(streams) == 1
        assert not isinstance(streams[0], logging.FileHandler)

    def test_repeated_setup_does_not_stack_handlers(self, package_logger):
        setup_logger(level="INFO")
        setup_logger(level="INFO")

        streams = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(streams) == 1

    def test_file_output(self, package_logger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        setup_logger(level="INFO", log_file=True)

        assert (tmp_path / "logs").is_dir()
        assert any((tmp_path / "logs").glob("doomsday_*.log"))
        assert any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)
