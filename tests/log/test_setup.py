"""
Logging configuration tests.

Tests for whisker._logging setup.
"""

import logging


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_setup_logging_accessible(self, whisker):
        """setup_logging is exported at the package root."""
        assert callable(whisker.setup_logging)

    def test_setup_logging_default_level(self):
        """setup_logging() defaults to INFO level."""
        from whisker._logging import logger, setup_logging

        setup_logging()

        assert logger.level == logging.INFO

    def test_setup_logging_accepts_string_level(self):
        """setup_logging() accepts string level names."""
        from whisker._logging import logger, setup_logging

        setup_logging("DEBUG")

        assert logger.level == logging.DEBUG

    def test_setup_logging_accepts_otel_names(self):
        """setup_logging() accepts warn/fatal/off names."""
        from whisker._logging import logger, setup_logging

        setup_logging("warn")
        assert logger.level == logging.WARNING

        setup_logging("fatal")
        assert logger.level == logging.CRITICAL

        setup_logging("off")
        assert logger.level > logging.CRITICAL

    def test_setup_logging_accepts_int_level(self):
        """setup_logging() accepts integer level constants."""
        from whisker._logging import logger, setup_logging

        setup_logging(logging.WARNING)

        assert logger.level == logging.WARNING

    def test_setup_logging_unknown_level_defaults_to_info(self):
        """Unknown level names fall back to INFO."""
        from whisker._logging import logger, setup_logging

        setup_logging("loud")

        assert logger.level == logging.INFO

    def test_setup_logging_replaces_handlers(self):
        """setup_logging() replaces existing handlers."""
        from whisker._logging import logger, setup_logging

        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging("INFO")

        assert len(logger.handlers) == 1

    def test_setup_logging_json_format(self):
        """format='json' installs the JSON formatter."""
        from whisker._logging import JsonFormatter, logger, setup_logging

        setup_logging("INFO", format="json")

        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_human_format(self):
        """format='human' installs the human formatter."""
        from whisker._logging import HumanFormatter, logger, setup_logging

        setup_logging("INFO", format="HUMAN")

        assert isinstance(logger.handlers[0].formatter, HumanFormatter)


class TestEnvironment:
    """Tests for environment-driven defaults."""

    def test_level_from_environment(self, monkeypatch):
        """WHISKER_LOG_LEVEL selects the default level."""
        from whisker._logging import _get_log_level

        monkeypatch.setenv("WHISKER_LOG_LEVEL", "error")
        assert _get_log_level() == logging.ERROR

    def test_level_default(self, monkeypatch):
        """Without WHISKER_LOG_LEVEL the default is INFO."""
        from whisker._logging import _get_log_level

        monkeypatch.delenv("WHISKER_LOG_LEVEL", raising=False)
        assert _get_log_level() == logging.INFO

    def test_format_from_environment(self, monkeypatch):
        """WHISKER_LOG_FORMAT selects the format."""
        from whisker._logging import _get_log_format

        monkeypatch.setenv("WHISKER_LOG_FORMAT", "JSON")
        assert _get_log_format() == "json"


class TestLoggerHierarchy:
    """Tests for logger hierarchy."""

    def test_logger_name_is_whisker(self):
        """Package logger has the package name."""
        from whisker._logging import logger

        assert logger.name == "whisker"

    def test_module_loggers_are_children(self):
        """Module-specific loggers are children of the whisker logger."""
        assert logging.getLogger("whisker.template").parent.name == "whisker"

    def test_child_inherits_level(self):
        """Child loggers inherit level from parent."""
        from whisker._logging import setup_logging

        setup_logging("DEBUG")

        assert logging.getLogger("whisker.child").getEffectiveLevel() == logging.DEBUG
