"""
Tests for the logging module.
"""

import json
import logging

import pytest
import structlog


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_development_mode(self):
        from core.logging import configure_logging

        # Should not raise
        configure_logging(json_logs=False, log_level="DEBUG")

    def test_configure_log_level(self):
        from core.logging import configure_logging

        configure_logging(log_level="WARNING")
        assert logging.getLogger().level == logging.WARNING

        # A second call still takes effect
        configure_logging(log_level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_redis_logger_quietened(self):
        from core.logging import configure_logging

        configure_logging(log_level="DEBUG")
        assert logging.getLogger("redis").level == logging.WARNING


class TestConfigureFromSettings:

    def test_debug_forces_debug_level(self):
        from config.settings import get_settings_for_testing
        from core.logging import configure_from_settings

        configure_from_settings(get_settings_for_testing(debug=True, log_level="ERROR"))
        assert logging.getLogger().level == logging.DEBUG

    def test_uses_configured_level(self):
        from config.settings import get_settings_for_testing
        from core.logging import configure_from_settings

        configure_from_settings(get_settings_for_testing(debug=False, log_level="ERROR"))
        assert logging.getLogger().level == logging.ERROR


class TestGetLogger:

    def test_get_named_logger(self):
        from core.logging import get_logger

        logger = get_logger("passions.matcher")

        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "warning")

    def test_logger_can_log(self):
        from core.logging import configure_logging, get_logger

        configure_logging(json_logs=False, log_level="DEBUG")
        logger = get_logger("test")

        # Should not raise
        logger.info("Scored hotel", hotel_id="h-1", total_score=42)
        logger.debug("Breakdown", data={"keywords": ["spa"]})
        logger.warning("Corrupt passion selection", storage_key="hotelFinder_passions")


class TestContextBinding:

    def test_bind_and_clear(self):
        from core.logging import bind_context, clear_context

        clear_context()
        bind_context(user_id="u-42", storage_key="hotelFinder_passions:u-42")

        ctx = structlog.contextvars.get_contextvars()
        assert ctx.get("user_id") == "u-42"

        clear_context()
        assert "user_id" not in structlog.contextvars.get_contextvars()

    def test_unbind_specific_context(self):
        from core.logging import bind_context, clear_context, unbind_context

        clear_context()
        bind_context(user_id="u-42", session_id="xyz")
        unbind_context("session_id")

        ctx = structlog.contextvars.get_contextvars()
        assert ctx.get("user_id") == "u-42"
        assert "session_id" not in ctx

        clear_context()


class TestLoggerMixin:

    def test_mixin_logger_usable(self):
        from core.logging import LoggerMixin, configure_logging

        configure_logging(json_logs=False)

        class Store(LoggerMixin):
            def write(self):
                self.logger.info("Wrote key", key="k")

        # Should not raise
        Store().write()


class TestJSONOutput:

    def test_json_output_is_valid_json(self, capsys):
        from core.logging import configure_logging, get_logger

        configure_logging(json_logs=True, log_level="INFO")
        get_logger("json_test").info("Scored hotel", total_score=36)

        captured = capsys.readouterr()

        # structlog writes through the stdlib handler; pytest may capture it elsewhere
        for line in captured.out.strip().splitlines():
            if line:
                data = json.loads(line)
                assert "event" in data


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
