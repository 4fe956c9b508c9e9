import logging

from flickly.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


class TestStdLoggerAdapter:
    def test_plain_messages_are_untouched(self, caplog):
        logger = StdLoggerAdapter("flickly.test")

        with caplog.at_level(logging.INFO, logger="flickly.test"):
            logger.info("Catalog loaded")

        assert caplog.messages == ["Catalog loaded"]

    def test_bound_context_prefixes_messages(self, caplog):
        """Test bound loggers accumulate context without changing the parent"""
        parent = StdLoggerAdapter("flickly.test")
        child = parent.bind(user_id=5).bind(page=2)

        with caplog.at_level(logging.DEBUG, logger="flickly.test"):
            child.warning("Page out of range")
            parent.debug("Untagged")

        assert caplog.messages == ["[user_id=5 page=2] Page out of range", "Untagged"]
        assert caplog.records[0].levelno == logging.WARNING
