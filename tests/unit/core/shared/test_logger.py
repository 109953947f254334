"""
Unit tests for the shared logging helpers.
"""

import json
import logging

import pytest

from storefront.core.shared import (
    ColoredFormatter,
    JSONFormatter,
    configure_logging,
    get_logger,
    get_repository_logger,
    get_use_case_logger,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message: str = "hello", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("test.logger", level, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestFormatters:
    def test_json_formatter_includes_extra_data(self):
        output = JSONFormatter().format(_record(extra_data={"order_id": "abc", "total": 3300}))

        payload = json.loads(output)
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test.logger"
        assert payload["extra"] == {"order_id": "abc", "total": 3300}

    def test_colored_formatter_restores_levelname(self):
        record = _record(level=logging.WARNING)

        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33mWARNING\033[0m" in output
        assert record.levelname == "WARNING"


@pytest.mark.unit
class TestContextLogger:
    def test_context_is_attached(self, caplog):
        logger = get_logger("storefront.test", {"request_id": "r-1"})

        with caplog.at_level(logging.INFO, logger="storefront.test"):
            logger.info("Processed", items=2)

        record = caplog.records[-1]
        assert record.getMessage() == "Processed"
        assert record.extra_data == {"request_id": "r-1", "items": 2}

    def test_component_loggers(self, caplog):
        with caplog.at_level(logging.DEBUG):
            get_use_case_logger("create_order").info("Order created")
            get_repository_logger("order").debug("Order number collision")

        use_case_record, repository_record = caplog.records[-2:]
        assert use_case_record.name == "use_case.create_order"
        assert use_case_record.extra_data == {"component": "use_case", "use_case": "create_order"}
        assert repository_record.name == "repository.order"
        assert repository_record.extra_data == {"component": "repository", "repository": "order"}


@pytest.mark.unit
class TestConfigureLogging:
    def test_json_console_handler(self, restore_root_logger):
        configure_logging(level="WARNING", format_type="json")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_file_handler_added(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "storefront.log"

        configure_logging(level="INFO", format_type="plain", log_file=str(log_file))

        assert len(restore_root_logger.handlers) == 2
        file_handler = restore_root_logger.handlers[1]
        assert isinstance(file_handler, logging.FileHandler)
        assert isinstance(file_handler.formatter, JSONFormatter)
        file_handler.close()
