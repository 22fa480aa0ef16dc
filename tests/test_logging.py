import logging

import pytest

from samplestats.logging import (
    PACKAGE_LOGGER,
    configure_logging,
    get_logger,
    log_with_data,
)
from samplestats.stats.descriptive import stddev


@pytest.fixture
def package_logger():
    """Restore the package logger after a test configures it"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    logger.handlers = []
    try:
        yield logger
    finally:
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def test_get_logger_is_namespaced():
    assert get_logger("stats.descriptive").name == "samplestats.stats.descriptive"


def test_configure_logging_is_idempotent(package_logger):
    configure_logging(logging.DEBUG)
    configure_logging(logging.INFO)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO
    assert package_logger.propagate is False


def test_configure_logging_leaves_root_alone(package_logger):
    root_handlers = list(logging.getLogger().handlers)
    configure_logging()
    assert logging.getLogger().handlers == root_handlers


def test_log_with_data_attaches_record_data():
    """Structured data rides on the record"""
    logger = logging.getLogger("samplestats.test")
    logger.setLevel(logging.INFO)

    class ListHandler(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = ListHandler()
    logger.addHandler(handler)
    try:
        log_with_data(logger, logging.INFO, "with data", {"key": "value"})
        log_with_data(logger, logging.INFO, "without data")
    finally:
        logger.removeHandler(handler)

    assert handler.records[0].data == {"key": "value"}
    assert not hasattr(handler.records[1], "data")


def test_stddev_single_value_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="samplestats.stats.descriptive"):
        stddev([1.0])
    assert "stddev of a single value" in caplog.text
