import sys
from io import StringIO

import pytest
from loguru import logger

from igrest.log_config import configure_logging, redact_tokens


def test_configure_logging_default_level_and_sink():
    """Test configure_logging with default INFO level and stderr sink."""
    logger.remove()  # Ensure clean state
    initial_handlers_count = len(logger._core.handlers)

    configure_logging()  # Defaults to INFO and sys.stderr

    assert len(logger._core.handlers) == initial_handlers_count + 1
    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level("INFO").no


def test_configure_logging_custom_level_debug():
    """Test configure_logging with a custom DEBUG level."""
    logger.remove()
    configure_logging(level="debug")
    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level("DEBUG").no


def test_configure_logging_removes_existing_handlers():
    """Test that configure_logging removes pre-existing handlers."""
    logger.remove()
    logger.add(lambda _: None, level="ERROR")
    assert len(logger._core.handlers) == 1

    configure_logging(level="INFO")

    assert len(logger._core.handlers) == 1


def test_configure_logging_writes_to_custom_sink():
    """Test that messages at or above the level reach a custom sink."""
    sink = StringIO()
    configure_logging(level="WARNING", sink=sink)

    logger.info("hidden message")
    logger.warning("visible message")

    output = sink.getvalue()
    assert "visible message" in output
    assert "hidden message" not in output
    assert "\x1b[" not in output  # not colorized


def test_configure_logging_tags_records_with_library_name():
    sink = StringIO()
    configure_logging(level="INFO", sink=sink)

    logger.info("hello")

    assert " | igrest | " in sink.getvalue()


@pytest.mark.parametrize(
    "message",
    [
        "Authorization: Bearer abc.DEF-123",
        "headers={'Authorization': 'Bearer abc.DEF-123'}",
        "token is bearer abc.DEF-123 here",
    ],
)
def test_configure_logging_masks_bearer_tokens(message):
    sink = StringIO()
    configure_logging(level="INFO", sink=sink)

    logger.info(message)

    output = sink.getvalue()
    assert "abc.DEF-123" not in output
    assert "***" in output


def test_redact_tokens_leaves_other_messages_alone():
    record = {"message": "Sending request: GET https://example.com/markets"}
    redact_tokens(record)
    assert record["message"] == "Sending request: GET https://example.com/markets"


@pytest.fixture(autouse=True)
def reset_logger_after_test():
    """Fixture to reset Loguru to a default state after each test in this module."""
    yield
    logger.remove()
    logger.configure(patcher=None)
    logger.add(sys.stderr, level="INFO")
