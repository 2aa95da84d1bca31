import logging

from foodsnap.utils.logging_config import log_error_with_context, log_job_event, setup_logger


def test_setup_logger_is_idempotent():
    logger = setup_logger("foodsnap.test-setup", "debug")
    setup_logger("foodsnap.test-setup", "debug")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logging.getLogger("google.auth").level == logging.WARNING


def test_job_event_format(caplog):
    logger = logging.getLogger("foodsnap.test-events")
    with caplog.at_level(logging.INFO, logger="foodsnap.test-events"):
        log_job_event(logger, "c-1", "published", "media m-1")
        log_job_event(logger, None, "started")

    assert caplog.messages == ["Job c-1 | published | media m-1", "Job - | started"]


def test_error_with_context_includes_job_and_type(caplog):
    logger = logging.getLogger("foodsnap.test-errors")
    with caplog.at_level(logging.ERROR, logger="foodsnap.test-errors"):
        log_error_with_context(logger, ValueError("bad"), "Publish failed", job_id="c-9")

    assert caplog.messages == ["Job c-9 | Publish failed: ValueError: bad"]
