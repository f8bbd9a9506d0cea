import io
import json
import logging

import structlog

from placement_portal.core.logging import get_logger, setup_logging


def test_json_lines_carry_event_and_context():
    stream = io.StringIO()
    setup_logging(json_logs=True, stream=stream)

    structlog.contextvars.bind_contextvars(request_id="req-1")
    try:
        get_logger("tests.logging").info("job_created", job_id=9)
    finally:
        structlog.contextvars.clear_contextvars()

    line = json.loads(stream.getvalue().splitlines()[-1])
    assert line["event"] == "job_created"
    assert line["job_id"] == 9
    assert line["request_id"] == "req-1"
    assert line["level"] == "info"
    assert line["logger"] == "tests.logging"


def test_stdlib_records_share_the_format():
    stream = io.StringIO()
    setup_logging(json_logs=True, stream=stream)

    logging.getLogger("tests.stdlib").warning("plain %s", "message")

    line = json.loads(stream.getvalue().splitlines()[-1])
    assert line["event"] == "plain message"
    assert line["level"] == "warning"
    assert "timestamp" in line


def test_setup_replaces_handlers_and_quiets_libraries():
    setup_logging(json_logs=False, stream=io.StringIO())
    setup_logging(json_logs=False, stream=io.StringIO())

    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
