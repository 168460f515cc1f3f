import io

from shooter.logger import get_logger


def test_logger_info_output():
    buf = io.StringIO()
    logger = get_logger("test")
    logger.stream = buf
    logger.set_level("INFO")
    logger.info("Hello", "World")
    out = buf.getvalue()
    assert "INFO" in out and "test: Hello World" in out


def test_logger_filters_below_min_level():
    buf = io.StringIO()
    logger = get_logger("test")
    logger.stream = buf
    logger.set_level("WARN")
    logger.debug("hidden")
    logger.info("hidden")
    logger.error("shown")
    assert "hidden" not in buf.getvalue()
    assert "ERROR" in buf.getvalue()


def test_logger_tolerates_closed_stream():
    buf = io.StringIO()
    buf.close()
    logger = get_logger("test")
    logger.stream = buf
    logger.error("dropped")  # must not raise


def test_logger_without_stream():
    logger = get_logger("test")
    logger.stream = None
    logger.error("dropped")
