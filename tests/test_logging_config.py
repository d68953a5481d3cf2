import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.sensor_service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Reading updated",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_context() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(_record(sensor="PRESSURE", value=0, ignored="x"))

    assert output == "Reading updated | sensor=PRESSURE value=0"


def test_formatter_without_context_returns_message() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s %(message)s")

    assert formatter.format(_record()) == "INFO Reading updated"
