import io
import json
import logging
import sys

import pytest

from fluentsql.logging.filters import set_logging_context
from fluentsql.logging.logger import PACKAGE_LOGGER, QueryLogFormatter, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    set_logging_context(environment=None)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="fluentsql.query_builder.base",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Started %s draft",
        args=("SELECT",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestQueryLogFormatter:

    def test_formats_standard_fields(self):
        payload = json.loads(QueryLogFormatter().format(_record()))

        assert payload["level"] == "DEBUG"
        assert payload["logger"] == "fluentsql.query_builder.base"
        assert payload["message"] == "Started SELECT draft"
        assert "timestamp" in payload
        assert "query" not in payload
        assert "error" not in payload
        assert "context" not in payload

    def test_groups_query_fields(self):
        payload = json.loads(
            QueryLogFormatter().format(_record(table="users", field_count=2, dialect="mysql"))
        )

        assert payload["query"] == {"dialect": "mysql", "table": "users", "field_count": 2}

    def test_groups_error_fields(self):
        record = _record(error_code="CONFIG_002", error_type="ConfigurationError", details={"argument": "start"})

        payload = json.loads(QueryLogFormatter().format(record))

        assert payload["error"] == {
            "error_code": "CONFIG_002",
            "error_type": "ConfigurationError",
            "details": {"argument": "start"},
        }

    def test_ignores_unrelated_extras(self):
        payload = json.loads(QueryLogFormatter().format(_record(unrelated="x")))

        assert "unrelated" not in json.dumps(payload)

    def test_includes_context(self):
        payload = json.loads(QueryLogFormatter().format(_record(log_context={"environment": "qa"})))

        assert payload["context"] == {"environment": "qa"}

    def test_includes_exception_text(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(QueryLogFormatter().format(record))

        assert "ValueError: bad" in payload["exception"]

    def test_no_span_ids_outside_span(self):
        payload = json.loads(QueryLogFormatter().format(_record()))

        assert "trace_id" not in payload
        assert "span_id" not in payload


class TestSetupLogging:

    def test_explicit_level(self, package_logger):
        setup_logging("warning")

        assert package_logger.level == logging.WARNING
        assert package_logger.propagate is False
        assert isinstance(package_logger.handlers[0].formatter, QueryLogFormatter)

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level

        setup_logging("DEBUG")

        assert root.handlers == handlers
        assert root.level == level

    def test_level_and_environment_from_settings(self, package_logger, monkeypatch):
        monkeypatch.setenv("FLUENTSQL_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FLUENTSQL_APP_ENV", "qa")

        setup_logging()
        stream = io.StringIO()
        package_logger.handlers[0].setStream(stream)
        get_logger("fluentsql.test").info("hello")

        assert package_logger.level == logging.DEBUG
        payload = json.loads(stream.getvalue().splitlines()[-1])
        assert payload["context"]["environment"] == "qa"

    def test_builder_logs_are_json(self, package_logger):
        from fluentsql.query_builder import get_mysql_query_builder

        setup_logging("DEBUG")
        stream = io.StringIO()
        package_logger.handlers[0].setStream(stream)

        get_mysql_query_builder().select("users", ["email"]).where("age", "18", ">")

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        by_message = {line["message"]: line for line in lines}
        assert by_message["Started SELECT draft"]["query"] == {
            "dialect": "mysql",
            "table": "users",
            "field_count": 1,
        }
        assert by_message["Added predicate"]["query"]["predicate_count"] == 1
        assert by_message["Started SELECT draft"]["context"]["sdk_name"] == "fluentsql"


def test_get_logger_returns_named_logger():
    assert get_logger("fluentsql.test").name == "fluentsql.test"
