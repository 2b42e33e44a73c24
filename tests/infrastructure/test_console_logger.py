from __future__ import annotations

import io
import json

from httpc_test.infrastructure.logging.console_logger import ConsoleLogger


def test_console_logger_emits_type_field(capsys) -> None:
    logger = ConsoleLogger()

    logger.info("http.request", method="GET")

    captured = capsys.readouterr()
    line = captured.err.strip()

    assert captured.out == ""
    assert line.startswith("http.request ")
    payload = json.loads(line.replace("http.request ", "", 1))
    assert payload["type"] == "http.request"
    assert payload["level"] == "info"
    assert payload["method"] == "GET"


def test_console_logger_filters_below_level() -> None:
    out = io.StringIO()
    logger = ConsoleLogger(level="INFO", stream=out)

    logger.debug("http.cookie_diff", added=["a"])
    logger.error("http.transport_failed", error="refused")

    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("http.transport_failed ")


def test_console_logger_bind_keeps_settings() -> None:
    out = io.StringIO()
    logger = ConsoleLogger(level="INFO", stream=out).bind(run="r1")

    logger.info("http.response", status=200)

    payload = json.loads(out.getvalue().split(" ", 1)[1])
    assert payload["run"] == "r1"
    assert payload["status"] == 200
