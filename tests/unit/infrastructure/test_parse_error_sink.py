"""Tests for LoggingParseErrorSink."""

from __future__ import annotations

from pathlib import Path

from structlog.testing import capture_logs

from indexarr.domain.indexers import ParseError
from indexarr.infrastructure.indexers.diagnostics import LoggingParseErrorSink


def test_report_logs_warning() -> None:
    sink = LoggingParseErrorSink("testzone")
    error = ParseError(message="row 2: invalid 'seeders'", raw="{}", row_index=2)

    with capture_logs() as logs:
        sink.report('{"id": 2}', error)

    assert sink.reported == 1
    entry = logs[0]
    assert entry["event"] == "indexer_parse_error"
    assert entry["log_level"] == "warning"
    assert entry["indexer"] == "testzone"
    assert entry["row_index"] == 2
    assert entry["batch_level"] is False
    assert entry["raw"] == '{"id": 2}'


def test_long_payload_truncated_in_log() -> None:
    sink = LoggingParseErrorSink("testzone", max_logged_chars=10)
    with capture_logs() as logs:
        sink.report("x" * 50, ParseError(message="bad", raw="x" * 50))
    assert logs[0]["raw"] == "x" * 10 + "..."


def test_no_dump_without_directory(tmp_path: Path) -> None:
    sink = LoggingParseErrorSink("testzone")
    sink.report("<html/>", ParseError(message="bad", raw="<html/>"))
    assert list(tmp_path.iterdir()) == []


def test_dump_writes_full_payload(tmp_path: Path) -> None:
    dump_dir = tmp_path / "dumps"
    sink = LoggingParseErrorSink("testzone", dump_dir=dump_dir, max_logged_chars=5)

    sink.report("<html>long body</html>", ParseError(message="not JSON", raw="x"))
    sink.report('{"id": 1}', ParseError(message="row", raw="x", row_index=4))

    files = sorted(p.name for p in dump_dir.iterdir())
    assert len(files) == 2
    assert all(name.startswith("testzone-") for name in files)
    assert any(name.endswith("-row4.txt") for name in files)
    batch_file = next(p for p in dump_dir.iterdir() if "-row" not in p.name)
    assert batch_file.read_text(encoding="utf-8") == "not JSON\n\n<html>long body</html>"


def test_dump_failure_is_logged_not_raised(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    sink = LoggingParseErrorSink("testzone", dump_dir=blocker / "sub")

    with capture_logs() as logs:
        sink.report("raw", ParseError(message="bad", raw="raw"))

    assert sink.reported == 1
    assert logs[-1]["event"] == "indexer_parse_error_dump_failed"
