"""Tests for the ``StreamEventRichHandler`` rendering of stream events."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from fixprint.platform.logging import StreamEventRichHandler, setup_logger


def _make_handler() -> StreamEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return StreamEventRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with stream extras for testing."""

    record = logging.LogRecord(
        name="fixprint",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_decode_error_includes_line_number_and_reason() -> None:
    handler = _make_handler()
    record = _build_record(
        stream_event="stream.decode.error",
        line_number=7,
        error_message="missing MsgType (35)",
    )

    rendered = handler.render_message(record, "ignored")

    assert isinstance(rendered, Text)
    assert "Decode failed [line 7]: missing MsgType (35)" in rendered.plain


def test_interrupted_event_mentions_interruption_and_count() -> None:
    handler = _make_handler()
    record = _build_record(stream_event="stream.interrupted", decoded=12)

    rendered = handler.render_message(record, "interrupted")

    assert isinstance(rendered, Text)
    assert "interrupted" in rendered.plain
    assert "decoded=12" in rendered.plain


def test_open_error_abbreviates_long_paths() -> None:
    """Deep input paths keep only the trailing segments behind an ellipsis."""

    handler = _make_handler()
    record = _build_record(
        stream_event="stream.open.error",
        source="/var/log/fix/engines/client/2024/session.log",
        error_message="No such file or directory",
    )

    rendered = handler.render_message(record, "ignored")

    assert isinstance(rendered, Text)
    assert "Could not open …/engines/client/2024/session.log" in rendered.plain
    assert rendered.plain.endswith("No such file or directory")


def test_open_error_on_stdin_uses_placeholder() -> None:
    handler = _make_handler()
    record = _build_record(stream_event="stream.open.error", source="-")

    rendered = handler.render_message(record, "ignored")

    assert isinstance(rendered, Text)
    assert "<stdin>" in rendered.plain


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record("plain message")

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_rebuilds_handlers(tmp_path: Any) -> None:
    """Repeated setup leaves one console handler plus an optional file handler."""

    log_file = tmp_path / "logs" / "fixprint.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)

    console_handlers = [h for h in logger.handlers if isinstance(h, StreamEventRichHandler)]
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(console_handlers) == 1
    assert console_handlers[0].level == logging.ERROR
    assert len(file_handlers) == 1
    assert log_file.parent.is_dir()

    _ = setup_logger()


def test_setup_logger_without_log_file_is_console_only(tmp_path: Any, monkeypatch: Any) -> None:
    """No file handler and no log directory unless a log file is configured."""

    monkeypatch.chdir(tmp_path)

    logger = setup_logger()

    assert [type(h) for h in logger.handlers] == [StreamEventRichHandler]
    assert not (tmp_path / "logs").exists()
