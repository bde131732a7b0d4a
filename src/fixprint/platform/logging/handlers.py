"""Rich console handler for stream diagnostics.

Where: platform/logging/handlers.py
What: Render structured stream events (open/decode failures, interruption) with icons.
Why: Keep diagnostics on stderr readable while stdout carries decoded messages.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class StreamEventRichHandler(RichHandler):
    """Rich handler that renders ``stream_event`` records with dedicated styling."""

    _STREAM_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "stream.open.error": ("❌", "red"),
        "stream.decode.error": ("⛔", "red"),
        "stream.decode.skip": ("↪️", "yellow"),
        "stream.interrupted": ("ℹ️", "yellow"),
        "stream.report.error": ("❌", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "stream.open.error": "Could not open ",
        "stream.decode.error": "Decode failed",
        "stream.decode.skip": "Skipped undecodable line",
        "stream.interrupted": "interrupted",
        "stream.report.error": "Summary failed",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_source(self, source: str) -> Text:
        """Format an input path compactly, keeping only the trailing segments."""

        if source == "-":
            return Text("<stdin>", style=Style(color="white"))

        pure_path: PurePath = (
            PureWindowsPath(source) if "\\" in source else PurePosixPath(source)
        )
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        display = separator.join(parts) if parts else source
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        elif pure_path.anchor:
            display = pure_path.anchor + display

        text = Text()
        for char in display:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_stream_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured stream events with dedicated styling."""

        event = getattr(record, "stream_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._STREAM_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        source = getattr(record, "source", None)
        if event == "stream.open.error" and source:
            _ = body.append_text(self._format_source(str(source)))

        details: list[str] = []
        line_number = getattr(record, "line_number", None)
        if isinstance(line_number, int) and line_number > 0:
            details.append(f"line {line_number}")
        decoded = getattr(record, "decoded", None)
        if event == "stream.interrupted" and isinstance(decoded, int):
            details.append(f"decoded={decoded}")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f": {error_message}")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for stream events."""

        stream_text = self._render_stream_message(record)
        if stream_text is not None:
            return stream_text

        return super().render_message(record, message)


__all__ = ["StreamEventRichHandler"]
