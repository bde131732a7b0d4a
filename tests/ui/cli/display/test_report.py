"""Tests for the end-of-run report display."""

from __future__ import annotations

from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from fixprint.features.stream import LoopState, StreamRunResult, SummaryAggregator, UnknownMessageTypeError
from fixprint.ui.cli.display import ReportDisplay


def _summary(*tags: str) -> SummaryAggregator:
    summary = SummaryAggregator()
    for tag in tags:
        summary.record(tag)
    return summary


def test_totals_only_without_summary(
    stub_registry: Any, output_console: Console, output: StringIO
) -> None:
    display = ReportDisplay(stub_registry, output_console)

    display.show_report(StreamRunResult(state=LoopState.STOPPED, decoded=5))

    assert output.getvalue().splitlines() == ["5 messages decoded."]


def test_summary_table_in_first_seen_order(
    stub_registry: Any, output_console: Console, output: StringIO
) -> None:
    display = ReportDisplay(stub_registry, output_console)
    result = StreamRunResult(state=LoopState.STOPPED, decoded=4, summary=_summary("D", "8", "D", "A"))

    display.show_report(result)

    lines = output.getvalue().splitlines()
    assert lines[0] == "4 messages decoded."
    assert len(lines) == 4
    assert lines[1:] == [
        "NewOrderSingle".ljust(20) + ' ("D")\t2',
        "ExecutionReport".ljust(20) + ' ("8")\t1',
        "Logon".ljust(20) + ' ("A")\t1',
    ]


def test_skipped_lines_are_reported(
    stub_registry: Any, output_console: Console, output: StringIO
) -> None:
    display = ReportDisplay(stub_registry, output_console)

    display.show_report(StreamRunResult(state=LoopState.STOPPED, decoded=2, skipped=3))

    assert output.getvalue().splitlines() == ["2 messages decoded.", "3 lines skipped."]


def test_empty_summary_prints_only_totals(
    stub_registry: Any, output_console: Console, output: StringIO
) -> None:
    display = ReportDisplay(stub_registry, output_console)

    display.show_report(StreamRunResult(state=LoopState.INTERRUPTED, summary=SummaryAggregator()))

    assert output.getvalue().splitlines() == ["0 messages decoded."]


def test_registry_miss_is_fatal_and_prints_no_rows(
    stub_registry: Any, output_console: Console, output: StringIO
) -> None:
    """A tag missing from the registry raises after totals, without partial rows."""

    display = ReportDisplay(stub_registry, output_console)
    result = StreamRunResult(state=LoopState.STOPPED, decoded=2, summary=_summary("D", "Q9"))

    with pytest.raises(UnknownMessageTypeError) as excinfo:
        display.show_report(result)

    assert excinfo.value.tag == "Q9"
    assert output.getvalue().splitlines() == ["2 messages decoded."]
