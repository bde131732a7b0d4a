"""Shared pytest fixtures: config isolation and stub stream collaborators."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from fixprint.config.config import Config
from fixprint.features.stream import DecodeResult, UnknownMessageTypeError
from fixprint.ui.cli.display.report import make_output_console


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point configuration at a missing file so a local config never leaks in."""

    monkeypatch.setenv("FIXPRINT_CONFIG", str(tmp_path / "absent" / "config.toml"))
    Config.reset()
    try:
        yield None
    finally:
        Config.reset()


@dataclass(frozen=True)
class StubMessage:
    """Minimal decoded message for driving the loop."""

    type_tag: str
    text: str

    def render(self) -> str:
        return f"msg:{self.text}"


@dataclass
class StubDecoder:
    """Decoder double.

    Lines starting with ``!`` fail. The type tag is the value of ``35=`` when
    present, otherwise the first character.
    """

    calls: list[bytes] = field(default_factory=list)
    on_decode: Callable[[int], None] | None = None

    def decode(self, line: bytes) -> DecodeResult:
        self.calls.append(line)
        if self.on_decode is not None:
            self.on_decode(len(self.calls))
        text = line.decode("latin-1")
        if text.startswith("!"):
            return DecodeResult.failure(f"rejected {text}")
        if "35=" in text:
            tag = text.split("35=", 1)[1].split("|", 1)[0]
        else:
            tag = text[0]
        return DecodeResult.success(StubMessage(type_tag=tag, text=text))


@dataclass
class StubRegistry:
    """Registry double backed by a plain mapping."""

    names: dict[str, str] = field(default_factory=dict)

    def lookup(self, tag: str) -> str:
        try:
            return self.names[tag]
        except KeyError:
            raise UnknownMessageTypeError(tag) from None


@pytest.fixture
def stub_decoder() -> StubDecoder:
    return StubDecoder()


@pytest.fixture
def stub_registry() -> StubRegistry:
    return StubRegistry(names={"D": "NewOrderSingle", "8": "ExecutionReport", "A": "Logon"})


@pytest.fixture
def output() -> StringIO:
    """Buffer capturing everything written to the output console."""

    return StringIO()


@pytest.fixture
def output_console(output: StringIO) -> Console:
    return make_output_console(output)
