"""Tests for output sinks."""

from __future__ import annotations

from io import StringIO

import pytest

from toyrobot.output.console import create_console
from toyrobot.output.sinks import BufferSink, ConsoleSink, EchoSink


class TestBufferSink:
    def test_collects_lines(self) -> None:
        sink = BufferSink()
        sink.write_line("0,1,NORTH")
        sink.write_line("Usage:")
        assert sink.lines == ["0,1,NORTH", "Usage:"]
        assert sink.getvalue() == "0,1,NORTH\nUsage:\n"
        sink.clear()
        assert sink.getvalue() == ""


class TestEchoSink:
    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        EchoSink().write_line("2,2,EAST")
        captured = capsys.readouterr()
        assert captured.out == "2,2,EAST\n"
        assert captured.err == ""

    def test_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        EchoSink(err=True).write_line("oops")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "oops\n"


class TestConsoleSink:
    def test_theme_styles_errors(self) -> None:
        console = create_console(file=StringIO())
        assert str(console.get_style("toy.error")) == "bold red"

    def test_plain_text_without_markup(self) -> None:
        buffer = StringIO()
        console = create_console(file=buffer, no_color=True)
        sink = ConsoleSink(console, style="toy.error")
        sink.write_line("Error processing file: [bold]x.txt[/bold]; :smile:")
        assert buffer.getvalue() == "Error processing file: [bold]x.txt[/bold]; :smile:\n"

    def test_long_lines_not_wrapped(self) -> None:
        buffer = StringIO()
        sink = ConsoleSink(create_console(file=buffer, no_color=True))
        line = "Error processing file: " + "/very/long/path" * 20
        sink.write_line(line)
        assert buffer.getvalue() == line + "\n"
