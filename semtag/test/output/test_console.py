"""Tests for semtag.output.console module."""

from __future__ import annotations

import pytest

from semtag.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.WARNING) == "warning"
        assert str(Style.INFO) == "info"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.info("a")
        console.warning("b")
        console.error("c")
        console.success("d")
        assert console.messages == ["info: a", "warning: b", "error: c", "OK d"]

    def test_helpers(self) -> None:
        console = MockConsole()
        console.info("Current commit not tagged")
        console.warning("No tags are present")

        assert console.has_warning()
        assert not console.has_error()
        assert console.count(Style.INFO) == 1
        assert len(console.find("tags")) == 1
        assert console.text == "info: Current commit not tagged\nwarning: No tags are present"

        console.clear()
        assert console.outputs == []

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.newline()


class TestRichConsole:
    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.info("Checked out tag is v1.0.0")
        console.print("plain [not markup]")

        out = capsys.readouterr().out
        assert "info: Checked out tag is v1.0.0" in out
        assert "plain [not markup]" in out

    def test_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole(stderr=True)
        console.warning("No tags are present")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "warning: No tags are present" in captured.err
