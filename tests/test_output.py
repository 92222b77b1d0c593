"""Tests for the output formatting system and log configuration."""

from __future__ import annotations

import json
import logging

import pytest
from rich.logging import RichHandler

from hookloader.output import (
    OutputFormat,
    OutputManager,
    configure_logging,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture()
def non_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("hookloader.output._is_tty", lambda: False)


class TestFormatResolution:
    def test_auto_non_tty_is_plain(self, non_tty: None) -> None:
        assert OutputManager().format == OutputFormat.PLAIN

    def test_auto_tty_is_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("hookloader.output._is_tty", lambda: True)
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        assert OutputManager().format == OutputFormat.RICH

    def test_no_color_env_forces_plain(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("hookloader.output._is_tty", lambda: True)
        monkeypatch.setenv("NO_COLOR", "1")
        assert OutputManager().format == OutputFormat.PLAIN

    def test_explicit_format(self) -> None:
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestDataOutput:
    def test_json_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.JSON).print_table(["Name", "Version"], [["a", "1"]])
        assert json.loads(capsys.readouterr().out) == [{"Name": "a", "Version": "1"}]

    def test_plain_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.PLAIN).print_table(["Name", "Version"], [["a", "1"]])
        assert capsys.readouterr().out == "Name\tVersion\na\t1\n"

    def test_plain_dict(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.PLAIN).format_response({"log_level": "INFO"})
        assert capsys.readouterr().out == "log_level\tINFO\n"

    def test_json_response(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.JSON).format_response({"a": [1, 2]})
        assert json.loads(capsys.readouterr().out) == {"a": [1, 2]}


class TestDiagnostics:
    def test_info_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(format=OutputFormat.PLAIN, no_color=True).info("hello")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "hello\n"

    def test_quiet_suppresses_info_not_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        out.info("hidden")
        out.success("hidden")
        out.error("shown")
        out.warning("also shown")
        assert capsys.readouterr().err == "Error: shown\nWarning: also shown\n"

    def test_debug_requires_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True).debug("nope")
        OutputManager(no_color=True, verbose=True).debug("yes")
        assert capsys.readouterr().err == "[debug] yes\n"


class TestGlobalInstance:
    def test_lazy_default(self) -> None:
        reset_output()
        assert get_output() is get_output()

    def test_set_output(self) -> None:
        manager = OutputManager(format=OutputFormat.JSON)
        set_output(manager)
        assert get_output() is manager


class TestConfigureLogging:
    def test_level_from_config(self) -> None:
        configure_logging("INFO")
        assert logging.getLogger("hookloader").level == logging.INFO

    def test_verbose_forces_debug(self) -> None:
        configure_logging("ERROR", verbose=True)
        assert logging.getLogger("hookloader").level == logging.DEBUG

    def test_unknown_level_falls_back(self) -> None:
        configure_logging("LOUD")
        assert logging.getLogger("hookloader").level == logging.WARNING

    @pytest.mark.parametrize("level", ["basic_format", "root", "Handler"])
    def test_non_level_logging_attribute_falls_back(self, level: str) -> None:
        configure_logging(level)
        assert logging.getLogger("hookloader").level == logging.WARNING

    def test_single_handler_after_repeat(self) -> None:
        configure_logging()
        configure_logging()
        handlers = [h for h in logging.getLogger("hookloader").handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
