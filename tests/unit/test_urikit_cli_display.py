"""Tests for CLI display plumbing."""

import json
from types import SimpleNamespace

import pytest
import yaml

from urikit.api.StageResult import StageResult
from urikit.cli._handle_stage_result import _extract_display_format
from urikit.cli._run_single_execution import _run_single_execution
from urikit.cli.display.CLIDisplay import CLIDisplay
from urikit.cli.display.Display import Display


class RecordingDisplay(Display):
    def __init__(self):
        self.events = []

    def status(self, message, **kwargs):
        self.events.append(("status", message))

    def success(self, message, **kwargs):
        self.events.append(("success", message))

    def error(self, message, **kwargs):
        self.events.append(("error", message))

    def warning(self, message, **kwargs):
        self.events.append(("warning", message))

    def info(self, message, **kwargs):
        self.events.append(("info", message))

    def json_output(self, data, **kwargs):
        self.events.append(("output", data, kwargs.get("format")))


def _command(success=True, output=None, result="done"):
    def do_work(result_obj):
        yield (0.5, "Working...")
        result_obj.result = result
        result_obj.output = {"warnings": ["careful"]} if output is None else output
        result_obj.success = success

    return StageResult(announce="Starting...", progress_callback=do_work)


def test_stages_in_order():
    display = RecordingDisplay()
    with pytest.raises(SystemExit) as exc_info:
        _run_single_execution(_command, (), {}, display, "json")
    assert exc_info.value.code == 0
    assert display.events == [
        ("status", "Starting..."),
        ("info", "Progress: Working... (50.0%)"),
        ("warning", "careful"),
        ("success", "done"),
        ("output", {"warnings": ["careful"]}, "json"),
    ]


def test_failure_exits_one():
    display = RecordingDisplay()
    with pytest.raises(SystemExit) as exc_info:
        _run_single_execution(_command, (), {"success": False}, display, "yaml")
    assert exc_info.value.code == 1
    assert ("error", "done") in display.events


def test_empty_result_is_rejected():
    with pytest.raises(ValueError, match="result.result"):
        _run_single_execution(_command, (), {"result": ""}, RecordingDisplay(), "yaml")


def test_empty_output_is_rejected():
    with pytest.raises(ValueError, match="result.output"):
        _run_single_execution(_command, (), {"output": {}}, RecordingDisplay(), "yaml")


def test_cli_display_yaml_output(capsys):
    CLIDisplay().json_output({"uri": "file:///c%3A/x", "path": "/c:/x"}, format="yaml")
    out = capsys.readouterr().out
    assert yaml.safe_load(out) == {"uri": "file:///c%3A/x", "path": "/c:/x"}
    assert out.index("uri") < out.index("path")


def test_cli_display_json_output(capsys):
    CLIDisplay().json_output({"path": "/zürich"}, format="json")
    out = capsys.readouterr().out
    assert "zürich" in out
    assert json.loads(out) == {"path": "/zürich"}


def test_cli_display_messages_go_to_stderr(capsys):
    display = CLIDisplay()
    display.status("announce")
    display.success("ok")
    display.error("bad", details="more")
    display.warning("hmm")
    captured = capsys.readouterr()
    assert captured.out == ""
    for text in ("announce", "ok", "bad", "more", "hmm"):
        assert text in captured.err


def test_display_format_read_from_root_context():
    root = SimpleNamespace(obj={"display_format": "json"}, parent=None)
    group = SimpleNamespace(obj={"display_format": "json"}, parent=root)
    command = SimpleNamespace(obj=None, parent=group)
    assert _extract_display_format(command) == "json"


def test_display_format_defaults_to_yaml():
    assert _extract_display_format(None) == "yaml"
    assert _extract_display_format(SimpleNamespace(obj=None, parent=None)) == "yaml"
    assert _extract_display_format(SimpleNamespace(obj={"display_format": "xml"}, parent=None)) == "yaml"
