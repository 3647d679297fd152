"""Unit tests for the urikit CLI."""

import json
from unittest.mock import patch

import pytest
import yaml
from typer.testing import CliRunner

from urikit.api.platform.get_platform_config import get_platform_config
from urikit.cli import main
from urikit.cli._create_app import _create_app
from urikit.cli.path import path
from urikit.cli.uri import uri

runner = CliRunner()

pytestmark = pytest.mark.cli


@pytest.fixture
def no_logging_setup():
    """Keep the CLI callback from installing handlers on the urikit logger."""
    with patch("urikit.cli._create_app.configure_logging") as mock_configure:
        yield mock_configure


class TestUriApp:
    def test_parse_yaml(self, posix_platform):
        result = runner.invoke(uri(), ["parse", "file://shares/files/c%23/p.cs"])
        assert result.exit_code == 0
        output = yaml.safe_load(result.stdout)
        assert output["uri"] == "file://shares/files/c%23/p.cs"
        assert output["authority"] == "shares"
        assert output["path"] == "/files/c#/p.cs"
        assert output["fs_path"] == "//shares/files/c#/p.cs"
        assert "Parsed file://shares/files/c%23/p.cs" in result.stderr

    def test_parse_invalid(self):
        result = runner.invoke(uri(), ["parse", "file:////shares/p.cs"])
        assert result.exit_code == 1
        output = yaml.safe_load(result.stdout)
        assert output["errors"]
        assert "Invalid URI" in result.stderr

    def test_file(self, posix_platform):
        result = runner.invoke(uri(), ["file", "c:\\win\\path"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["uri"] == "file:///c%3A/win/path"

    def test_file_warning(self):
        result = runner.invoke(uri(), ["file", "http://example.com"])
        assert result.exit_code == 0
        assert "Path looks like a URI already" in result.stderr

    def test_build(self):
        result = runner.invoke(
            uri(), ["build", "-s", "http", "-a", "a-test-site.com", "-p", "/", "-q", "test=true", "-f", "top"]
        )
        assert result.exit_code == 0
        output = yaml.safe_load(result.stdout)
        assert output["uri"] == "http://a-test-site.com/?test%3Dtrue#top"
        assert output["readable"] == "http://a-test-site.com/?test=true#top"

    def test_build_invalid(self):
        result = runner.invoke(uri(), ["build", "--scheme", "http", "--authority", "host", "--path", "x"])
        assert result.exit_code == 1
        assert yaml.safe_load(result.stdout)["errors"]


class TestPathApp:
    def test_join(self):
        result = runner.invoke(path(), ["join", "foo://a/foo/bar/", "x/", "/y"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["uri"] == "foo://a/foo/bar/x/y"

    def test_resolve(self):
        result = runner.invoke(path(), ["resolve", "foo://a/foo/bar/", "/x"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["uri"] == "foo://a/x"

    def test_dirname(self):
        result = runner.invoke(path(), ["dirname", "foo://a/some/file/"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["uri"] == "foo://a/some"

    def test_dirname_warning(self):
        result = runner.invoke(path(), ["dirname", "foo://a"])
        assert result.exit_code == 0
        assert "URI unchanged" in result.stderr

    def test_basename(self):
        result = runner.invoke(path(), ["basename", "foo://a/some/file/test.txt"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["value"] == "test.txt"

    def test_extname(self):
        result = runner.invoke(path(), ["extname", "foo://a/foo/.foo"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["value"] == ""

    def test_join_requires_segments(self):
        result = runner.invoke(path(), ["join", "foo://a"])
        assert result.exit_code == 2


class TestMainApp:
    def test_json_display(self, no_logging_setup):
        result = runner.invoke(_create_app(), ["--display", "json", "uri", "parse", "http://host/a"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["uri"] == "http://host/a"
        no_logging_setup.assert_called_once()

    def test_json_display_reaches_path_commands(self, no_logging_setup):
        result = runner.invoke(_create_app(), ["-d", "json", "path", "join", "foo://a", "x", ".."])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["uri"] == "foo://a/"

    def test_yaml_display_is_default(self, no_logging_setup):
        result = runner.invoke(_create_app(), ["path", "basename", "foo://a/b.txt"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["value"] == "b.txt"

    def test_invalid_display(self, no_logging_setup):
        result = runner.invoke(_create_app(), ["-d", "xml", "uri", "parse", "foo:bar"])
        assert result.exit_code == 1
        assert "--display must be 'json' or 'yaml'" in result.stderr

    def test_invalid_config(self, no_logging_setup, monkeypatch):
        monkeypatch.setenv("URIKIT_LOG_LEVEL", "loud")
        result = runner.invoke(_create_app(), ["uri", "parse", "foo:bar"])
        assert result.exit_code == 2
        assert "Configuration validation error" in result.stderr
        no_logging_setup.assert_not_called()

    def test_platform_from_environment(self, no_logging_setup, monkeypatch):
        monkeypatch.setenv("URIKIT_WINDOWS_PATHS", "1")
        result = runner.invoke(_create_app(), ["-d", "json", "uri", "parse", "file:///C:/x/y"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["fs_path"] == "c:\\x\\y"
        assert get_platform_config().windows_paths is True

    def test_no_command_shows_help(self, no_logging_setup):
        result = runner.invoke(_create_app(), [])
        assert result.exit_code == 0
        assert "uri" in result.stdout
        assert "path" in result.stdout


class TestMain:
    @pytest.mark.parametrize("flag", ["--version", "-v"])
    def test_version(self, capsys, flag):
        assert main([flag]) == 0
        assert capsys.readouterr().out.startswith("urikit ")

    def test_runs_command(self, no_logging_setup, capsys):
        assert main(["-d", "json", "path", "extname", "foo://a/b.tar.gz"]) == 0
        assert json.loads(capsys.readouterr().out)["value"] == ".gz"

    def test_returns_failure_code(self, no_logging_setup, capsys):
        assert main(["uri", "parse", "file:////x"]) == 1
        assert "errors" in capsys.readouterr().out

    def test_usage_error(self, no_logging_setup):
        assert main(["uri", "nope"]) == 2
