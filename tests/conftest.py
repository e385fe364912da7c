"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from linecat.cli import cli


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point LINECAT_CONFIG_DIR at an empty directory for every test.

    This keeps a developer's own ~/.config/linecat/linecat.toml from
    enabling features behind the tests' back.
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("LINECAT_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["-n", "file.txt"])
        result = invoke(["--encode-base64"], input_data="Line 1\\n")

    ``result.stdout`` holds standard output only; ``result.output`` also
    carries what was written to stderr.
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def sample_text():
    """Three short lines, as used throughout the examples."""
    return "Line 1\nLine 2\nLine 3\n"


@pytest.fixture
def sample_file(tmp_path, sample_text):
    """Provide path to a file holding ``sample_text``."""
    path = tmp_path / "sample.txt"
    path.write_text(sample_text)
    return path


@pytest.fixture
def blank_runs_file(tmp_path):
    """Provide a file with a run of blank lines and an isolated one."""
    path = tmp_path / "blanks.txt"
    path.write_text("Line 1\n\n\nLine 2\n\nLine 3\n")
    return path
