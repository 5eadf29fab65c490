"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from jsonpp.cli import cli
from jsonpp.context import INDENT_ENV


@pytest.fixture(autouse=True)
def clear_indent_env(monkeypatch):
    """Run every test with the default indent unless it sets one itself."""
    monkeypatch.delenv(INDENT_ENV, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args, optional input and environment.

    Usage:
        result = invoke(["data.ndjson"])
        result = invoke([], input_data=b'{"a":1}\\n')
        result = invoke(["-s"], input_data=doc, env={"JSONPP_INDENT": "\\t"})

    ``result.stdout`` holds only formatted documents, ``result.stderr``
    only diagnostics.
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def sample_ndjson():
    """Provide sample NDJSON data as bytes."""
    return b'{"name":"Alice","age":30}\n{"name":"Bob","age":25}\n'
