"""Fixtures for end-to-end CLI tests."""

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem so trace files stay inside the test."""
    with runner.isolated_filesystem():
        yield
