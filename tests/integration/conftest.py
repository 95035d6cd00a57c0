"""Fixtures for CLI integration tests."""

import pytest

from sprig.cli.main import cli


@pytest.fixture
def sprig(runner, cli_dir):
    """Invoke the CLI inside an initialized repository."""
    runner.invoke(cli, ['init'])

    def _run(*args):
        return runner.invoke(cli, list(args))

    return _run
