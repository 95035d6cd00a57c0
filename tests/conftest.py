"""Shared pytest fixtures for Sprig tests."""

import os
import shutil
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

from sprig.core.config import Config
from sprig.core.repository import Repository
from sprig.operations.commit import create_commit


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep the user's ~/.sprigconfig and SPRIG_* variables out of every test."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.sprigconfig')
    for key in list(os.environ):
        if key.startswith('SPRIG_'):
            monkeypatch.delenv(key)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository(str(temp_dir)).init()


@pytest.fixture
def write_file(repo):
    """Write a working tree file, creating parent directories."""
    def _write(path, content):
        full_path = repo.work_tree / path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)
        return full_path
    return _write


@pytest.fixture
def commit_files(repo, write_file):
    """
    Helper to write, stage and commit files in one step.

    Each call is given a distinct timestamp so that otherwise identical
    commits on different branches never share a hash.

    Returns:
        callable(files, message, remove=()) -> commit hash
    """
    clock = {'moment': datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)}

    def _commit(files, message, remove=()):
        for path, content in files.items():
            write_file(path, content)
            repo.index.stage_addition(path)
        for path in remove:
            repo.index.stage_removal(path)

        clock['moment'] += timedelta(minutes=1)
        return create_commit(repo, message, moment=clock['moment']).hash

    return _commit


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def cli_dir(temp_dir, monkeypatch):
    """An empty working directory the CLI runs in."""
    monkeypatch.chdir(temp_dir)
    return temp_dir
