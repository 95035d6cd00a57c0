"""Configuration tests."""

import pytest

from sprig.core.config import Config, DEFAULTS, get_config, split_key


def test_repository_config_written_at_init(repo):
    assert repo.config.get('core', 'repositoryformatversion') == '0'


def test_known_keys_fall_back_to_defaults(repo):
    assert repo.config.default_branch == 'master'
    assert repo.config.stage_conflicts is False
    assert repo.config.log_level == 'WARNING'
    assert repo.config.get('merge', 'stageconflicts') == DEFAULTS[('merge', 'stageconflicts')]


def test_unknown_key_is_none(repo):
    assert repo.config.get('merge', 'strategy') is None


def test_set_persists_to_repository_file(repo):
    repo.config.set('merge', 'stageconflicts', 'yes')

    reloaded = Config(repo.config_file)
    assert reloaded.stage_conflicts is True
    assert 'stageconflicts' in repo.config_file.read_text()


def test_environment_overrides_files(repo, monkeypatch):
    repo.config.set('log', 'level', 'INFO')
    monkeypatch.setenv('SPRIG_LOG_LEVEL', 'DEBUG')
    assert repo.config.log_level == 'DEBUG'


def test_repository_overrides_global(repo):
    Config().set('core', 'defaultbranch', 'main', global_config=True)
    assert Config().default_branch == 'main'
    assert Config(repo.config_file).default_branch == 'main'

    repo.config.set('core', 'defaultbranch', 'trunk')
    assert Config(repo.config_file).default_branch == 'trunk'


def test_global_default_branch_used_at_init(tmp_path):
    from sprig.core.repository import Repository

    Config().set('core', 'defaultbranch', 'main', global_config=True)
    repo = Repository(str(tmp_path / 'project')).init()
    assert repo.refs.current == 'main'


def test_entries_report_scope(repo):
    Config().set('user', 'editor', 'vi', global_config=True)
    entries = Config(repo.config_file).entries()

    assert ('user.editor', 'vi', 'global') in entries
    assert ('core.repositoryformatversion', '0', 'repository') in entries
    assert Config(repo.config_file).entries(global_only=True) == [('user.editor', 'vi', 'global')]


def test_split_key():
    assert split_key('merge.stageconflicts') == ('merge', 'stageconflicts')
    assert split_key('defaultbranch') == ('core', 'defaultbranch')


def test_set_without_repository_fails():
    with pytest.raises(ValueError):
        Config().set('core', 'defaultbranch', 'main')


def test_get_config(repo):
    assert get_config(repo) is repo.config
    assert get_config().repo_config_path is None
