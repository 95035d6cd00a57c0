"""Commit creation and history tests."""

from datetime import datetime, timezone

import pytest

from sprig.core.objects import Commit
from sprig.errors import EmptyMessage, NoMatchingCommit, NothingToCommit
from sprig.operations.commit import all_commits, create_commit, find_by_message, first_parent_history


def test_commit_requires_staged_changes(repo):
    with pytest.raises(NothingToCommit) as exc:
        create_commit(repo, 'nothing')
    assert exc.value.message == 'No changes added to the commit.'


def test_commit_requires_message(repo, write_file):
    """Test the message is checked before the staging area."""
    with pytest.raises(EmptyMessage):
        create_commit(repo, '')

    write_file('a.txt', 'x')
    repo.index.stage_addition('a.txt')
    with pytest.raises(EmptyMessage):
        create_commit(repo, '   ')
    assert repo.index.staged_additions() == ['a.txt']


def test_commit_records_staged_content(repo, write_file):
    write_file('a.txt', 'staged')
    repo.index.stage_addition('a.txt')
    write_file('a.txt', 'edited later')

    moment = datetime(2024, 6, 1, 9, 30, 0, tzinfo=timezone.utc)
    commit = create_commit(repo, 'add a', moment=moment)

    assert commit.parent == Commit.root().hash
    assert commit.timestamp == 'Sat Jun 1 09:30:00 2024 +0000'
    assert repo.get_blob(commit.blob_for('a.txt')) == b'staged'
    assert repo.refs.current_commit_hash() == commit.hash
    assert repo.index.is_empty()


def test_commit_inherits_parent_snapshot(repo, commit_files):
    first = commit_files({'a.txt': 'a', 'b.txt': 'b'}, 'two files')
    second = commit_files({'b.txt': 'B'}, 'change b')

    parent = repo.read_commit(first)
    child = repo.read_commit(second)
    assert child.blob_for('a.txt') == parent.blob_for('a.txt')
    assert child.blob_for('b.txt') != parent.blob_for('b.txt')


def test_commit_applies_removals(repo, commit_files):
    commit_files({'a.txt': 'a', 'b.txt': 'b'}, 'two files')
    head = commit_files({}, 'drop a', remove=['a.txt'])

    assert sorted(repo.read_commit(head).snapshot) == ['b.txt']


def test_commit_with_merge_parent_needs_no_staging(repo, commit_files):
    other = commit_files({'a.txt': 'a'}, 'one')
    commit = create_commit(repo, 'merge marker', merge_parent=other)
    assert commit.is_merge
    assert commit.parents == [other, commit.merge_parent]


def test_first_parent_history_order(repo, commit_files):
    first = commit_files({'a.txt': '1'}, 'one')
    second = commit_files({'a.txt': '2'}, 'two')

    hashes = [h for h, _ in first_parent_history(repo)]
    assert hashes == [second, first, Commit.root().hash]


def test_all_commits_sorted_by_hash(repo, commit_files):
    commit_files({'a.txt': '1'}, 'one')
    commit_files({'a.txt': '2'}, 'two')

    hashes = [h for h, _ in all_commits(repo)]
    assert len(hashes) == 3
    assert hashes == sorted(hashes)


def test_find_by_message(repo, commit_files):
    first = commit_files({'a.txt': '1'}, 'same')
    second = commit_files({'a.txt': '2'}, 'same')
    commit_files({'a.txt': '3'}, 'other')

    assert find_by_message(repo, 'same') == sorted([first, second])
    assert find_by_message(repo, 'initial commit') == [Commit.root().hash]


def test_find_by_message_no_match(repo):
    with pytest.raises(NoMatchingCommit):
        find_by_message(repo, 'missing')
