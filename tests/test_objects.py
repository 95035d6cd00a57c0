"""Object model tests."""

from datetime import datetime, timedelta, timezone

from sprig.core.hash import hash_object
from sprig.core.objects import Blob, Commit, EPOCH, format_timestamp


def test_format_timestamp_epoch():
    assert format_timestamp(EPOCH) == 'Thu Jan 1 00:00:00 1970 +0000'


def test_format_timestamp_with_offset():
    """Test the day of month is not zero padded and the offset is kept."""
    moment = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone(timedelta(hours=-8)))
    assert format_timestamp(moment) == 'Tue Mar 5 14:07:09 2024 -0800'


def test_blob_hash_is_hash_of_content():
    blob = Blob(b'Hello, World!\n')
    assert blob.hash == hash_object(b'Hello, World!\n')
    assert blob.type == 'blob'


def test_blob_from_file(tmp_path):
    path = tmp_path / 'f.txt'
    path.write_bytes(b'file content')
    assert Blob.from_file(path).data == b'file content'


def test_root_commit_serialization():
    """Test the root commit has a fixed serialized form."""
    root = Commit.root()
    assert root.serialize() == b'date Thu Jan 1 00:00:00 1970 +0000\n\ninitial commit'
    assert root.parent is None
    assert root.parents == []
    assert root.snapshot == {}


def test_root_commit_hash_is_deterministic():
    assert Commit.root().hash == Commit.root().hash


def test_commit_serialization_roundtrip():
    """Test a merge commit with files survives serialization."""
    commit = Commit.create(
        message='Merged feat into master.\nsecond line',
        parent='a' * 40,
        merge_parent='b' * 40,
        snapshot={'z.txt': 'c' * 40, 'dir/a.txt': 'd' * 40},
        moment=EPOCH,
    )

    data = commit.serialize()
    text = data.decode()
    assert text.index('file ' + 'd' * 40 + ' dir/a.txt') < text.index('file ' + 'c' * 40 + ' z.txt')

    loaded = Commit()
    loaded.deserialize(data)
    assert loaded.message == commit.message
    assert loaded.timestamp == commit.timestamp
    assert loaded.parent == 'a' * 40
    assert loaded.merge_parent == 'b' * 40
    assert loaded.is_merge
    assert loaded.snapshot == commit.snapshot
    assert loaded.hash == commit.hash


def test_path_with_spaces_roundtrip():
    commit = Commit.create('msg', 'a' * 40, {'my notes.txt': 'e' * 40}, moment=EPOCH)
    loaded = Commit()
    loaded.deserialize(commit.serialize())
    assert loaded.blob_for('my notes.txt') == 'e' * 40


def test_commit_hash_depends_on_message():
    first = Commit.create('one', None, {}, moment=EPOCH)
    second = Commit.create('two', None, {}, moment=EPOCH)
    assert first.hash != second.hash


def test_commit_tracks_and_blob_for():
    commit = Commit.create('msg', None, {'a.txt': 'f' * 40}, moment=EPOCH)
    assert commit.tracks('a.txt')
    assert not commit.tracks('b.txt')
    assert commit.blob_for('a.txt') == 'f' * 40
    assert commit.blob_for('b.txt') is None
    assert not commit.is_merge
