"""Sprig objects: blobs and commits."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, Optional
from .hash import hash_object

ROOT_MESSAGE = 'initial commit'
EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """
    Format a timezone-aware datetime the way commits record it.

    Example: ``Thu Jan 1 00:00:00 1970 +0000``
    """
    return f"{moment:%a %b} {moment.day} {moment:%H:%M:%S %Y %z}"


class SprigObject(ABC):
    """Base class for all Sprig objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """Return object type name (blob, commit)."""
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        The digest covers the serialized payload only, so a blob's digest is
        the digest of its raw content.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """40-character SHA-1 hash of this object."""
        return self.compute_hash()


class Blob(SprigObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath) -> 'Blob':
        """Create blob from the content of a file."""
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(SprigObject):
    """
    Represents a snapshot of the tracked files.

    A commit captures:
    - Log message and timestamp
    - Parent commit, plus a second parent for merges
    - Snapshot mapping each tracked path to its blob hash

    Commits are immutable once their hash has been computed.
    """

    def __init__(self):
        super().__init__()
        self.message: str = ''
        self.timestamp: str = ''
        self.parent: Optional[str] = None
        self.merge_parent: Optional[str] = None
        self.snapshot: Dict[str, str] = {}

    @property
    def parents(self) -> list:
        """Parent hashes, first parent first."""
        return [p for p in (self.parent, self.merge_parent) if p]

    @property
    def is_merge(self) -> bool:
        return self.merge_parent is not None

    def tracks(self, path: str) -> bool:
        """Return True if path is part of this commit's snapshot."""
        return path in self.snapshot

    def blob_for(self, path: str) -> Optional[str]:
        """Return the blob hash tracked for path, or None."""
        return self.snapshot.get(path)

    def serialize(self) -> bytes:
        """
        Serialize commit to Sprig format.

        Format:
        date <timestamp>
        parent <parent-hash>        (absent on the root commit)
        merge-parent <hash>         (merge commits only)
        file <blob-hash> <path>     (one per tracked path, sorted)

        <commit message>

        Returns:
            bytes: Serialized commit data
        """
        lines = [f'date {self.timestamp}']

        if self.parent:
            lines.append(f'parent {self.parent}')
        if self.merge_parent:
            lines.append(f'merge-parent {self.merge_parent}')

        for path in sorted(self.snapshot):
            lines.append(f'file {self.snapshot[path]} {path}')

        lines.append('')
        lines.append(self.message)

        return '\n'.join(lines).encode()

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from Sprig format.

        Args:
            data: Serialized commit data
        """
        lines = data.decode().split('\n')
        self.parent = None
        self.merge_parent = None
        self.snapshot = {}

        message_start = len(lines)
        for i, line in enumerate(lines):
            if not line:
                message_start = i + 1
                break

            if line.startswith('date '):
                self.timestamp = line[5:]
            elif line.startswith('parent '):
                self.parent = line[7:]
            elif line.startswith('merge-parent '):
                self.merge_parent = line[13:]
            elif line.startswith('file '):
                blob_hash, path = line[5:].split(' ', 1)
                self.snapshot[path] = blob_hash

        self.message = '\n'.join(lines[message_start:])
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        parent: Optional[str],
        snapshot: Dict[str, str],
        merge_parent: Optional[str] = None,
        moment: Optional[datetime] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            parent: Hash of the first parent (None only for the root)
            snapshot: Mapping of path to blob hash
            merge_parent: Hash of the second parent for merge commits
            moment: Commit time (defaults to the current local time)

        Returns:
            Commit: New commit object
        """
        if moment is None:
            moment = datetime.now().astimezone()

        commit = cls()
        commit.message = message
        commit.timestamp = format_timestamp(moment)
        commit.parent = parent
        commit.merge_parent = merge_parent
        commit.snapshot = dict(snapshot)
        return commit

    @classmethod
    def root(cls) -> 'Commit':
        """
        Create the root commit.

        The root has no parents, an empty snapshot and the Unix epoch in UTC as
        its timestamp, so every fresh repository produces the same root hash.
        """
        return cls.create(ROOT_MESSAGE, None, {}, moment=EPOCH)

    def __repr__(self) -> str:
        parent_info = f", parents={len(self.parents)}" if self.parents else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
